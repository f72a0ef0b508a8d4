from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable, Tuple, Union

from ._ids import extract_id

# A cast target is always stored as a path of keys. A top-level key is a path
# of length one, so casting "customer" by key or by path is the same target.
CastTarget = Tuple[str, ...]


def to_cast_target(target: Union[str, Iterable[str]]) -> CastTarget:
    if isinstance(target, str):
        return (target,)
    path = tuple(target)
    if not path or not all(isinstance(key, str) for key in path):
        raise ValueError(f"Cast path must be a non-empty sequence of keys, got {target!r}")
    return path


def apply_casts(
    params: Mapping[str, Any], cast_to_id: FrozenSet[CastTarget]
) -> dict[str, Any]:
    """Replace resource objects with their IDs at every cast target.

    Targets whose path does not exist in ``params`` are skipped, as are
    leaves that are not resource objects. ``params`` itself is never mutated;
    every mapping along a rewritten path is copied.

    Args:
        params: The request parameters.
        cast_to_id: Paths of keys that should hold plain IDs.

    Returns:
        dict[str, Any]: The parameters with the casts applied.
    """
    result = dict(params)
    for path in sorted(cast_to_id):
        result = _cast_path(result, path)
    return result


def _cast_path(params: Mapping[str, Any], path: CastTarget) -> dict[str, Any]:
    key, rest = path[0], path[1:]
    if key not in params:
        return dict(params)

    value = params[key]
    if rest:
        if not isinstance(value, Mapping):
            return dict(params)
        replacement: Any = _cast_path(value, rest)
    else:
        object_id = extract_id(value)
        if object_id is None:
            return dict(params)
        replacement = object_id

    return {**params, key: replacement}
