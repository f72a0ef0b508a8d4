from typing import Any, Dict, Iterable

import click
from pydantic import BaseModel


def parse_params(pairs: Iterable[str]) -> Dict[str, Any]:
    """Turn ``key=value`` pairs into params; dotted keys build nested maps.

    ``("amount=100", "metadata.order=6")`` gives
    ``{"amount": "100", "metadata": {"order": "6"}}``.
    """
    params: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got {pair!r}")

        *parents, leaf = key.split(".")
        target = params
        for parent in parents:
            child = target.setdefault(parent, {})
            if not isinstance(child, dict):
                raise click.BadParameter(f"{parent!r} is both a value and a map")
            target = child
        target[leaf] = value
    return params


def serialize_object(obj: Any) -> Any:
    """Recursively turn converted results back into JSON compatible data."""
    if isinstance(obj, BaseModel):
        return serialize_object(obj.model_dump(mode="json", exclude_none=True))
    if isinstance(obj, dict):
        return {k: serialize_object(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [serialize_object(v) for v in obj]
    return obj
