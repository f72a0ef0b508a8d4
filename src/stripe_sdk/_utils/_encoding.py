from collections.abc import Mapping
from typing import Any


def encode_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Flatten params into the bracketed form encoding used by the API.

    ``{"metadata": {"order": 6}, "expand": ["customer"]}`` becomes
    ``{"metadata[order]": "6", "expand[0]": "customer"}``. Booleans are sent
    as ``true``/``false`` and ``None`` values are dropped.
    """
    encoded: dict[str, str] = {}
    for key, value in params.items():
        _encode_value(encoded, str(key), value)
    return encoded


def _encode_value(encoded: dict[str, str], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_value(encoded, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _encode_value(encoded, f"{key}[{index}]", item)
    elif isinstance(value, bool):
        encoded[key] = "true" if value else "false"
    else:
        encoded[key] = str(value)
