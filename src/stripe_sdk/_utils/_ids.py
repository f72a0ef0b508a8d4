from collections.abc import Mapping
from typing import Any, Optional

from ..models.errors import InvalidIdentifierError


def extract_id(value: Any) -> Optional[str]:
    """Return the ID carried by a resource object, or ``None``.

    Only objects (pydantic models, dataclasses, ...) exposing a string ``id``
    attribute count as resource references. Strings, numbers and plain
    mappings are not references and yield ``None``.
    """
    if isinstance(value, (str, bytes, Mapping)):
        return None
    object_id = getattr(value, "id", None)
    if isinstance(object_id, str):
        return object_id
    return None


def get_id(value: Any) -> str:
    """Normalise the argument to a plain ID.

    Useful for eagerly getting the ID of an object passed in, for example when
    computing the endpoint to use:

    ```python
    def capture(self, charge, params=None):
        spec = new_request().put_endpoint(f"charges/{get_id(charge)}/capture")
    ```

    Args:
        value: An ID string, a resource object, or a mapping with an ``id`` key.

    Returns:
        str: The ID.

    Raises:
        InvalidIdentifierError: If no string ID can be obtained from ``value``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping) and isinstance(value.get("id"), str):
        return value["id"]
    object_id = extract_id(value)
    if object_id is None:
        raise InvalidIdentifierError(value)
    return object_id
