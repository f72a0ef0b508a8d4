from collections.abc import Mapping
from typing import Any, Dict, Type

from pydantic import BaseModel

from ..models import Charge, Coupon, Sku, StripeList

OBJECT_NAME_TO_MODEL: Dict[str, Type[BaseModel]] = {
    "charge": Charge,
    "coupon": Coupon,
    "list": StripeList,
    "sku": Sku,
}


def convert_result(result: Any) -> Any:
    """Convert a decoded API response into typed objects.

    Mappings whose ``object`` field names a known model are validated into
    that model; everything else keeps its shape with its children converted.
    """
    if isinstance(result, list):
        return [convert_result(item) for item in result]
    if not isinstance(result, Mapping):
        return result

    converted = {key: convert_result(value) for key, value in result.items()}
    model = OBJECT_NAME_TO_MODEL.get(converted.get("object"))  # type: ignore[arg-type]
    if model is None:
        return converted
    return model.model_validate(converted)
