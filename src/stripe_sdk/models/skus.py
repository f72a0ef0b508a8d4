from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ._base import StripeObject


class SkuInventory(BaseModel):
    model_config = ConfigDict(extra="allow")

    quantity: Optional[int] = None
    type: Optional[str] = None
    value: Optional[str] = None


class PackageDimensions(BaseModel):
    model_config = ConfigDict(extra="allow")

    height: float
    length: float
    weight: float
    width: float


class Sku(StripeObject):
    active: Optional[bool] = None
    attributes: Optional[Dict[str, str]] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    image: Optional[str] = None
    inventory: Optional[SkuInventory] = None
    package_dimensions: Optional[PackageDimensions] = None
    price: Optional[int] = None
    product: Optional[Any] = None
    updated: Optional[int] = None
    deleted: Optional[bool] = None
