from ._base import StripeObject
from .charges import Charge, ChargeOutcome
from .coupons import Coupon
from .errors import (
    ApiKeyMissingError,
    ErrorCode,
    ErrorSource,
    InvalidIdentifierError,
    StripeError,
)
from .lists import StripeList
from .skus import PackageDimensions, Sku, SkuInventory

__all__ = [
    "ApiKeyMissingError",
    "Charge",
    "ChargeOutcome",
    "Coupon",
    "ErrorCode",
    "ErrorSource",
    "InvalidIdentifierError",
    "PackageDimensions",
    "Sku",
    "SkuInventory",
    "StripeError",
    "StripeList",
    "StripeObject",
]
