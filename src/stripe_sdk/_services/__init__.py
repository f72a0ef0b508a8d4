from ._base_service import BaseService
from ._request_executor import (
    AsyncTransport,
    Converter,
    Transport,
    make_request,
    make_request_async,
)
from .api_client import ApiClient
from .charges_service import ChargesService
from .coupons_service import CouponsService
from .skus_service import SkusService

__all__ = [
    "ApiClient",
    "AsyncTransport",
    "BaseService",
    "ChargesService",
    "Converter",
    "CouponsService",
    "SkusService",
    "Transport",
    "make_request",
    "make_request_async",
]
