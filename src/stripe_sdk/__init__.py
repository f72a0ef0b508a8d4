from ._config import Config
from ._services import make_request, make_request_async
from ._stripe_sdk import StripeSDK
from ._utils import (
    DynamicEndpoint,
    Err,
    HttpMethod,
    Ok,
    RequestSpec,
    Result,
    StaticEndpoint,
    apply_casts,
    get_id,
    new_request,
    resolve_endpoint,
)
from ._utils.constants import SDK_VERSION as __version__
from .models import (
    ApiKeyMissingError,
    ErrorCode,
    ErrorSource,
    InvalidIdentifierError,
    StripeError,
)

__all__ = [
    "ApiKeyMissingError",
    "Config",
    "DynamicEndpoint",
    "Err",
    "ErrorCode",
    "ErrorSource",
    "HttpMethod",
    "InvalidIdentifierError",
    "Ok",
    "RequestSpec",
    "Result",
    "StaticEndpoint",
    "StripeError",
    "StripeSDK",
    "__version__",
    "apply_casts",
    "get_id",
    "make_request",
    "make_request_async",
    "new_request",
    "resolve_endpoint",
]
