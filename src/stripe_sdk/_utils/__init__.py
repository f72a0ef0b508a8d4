from ._casting import CastTarget, apply_casts
from ._converter import OBJECT_NAME_TO_MODEL, convert_result
from ._encoding import encode_params
from ._endpoint import DynamicEndpoint, Endpoint, StaticEndpoint, resolve_endpoint
from ._ids import extract_id, get_id
from ._logs import setup_logging
from ._request_spec import HttpMethod, RequestSpec, new_request
from ._result import Err, Ok, Result
from ._tracing import traced

__all__ = [
    "CastTarget",
    "DynamicEndpoint",
    "Endpoint",
    "Err",
    "HttpMethod",
    "OBJECT_NAME_TO_MODEL",
    "Ok",
    "RequestSpec",
    "Result",
    "StaticEndpoint",
    "apply_casts",
    "convert_result",
    "encode_params",
    "extract_id",
    "get_id",
    "new_request",
    "resolve_endpoint",
    "setup_logging",
    "traced",
]
