from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from ..models.errors import ErrorCode, ErrorSource, StripeError
from ._result import Err, Ok, Result

EndpointFunction = Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True)
class StaticEndpoint:
    """An endpoint path known when the request is built, e.g. ``"charges"``."""

    path: str


@dataclass(frozen=True)
class DynamicEndpoint:
    """An endpoint computed from the final (already cast) request parameters."""

    resolve: EndpointFunction


Endpoint = Union[StaticEndpoint, DynamicEndpoint]


def resolve_endpoint(endpoint: Any, params: Mapping[str, Any]) -> Result[str, StripeError]:
    """Turn the endpoint of a request into a concrete path.

    Args:
        endpoint: The endpoint stored on the request. ``None`` means unset.
        params: The request parameters after casting.

    Returns:
        Result[str, StripeError]: ``Ok(path)`` or an internal error when the
        endpoint is unset, of an unsupported shape, or when an endpoint
        function did not return a string.
    """
    match endpoint:
        case StaticEndpoint(path=path):
            return Ok(path)
        case DynamicEndpoint(resolve=resolve):
            result = resolve(params)
            if isinstance(result, str):
                return Ok(result)
            return Err(
                StripeError(
                    source=ErrorSource.INTERNAL,
                    code=ErrorCode.ENDPOINT_FUN_INVALID_RESULT,
                    message=f"calling the endpoint function produced an invalid result of {result!r}",
                    extra={"result": result},
                )
            )
        case _:
            return Err(
                StripeError(
                    source=ErrorSource.INTERNAL,
                    code=ErrorCode.INVALID_ENDPOINT,
                    message="endpoint must be a string or a function from params to a string",
                    extra={"endpoint": endpoint},
                )
            )
