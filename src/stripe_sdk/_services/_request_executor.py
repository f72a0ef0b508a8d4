from logging import getLogger
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol

from .._utils import (
    Err,
    HttpMethod,
    Ok,
    RequestSpec,
    Result,
    apply_casts,
    convert_result,
    resolve_endpoint,
)
from .._utils.constants import LOGGER_NAME
from ..models.errors import ErrorCode, ErrorSource, StripeError

logger = getLogger(LOGGER_NAME)

Converter = Callable[[Any], Any]


class Transport(Protocol):
    def request(
        self,
        params: Mapping[str, Any],
        method: HttpMethod,
        endpoint: str,
        headers: Optional[Mapping[str, str]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Any, StripeError]: ...


class AsyncTransport(Protocol):
    def request_async(
        self,
        params: Mapping[str, Any],
        method: HttpMethod,
        endpoint: str,
        headers: Optional[Mapping[str, str]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Awaitable[Result[Any, StripeError]]: ...


def _prepare(
    spec: RequestSpec,
) -> Result[tuple[dict[str, Any], HttpMethod, str], StripeError]:
    """Cast params, resolve the endpoint and check the method, in that order."""
    params = apply_casts(spec.params, spec.cast_rules)

    resolved = resolve_endpoint(spec.endpoint, params)
    if isinstance(resolved, Err):
        return resolved

    if spec.method is None:
        return Err(
            StripeError(
                source=ErrorSource.INTERNAL,
                code=ErrorCode.INVALID_METHOD,
                message="method must be one of get, post, put, patch or delete",
            )
        )

    return Ok((params, spec.method, resolved.value))


def make_request(
    spec: RequestSpec,
    transport: Transport,
    converter: Converter = convert_result,
) -> Result[Any, StripeError]:
    """Execute a request and convert its response.

    The steps run strictly in sequence and stop at the first failure:
    params are cast to IDs, the endpoint is resolved against the cast params,
    the transport is called with empty extra headers, and finally the raw
    response is handed to ``converter``.

    Args:
        spec: The request to execute.
        transport: Performs the HTTP call.
        converter: Maps the decoded response to the returned value.

    Returns:
        Result[Any, StripeError]: ``Ok`` with the converted response, or the
        first error encountered. Transport errors are passed through as is.
    """
    prepared = _prepare(spec)
    if isinstance(prepared, Err):
        logger.debug(f"Request not sent: {prepared.error!r}")
        return prepared

    params, method, endpoint = prepared.value
    outcome = transport.request(params, method, endpoint, {}, spec.opts)
    if isinstance(outcome, Err):
        return outcome
    return Ok(converter(outcome.value))


async def make_request_async(
    spec: RequestSpec,
    transport: AsyncTransport,
    converter: Converter = convert_result,
) -> Result[Any, StripeError]:
    """Asynchronously execute a request and convert its response.

    See :func:`make_request`.
    """
    prepared = _prepare(spec)
    if isinstance(prepared, Err):
        logger.debug(f"Request not sent: {prepared.error!r}")
        return prepared

    params, method, endpoint = prepared.value
    outcome = await transport.request_async(params, method, endpoint, {}, spec.opts)
    if isinstance(outcome, Err):
        return outcome
    return Ok(converter(outcome.value))
