import httpx

from ..models.errors import ErrorCode, ErrorSource, StripeError
from .constants import HEADER_REQUEST_ID

_STATUS_TO_CODE = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    402: ErrorCode.REQUEST_FAILED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    429: ErrorCode.TOO_MANY_REQUESTS,
}


def error_from_response(response: httpx.Response) -> StripeError:
    """Build a ``StripeError`` from an unsuccessful API response.

    The API wraps failures as ``{"error": {"type": ..., "message": ...}}``.
    Bodies that are not JSON are kept verbatim under ``extra["body"]``.
    """
    status_code = response.status_code
    if status_code in _STATUS_TO_CODE:
        code = _STATUS_TO_CODE[status_code]
    elif 500 <= status_code < 600:
        code = ErrorCode.SERVER_ERROR
    else:
        code = ErrorCode.UNKNOWN_ERROR

    try:
        body = response.json()
    except ValueError:
        body = response.text

    details = body.get("error") if isinstance(body, dict) else None
    extra: dict = {"body": body}
    message: str | None = None
    user_message: str | None = None

    if isinstance(details, dict):
        message = details.get("message")
        for field in ("type", "code", "param", "decline_code", "charge"):
            if details.get(field) is not None:
                extra[field] = details[field]
        if details.get("type") == "card_error":
            user_message = message

    return StripeError(
        source=ErrorSource.STRIPE,
        code=code,
        message=message or f"The API responded with HTTP {status_code}",
        status_code=status_code,
        request_id=response.headers.get(HEADER_REQUEST_ID),
        user_message=user_message,
        extra=extra,
    )


def error_from_exception(error: httpx.HTTPError) -> StripeError:
    """Build a ``StripeError`` for a request that never got a response."""
    return StripeError(
        source=ErrorSource.NETWORK,
        code=ErrorCode.NETWORK_ERROR,
        message=f"{type(error).__name__}: {error}",
        extra={"exception": error},
    )
