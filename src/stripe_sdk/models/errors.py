from enum import Enum
from typing import Any, Dict, Optional


class ErrorSource(str, Enum):
    """Where an error originated."""

    INTERNAL = "internal"
    NETWORK = "network"
    STRIPE = "stripe"


class ErrorCode(str, Enum):
    # raised by the request core before anything is sent
    INVALID_ENDPOINT = "invalid_endpoint"
    ENDPOINT_FUN_INVALID_RESULT = "endpoint_fun_invalid_result"
    INVALID_METHOD = "invalid_method"

    NETWORK_ERROR = "network_error"

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    REQUEST_FAILED = "request_failed"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TOO_MANY_REQUESTS = "too_many_requests"
    SERVER_ERROR = "server_error"
    UNKNOWN_ERROR = "unknown_error"


class StripeError(Exception):
    """Structured error returned inside ``Err`` by request execution.

    Attributes:
        source: Which layer produced the error.
        code: Machine readable error code.
        message: Developer facing description.
        status_code: HTTP status, when the API answered.
        request_id: Value of the ``Request-Id`` response header, if any.
        user_message: Message safe to show to end users (card declines).
        extra: Additional diagnostics, e.g. the API error body or the invalid
            value returned by an endpoint function.
    """

    def __init__(
        self,
        *,
        source: ErrorSource,
        code: ErrorCode,
        message: str,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
        user_message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.source = source
        self.code = code
        self.message = message
        self.status_code = status_code
        self.request_id = request_id
        self.user_message = user_message
        self.extra = extra or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"StripeError(source={self.source.value!r}, "
            f"code={self.code.value!r}, "
            f"message={self.message!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StripeError):
            return NotImplemented
        return (
            self.source == other.source
            and self.code == other.code
            and self.message == other.message
            and self.status_code == other.status_code
            and self.extra == other.extra
        )

    __hash__ = Exception.__hash__


class InvalidIdentifierError(TypeError):
    """Raised when a value that should identify a resource has no usable ID.

    This signals an incorrect call site rather than a runtime condition, so it
    is raised immediately instead of being returned in an ``Err``.
    """

    def __init__(
        self,
        value: Any = None,
        message: str = "You must provide an ID or an object with an ID to this operation.",
    ):
        self.value = value
        self.message = message
        super().__init__(f"{self.message} Got: {value!r}")


class ApiKeyMissingError(Exception):
    def __init__(
        self,
        message="Authentication required. Pass api_key to StripeSDK or set the STRIPE_API_KEY environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
