import functools
import inspect
from typing import Any, Callable, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from ._result import Err
from .constants import LOGGER_NAME

F = TypeVar("F", bound=Callable[..., Any])

tracer = trace.get_tracer(LOGGER_NAME)


def _record_outcome(span: trace.Span, outcome: Any) -> None:
    if isinstance(outcome, Err):
        error = outcome.error
        code = getattr(error, "code", None)
        if code is not None:
            span.set_attribute("stripe.error.code", getattr(code, "value", str(code)))
        span.set_status(Status(StatusCode.ERROR, str(error)))


def traced(name: str) -> Callable[[F], F]:
    """Wrap a service operation in an OpenTelemetry span.

    Operations returning ``Err`` mark the span as failed. Works for both sync
    and async functions. Without a configured tracer provider the spans are
    no-ops.
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with tracer.start_as_current_span(name) as span:
                    outcome = await func(*args, **kwargs)
                    _record_outcome(span, outcome)
                    return outcome

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(name) as span:
                outcome = func(*args, **kwargs)
                _record_outcome(span, outcome)
                return outcome

        return wrapper  # type: ignore[return-value]

    return decorator
