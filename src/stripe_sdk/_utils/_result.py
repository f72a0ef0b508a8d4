"""Tagged success/failure values returned by request execution.

Request execution never raises for runtime conditions. Every outcome is
either ``Ok(value)`` or ``Err(error)`` and can be matched structurally:

```python
match charges.retrieve("ch_1"):
    case Ok(charge):
        ...
    case Err(error):
        ...
```
"""

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise RuntimeError(f"Called unwrap_err() on Ok value: {self.value!r}")

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error if it is an exception, otherwise a RuntimeError."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f"Called unwrap() on Err value: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[object], object]) -> "Err[E]":
        return self


Result = Union[Ok[T], Err[E]]
