"""Two-state result returned by every client operation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Where a failed request went wrong."""

    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    SERIALIZATION = "serialization"
    DESERIALIZATION = "deserialization"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a success carrying ``value`` or a failure carrying ``message``.

    Build instances with :meth:`success` and :meth:`failure`. A failure's
    ``kind`` tells whether the request ever reached the server, which matters
    when deciding to retry.
    """

    value: Optional[T] = None
    message: Optional[str] = None
    kind: Optional[FailureKind] = None
    status_code: Optional[int] = None

    def __post_init__(self) -> None:
        if self.message:
            if self.value is not None:
                raise ValueError("A failed Result cannot carry a value")
            if self.kind is None:
                object.__setattr__(self, "kind", FailureKind.UNKNOWN)
        elif self.kind is not None or self.status_code is not None:
            raise ValueError("A successful Result cannot carry failure details")

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        message: str,
        kind: FailureKind = FailureKind.UNKNOWN,
        status_code: Optional[int] = None,
    ) -> "Result[Any]":
        # An empty message would read as success.
        return cls(message=message or kind.value, kind=kind, status_code=status_code)

    @property
    def is_success(self) -> bool:
        return not self.message

    @property
    def data(self) -> Optional[T]:
        return self.value

    @property
    def reached_server(self) -> bool:
        """True when the server produced a response, failed or not."""
        if self.is_success:
            return True
        return self.kind in (FailureKind.HTTP_STATUS, FailureKind.DESERIALIZATION)

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self.value!r})"
        return f"Result.failure({self.message!r}, kind={self.kind.value})"
