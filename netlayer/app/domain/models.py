"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar, Union

from netlayer.app.ports.router import QueryParameter

T = TypeVar("T")


@dataclass(frozen=True)
class ApiRoute:
    """Concrete Router descriptor (value object), built by the caller per call."""

    scheme: str
    host: str
    path: str
    method: str = "GET"
    parameters: Optional[Sequence[QueryParameter]] = None
    headers: Optional[Mapping[str, str]] = None
    body: Optional[bytes] = None


@dataclass(frozen=True)
class Success(Generic[T]):
    """Decoded payload of a 2xx response."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A NetworkError, or the raw decode error of a 2xx body."""

    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success[T], Failure]
