"""Router port: read-only descriptor of a single HTTP call.

Endpoint definitions live with the caller; the executor only reads these fields.
"""
from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable

QueryParameter = Tuple[str, Optional[str]]


@runtime_checkable
class Router(Protocol):
    """Destination, method, headers, query and body of one request."""

    @property
    def scheme(self) -> str: ...

    @property
    def host(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> str: ...

    @property
    def parameters(self) -> Sequence[QueryParameter] | None: ...

    @property
    def headers(self) -> Mapping[str, str] | None: ...

    @property
    def body(self) -> bytes | None: ...
