from __future__ import annotations

import typing
from dataclasses import dataclass, field

import httpx


class ResponseHeaders(typing.Mapping[str, str]):
    """Read-only, case-insensitive view over response headers.

    Repeated headers are joined with ``", "``; use ``get_list`` for the
    individual values.
    """

    def __init__(self, headers: typing.Any = None) -> None:
        self._headers = httpx.Headers(headers)

    def __getitem__(self, key: str) -> str:
        return self._headers[key]

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, key: object) -> bool:
        return key in self._headers

    def __repr__(self) -> str:
        return f"ResponseHeaders({dict(self.items())!r})"

    def get_list(self, key: str) -> list[str]:
        return self._headers.get_list(key)


@dataclass(frozen=True)
class Response:
    """Result of a single request.

    ``code`` is the HTTP status, or a transport sentinel when no HTTP
    response was received (``28`` for a timeout, ``-1`` otherwise); in that
    case ``body`` holds the failure description.
    """

    code: int
    body: str = ""
    headers: ResponseHeaders = field(default_factory=ResponseHeaders)
    content: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, ResponseHeaders):
            object.__setattr__(self, "headers", ResponseHeaders(self.headers))

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300


@dataclass(frozen=True)
class RequestInfo:
    """Metadata about the last request made on a ``Connection``."""

    effective_url: str = ""
    total_time: float = 0.0
    code: int = 0
