# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request and transport result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import ErrorCategory

HeaderList = list[tuple[str, str]]


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


@dataclass
class HttpRequest:
    """A single call as the caller described it, before any defaults are merged in."""

    url: str
    method: str = Method.GET.value
    body: Any = None
    headers: dict[str, Any] | None = None
    username: str | None = None
    password: str | None = None


@dataclass
class PreparedRequest:
    """Fully merged request handed to a Transport."""

    method: str
    url: str
    headers: HeaderList = field(default_factory=list)
    content: bytes | None = None
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class RawTransportResult:
    """
    What the transport hands back: status, the raw header block followed by the body,
    and the byte length of the header block. `error_message` is set instead when the
    transport failed.
    """

    status_code: int = 0
    header_size: int = 0
    raw: bytes = b""
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def ok(self) -> bool:
        return self.error_message is None

    def split(self) -> tuple[str, bytes]:
        """Return (header_text, body) split at the reported header length."""
        header_bytes = self.raw[: self.header_size]
        return header_bytes.decode("iso-8859-1"), self.raw[self.header_size :]


__all__ = ["HeaderList", "HttpRequest", "Method", "PreparedRequest", "RawTransportResult"]
