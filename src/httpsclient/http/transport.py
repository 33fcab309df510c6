# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and the default httpx-backed implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

import httpx

from ..errors import categorize_exception
from .models import PreparedRequest, RawTransportResult

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Minimal protocol for executing a prepared request."""

    def execute(self, request: PreparedRequest) -> RawTransportResult: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def build_header_block(response: httpx.Response) -> bytes:
    """Rebuild the raw status line and header lines of a response."""
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()
    lines = [status_line.encode("ascii", errors="replace") + b"\r\n"]
    for name, value in response.headers.raw:
        lines.append(name + b": " + value + b"\r\n")
    lines.append(b"\r\n")
    return b"".join(lines)


class HttpxTransport(Transport):
    """
    Synchronous httpx transport.

    Every call gets its own httpx.Client built from the prepared options, and the
    client is closed when the call returns or fails.
    """

    def __init__(self, client_factory: Callable[..., httpx.Client] | None = None):
        self._client_factory = client_factory

    def execute(self, request: PreparedRequest) -> RawTransportResult:
        factory: Callable[..., Any] = self._client_factory or httpx.Client
        try:
            with factory(**request.options) as client:
                response = client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    content=request.content,
                )
                header_block = build_header_block(response)
                raw = header_block + response.content
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as exc:
            category = categorize_exception(exc)
            logger.warning("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
            return RawTransportResult(
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=category,
            )

        return RawTransportResult(
            status_code=response.status_code,
            header_size=len(header_block),
            raw=raw,
        )

    def close(self) -> None:
        return None


__all__ = ["HttpxTransport", "Transport", "build_header_block"]
