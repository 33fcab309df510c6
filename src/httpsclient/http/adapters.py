# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process transports for tests and offline use."""

from __future__ import annotations

from collections.abc import Iterable

from .. import jsonutil
from ..errors import ErrorCategory
from .models import PreparedRequest, RawTransportResult
from .transport import Transport


def make_raw_result(
    status_code: int = 200,
    headers: Iterable[tuple[str, str]] | None = None,
    body: bytes | str | object = b"",
    *,
    reason: str = "",
    http_version: str = "HTTP/1.1",
) -> RawTransportResult:
    """
    Build a RawTransportResult as a real transport would.

    Non-bytes, non-str bodies are JSON encoded.
    """
    if isinstance(body, str):
        body_bytes = body.encode("utf-8")
    elif isinstance(body, (bytes, bytearray)):
        body_bytes = bytes(body)
    else:
        body_bytes = jsonutil.encode(body).encode("utf-8")

    status_line = f"{http_version} {status_code} {reason}".rstrip()
    lines = [status_line]
    lines.extend(f"{name}: {value}" for name, value in (headers or []))
    header_block = ("\r\n".join(lines) + "\r\n\r\n").encode("iso-8859-1")
    return RawTransportResult(
        status_code=status_code,
        header_size=len(header_block),
        raw=header_block + body_bytes,
    )


class StubTransport(Transport):
    """Deterministic, programmable Transport for tests."""

    def __init__(self, results: dict[str, RawTransportResult] | None = None):
        self._results = results or {}
        self.requests: list[PreparedRequest] = []

    def add(self, url: str, result: RawTransportResult) -> None:
        self._results[url] = result

    def execute(self, request: PreparedRequest) -> RawTransportResult:
        self.requests.append(request)
        if request.url in self._results:
            return self._results[request.url]
        return RawTransportResult(
            error_message="No stubbed response configured",
            error_type="LookupError",
            error_category=ErrorCategory.UNKNOWN_ERROR,
        )

    def close(self) -> None:
        return None


__all__ = ["StubTransport", "make_raw_result"]
