# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response envelope returned by Client.send."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any

from .. import jsonutil
from ..config import JsonOptions
from ..errors import JSONDecodeError
from .headers import STATUS_LINE_KEY, ParsedHeaders, find_header_key, header_value, parse_header_text
from .status import reason_phrase as lookup_reason_phrase

_CHARSET_RE = re.compile(r"charset=[\"']?([\w.:-]+)", re.IGNORECASE)
_PROTOCOL_RE = re.compile(r"^HTTP/(\d+(?:\.\d+)?)\s")


def decode_body(raw_body: bytes, json_options: JsonOptions) -> Any:
    """Return the JSON-decoded body, or `raw_body` unchanged when it is not JSON."""
    try:
        return jsonutil.decode(
            raw_body,
            depth=json_options.depth,
            bigint_as_string=json_options.bigint_as_string,
        )
    except JSONDecodeError:
        return raw_body


@dataclass(frozen=True)
class Response:
    """
    Immutable HTTP response envelope.

    `body` holds the decoded JSON document when the raw body parses as JSON, otherwise
    the raw bytes. The `with_*` methods return modified copies and never touch the
    instance they are called on.
    """

    status_code: int
    raw_body: bytes = b""
    headers: ParsedHeaders = field(default_factory=dict)
    body: Any = b""
    json_options: JsonOptions = field(default_factory=JsonOptions)
    reason: str = ""

    @classmethod
    def from_raw(
        cls,
        status_code: int,
        raw_body: bytes,
        raw_headers: str,
        json_options: JsonOptions | None = None,
    ) -> Response:
        options = json_options or JsonOptions()
        return cls(
            status_code=status_code,
            raw_body=raw_body,
            headers=parse_header_text(raw_headers),
            body=decode_body(raw_body, options),
            json_options=options,
        )

    @property
    def text(self) -> str:
        content_type = header_value(self.headers, "content-type")
        match = _CHARSET_RE.search(content_type)
        encoding = match.group(1) if match else "utf-8"
        try:
            return self.raw_body.decode(encoding, errors="replace")
        except LookupError:
            return self.raw_body.decode("utf-8", errors="replace")

    @property
    def reason_phrase(self) -> str:
        return self.reason or lookup_reason_phrase(self.status_code)

    @property
    def protocol_version(self) -> str:
        status_line = self.headers.get(STATUS_LINE_KEY)
        if isinstance(status_line, str):
            match = _PROTOCOL_RE.match(status_line + " ")
            if match:
                return match.group(1)
        return "1.1"

    def has_header(self, name: str) -> bool:
        return find_header_key(self.headers, name) is not None

    def header(self, name: str) -> str | list[str] | None:
        key = find_header_key(self.headers, name)
        if key is None:
            return None
        value = self.headers[key]
        return list(value) if isinstance(value, list) else value

    def header_line(self, name: str) -> str:
        return header_value(self.headers, name)

    def _copy_headers(self) -> ParsedHeaders:
        return {key: list(value) if isinstance(value, list) else value for key, value in self.headers.items()}

    def with_header(self, name: str, value: str | list[str]) -> Response:
        headers = self._copy_headers()
        key = find_header_key(headers, name)
        if key is not None:
            del headers[key]
        headers[name] = list(value) if isinstance(value, list) else value
        return replace(self, headers=headers)

    def with_added_header(self, name: str, value: str | list[str]) -> Response:
        headers = self._copy_headers()
        key = find_header_key(headers, name)
        added = list(value) if isinstance(value, list) else [value]
        if key is None:
            headers[name] = added if len(added) > 1 else added[0]
            return replace(self, headers=headers)
        existing = headers[key]
        headers[key] = (existing if isinstance(existing, list) else [existing]) + added
        return replace(self, headers=headers)

    def without_header(self, name: str) -> Response:
        headers = self._copy_headers()
        key = find_header_key(headers, name)
        if key is not None:
            del headers[key]
        return replace(self, headers=headers)

    def with_body(self, raw_body: bytes | str) -> Response:
        if isinstance(raw_body, str):
            raw_body = raw_body.encode("utf-8")
        return replace(self, raw_body=raw_body, body=decode_body(raw_body, self.json_options))

    def with_status(self, code: int, reason_phrase: str = "") -> Response:
        return replace(self, status_code=code, reason=reason_phrase)

    def with_protocol_version(self, version: str) -> Response:
        headers = self._copy_headers()
        headers[STATUS_LINE_KEY] = f"HTTP/{version} {self.status_code} {self.reason_phrase}".rstrip()
        return replace(self, headers=headers)


__all__ = ["Response", "decode_body"]
