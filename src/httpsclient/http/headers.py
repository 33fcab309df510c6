# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization, formatting and parsing.

HTTP header field names are case-insensitive (RFC 9110). Outgoing header names are
lower-cased before merging, while parsed response headers keep the server's casing and
are matched case-insensitively on lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import HeaderList

STATUS_LINE_KEY = ":status"

HeaderValue = str | list[str]
ParsedHeaders = dict[str, HeaderValue]


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers, anything with `.items()`, and iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        return dict(items())

    return dict(headers)


def normalize_name(name: object) -> str:
    return str(name).strip().lower()


def normalize_headers(headers: Any) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = normalize_name(key)
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def format_headers(
    default_headers: Mapping[str, Any] | None,
    headers: Any,
    *,
    user_agent: str,
) -> HeaderList:
    """
    Merge default and per-call headers into the list sent on the wire.

    Per-call headers win on a name collision. A user-agent is added when neither side
    sets one, and an empty `expect` header suppresses 100-continue probing.
    """
    combined = normalize_headers(default_headers)
    combined.update(normalize_headers(headers))
    formatted: HeaderList = list(combined.items())
    if "user-agent" not in combined:
        formatted.append(("user-agent", user_agent))
    if "expect" not in combined:
        formatted.append(("expect", ""))
    return formatted


def parse_header_text(raw_headers: str) -> ParsedHeaders:
    """
    Parse a raw header block into a name -> value mapping.

    Repeated names collect every value, in order, into a list. Lines starting with a
    tab continue the previous header. A leading line without a colon (the status line)
    is stored under STATUS_LINE_KEY.
    """
    headers: ParsedHeaders = {}
    key = ""
    for line in (raw_headers or "").split("\n"):
        name, sep, value = line.partition(":")
        if sep:
            name = name.strip()
            value = value.strip()
            existing = headers.get(name)
            if existing is None:
                headers[name] = value
            elif isinstance(existing, list):
                existing.append(value)
            else:
                headers[name] = [existing, value]
            key = name
        elif line.startswith("\t") and key:
            previous = headers[key]
            if isinstance(previous, list):
                previous[-1] += "\r\n\t" + line.strip()
            else:
                headers[key] = previous + "\r\n\t" + line.strip()
        elif not key and line.strip():
            headers[STATUS_LINE_KEY] = line.strip()
    return headers


def find_header_key(headers: Mapping[str, Any], name: str) -> str | None:
    """Return the stored key matching `name` case-insensitively, if any."""
    if name in headers:
        return name
    lower = str(name).lower()
    for key in headers:
        if key.lower() == lower:
            return key
    return None


def header_value(headers: Mapping[str, Any] | None, name: str, default: str = "") -> str:
    """Return a header value as one comma-joined line using case-insensitive matching."""
    if not headers or not name:
        return default
    key = find_header_key(headers, name)
    if key is None:
        return default
    value = headers[key]
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return default if value is None else str(value)


__all__ = [
    "STATUS_LINE_KEY",
    "find_header_key",
    "format_headers",
    "header_value",
    "normalize_headers",
    "parse_header_text",
]
