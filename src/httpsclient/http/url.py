# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL normalization and form-style query building."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..errors import MalformedURLError


def encode_url(url: str) -> str:
    """
    Make a URL safe to hand to the transport.

    The query string is decoded into key/value pairs, taking every key verbatim, and
    re-encoded so that partially encoded or sloppy query strings come out consistent.
    The fragment is dropped.
    """
    try:
        parts = urlsplit(str(url or "").strip())
        parts.port  # noqa: B018 - raises ValueError for a non-numeric or out-of-range port
    except ValueError as exc:
        raise MalformedURLError(f"Malformed URL {url!r}: {exc}") from exc

    if not parts.scheme or not parts.hostname:
        raise MalformedURLError(f"Malformed URL {url!r}: scheme and host are required")

    query = ""
    if parts.query:
        query = urlencode(parse_qsl(parts.query, keep_blank_values=True))

    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, ""))


def _children(value: Any) -> list[tuple[Any, Any]] | None:
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (list, tuple)):
        return list(enumerate(value))
    if isinstance(value, (str, bytes, bytearray, int, float, bool, Enum)) or value is None:
        return None
    if hasattr(value, "__dict__"):
        return list(vars(value).items())
    return None


def build_http_query(data: Any, parent: str | None = None) -> dict[str, Any]:
    """
    Flatten nested mappings, sequences and plain objects into `parent[child]` keys.

    >>> build_http_query({"a": {"b": 1, "c": 2}})
    {'a[b]': 1, 'a[c]': 2}
    """
    result: dict[str, Any] = {}
    for key, value in _children(data) or []:
        name = f"{parent}[{key}]" if parent is not None else str(key)
        if _children(value) is not None:
            result.update(build_http_query(value, name))
        else:
            result[name] = value
    return result


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_query(data: Any) -> str:
    """Form-encode a structured value. None leaves are skipped, booleans become 1/0."""
    pairs = [(key, _scalar(value)) for key, value in build_http_query(data).items() if value is not None]
    return urlencode(pairs)


def append_query(url: str, query: str) -> str:
    """Add `query` to the URL's existing query string, leaving any fragment in place."""
    if not query:
        return url
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise MalformedURLError(f"Malformed URL {url!r}: {exc}") from exc
    merged = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit((parts.scheme, parts.netloc, parts.path, merged, parts.fragment))


def is_structured(body: Any) -> bool:
    """True when a body should be form-encoded rather than sent verbatim."""
    return _children(body) is not None


__all__ = ["append_query", "build_http_query", "encode_query", "encode_url", "is_structured"]
