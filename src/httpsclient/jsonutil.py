# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Fail-fast JSON helpers.

Thin wrappers around the standard `json` module that raise JSONEncodeError /
JSONDecodeError instead of leaking the assorted built-in exceptions, and enforce a
maximum nesting depth in both directions.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .config import DEFAULT_JSON_DEPTH
from .errors import JSONDecodeError, JSONEncodeError

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _exceeds_depth(value: Any, limit: int) -> bool:
    # Self-referencing containers must stop at `limit`, not at the interpreter recursion limit.
    stack: list[tuple[Any, int]] = [(value, 0)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, Mapping):
            children = list(current.values())
        elif isinstance(current, (list, tuple)):
            children = list(current)
        else:
            continue
        if level + 1 > limit:
            return True
        stack.extend((child, level + 1) for child in children)
    return False


def _parse_int_keep_big(raw: str) -> int | str:
    parsed = int(raw)
    if _INT64_MIN <= parsed <= _INT64_MAX:
        return parsed
    return raw


def encode(
    value: Any,
    *,
    indent: int | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = True,
    depth: int = DEFAULT_JSON_DEPTH,
) -> str:
    """Serialize `value` to JSON, raising JSONEncodeError on any failure."""
    if depth <= 0:
        raise JSONEncodeError("json encode error: depth must be greater than zero")
    if _exceeds_depth(value, depth):
        raise JSONEncodeError("json encode error: maximum stack depth exceeded")
    try:
        return json.dumps(
            value,
            indent=indent,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise JSONEncodeError(f"json encode error: {exc}") from exc


def decode(
    data: str | bytes | bytearray,
    *,
    depth: int = DEFAULT_JSON_DEPTH,
    bigint_as_string: bool = False,
) -> Any:
    """
    Parse JSON text, raising JSONDecodeError on any failure.

    Objects always decode to dicts. With `bigint_as_string`, integers outside the
    signed 64-bit range are returned as their literal string instead of a Python int.
    """
    if depth <= 0:
        raise JSONDecodeError("json decode error: depth must be greater than zero")
    try:
        if bigint_as_string:
            value = json.loads(data, parse_int=_parse_int_keep_big)
        else:
            value = json.loads(data)
    except (TypeError, ValueError, RecursionError) as exc:
        raise JSONDecodeError(f"json decode error: {exc}") from exc
    if _exceeds_depth(value, depth):
        raise JSONDecodeError("json decode error: maximum stack depth exceeded")
    return value


def is_valid(value: Any) -> bool:
    """Return True when `value` is a string holding valid JSON."""
    try:
        decode(value)
    except JSONDecodeError:
        return False
    return True


def pretty_print(value: Any) -> str:
    return encode(value, indent=4)


__all__ = ["decode", "encode", "is_valid", "pretty_print"]
