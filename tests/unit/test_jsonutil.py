# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from httpsclient import jsonutil
from httpsclient.errors import JSONDecodeError, JSONEncodeError


def test_decode_of_encode_returns_the_value():
    value = {"name": "ünïcode", "items": [1, 2.5, True, None, {"nested": []}], "empty": {}}
    assert jsonutil.decode(jsonutil.encode(value)) == value


def test_encode_failures_raise():
    with pytest.raises(JSONEncodeError):
        jsonutil.encode({1, 2})
    with pytest.raises(JSONEncodeError):
        jsonutil.encode(float("nan"))
    circular: list = []
    circular.append(circular)
    with pytest.raises(JSONEncodeError):
        jsonutil.encode(circular)
    with pytest.raises(JSONEncodeError):
        jsonutil.encode([[1]], depth=1)
    with pytest.raises(JSONEncodeError):
        jsonutil.encode([], depth=0)


def test_decode_failures_raise():
    with pytest.raises(JSONDecodeError):
        jsonutil.decode("{not json")
    with pytest.raises(JSONDecodeError):
        jsonutil.decode(b"\xff\xfe\xfa")
    with pytest.raises(JSONDecodeError):
        jsonutil.decode(None)  # type: ignore[arg-type]
    with pytest.raises(JSONDecodeError):
        jsonutil.decode("[[1]]", depth=1)


def test_decode_depth_counts_containers_only():
    assert jsonutil.decode("[1]", depth=1) == [1]
    assert jsonutil.decode('"scalar"', depth=1) == "scalar"


def test_decode_bigint_as_string():
    assert jsonutil.decode("[12345678901234567890, 7]", bigint_as_string=True) == ["12345678901234567890", 7]
    assert jsonutil.decode("12345678901234567890") == 12345678901234567890


def test_is_valid_and_pretty_print():
    assert jsonutil.is_valid('{"a": 1}') is True
    assert jsonutil.is_valid("nope") is False
    assert jsonutil.is_valid(42) is False
    assert jsonutil.pretty_print({"a": [1]}) == '{\n    "a": [\n        1\n    ]\n}'


def test_encode_escapes_non_ascii_unless_asked_not_to():
    assert jsonutil.encode("é") == '"\\u00e9"'
    assert jsonutil.encode("é", ensure_ascii=False) == '"é"'
