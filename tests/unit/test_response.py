# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from httpsclient.config import JsonOptions
from httpsclient.http.adapters import make_raw_result
from httpsclient.http.headers import STATUS_LINE_KEY
from httpsclient.http.response import Response
from httpsclient.http.status import explain_status, reason_phrase

RAW_HEADERS = "HTTP/1.1 200 OK\r\nContent-Type: application/json\r\nSet-Cookie: a=1\r\nSet-Cookie: b=2\r\n\r\n"


def _response(body: bytes = b'{"a": 1}') -> Response:
    return Response.from_raw(200, body, RAW_HEADERS)


def test_from_raw_decodes_json_body():
    resp = _response()
    assert resp.status_code == 200
    assert resp.raw_body == b'{"a": 1}'
    assert resp.body == {"a": 1}
    assert resp.headers[STATUS_LINE_KEY] == "HTTP/1.1 200 OK"
    assert resp.header("set-cookie") == ["a=1", "b=2"]
    assert resp.header_line("Set-Cookie") == "a=1, b=2"
    assert resp.has_header("CONTENT-TYPE")
    assert not resp.has_header("x-missing")
    assert resp.header("x-missing") is None


def test_from_raw_falls_back_to_raw_bytes():
    assert _response(b"<html></html>").body == b"<html></html>"
    assert _response(b"").body == b""
    assert _response(b"\xff\xfe{").body == b"\xff\xfe{"


def test_from_raw_honours_json_options():
    big = b"[12345678901234567890]"
    assert Response.from_raw(200, big, "", JsonOptions(bigint_as_string=True)).body == ["12345678901234567890"]
    assert Response.from_raw(200, big, "").body == [12345678901234567890]
    assert Response.from_raw(200, b"[[1]]", "", JsonOptions(depth=1)).body == b"[[1]]"


def test_raw_result_split_keeps_headers_and_body_apart():
    result = make_raw_result(201, [("X-A", "1")], b"Fake-Header: not-a-header\r\n\r\nrest")
    header_text, body = result.split()
    assert body == result.raw[result.header_size :]
    assert body == b"Fake-Header: not-a-header\r\n\r\nrest"

    resp = Response.from_raw(result.status_code, body, header_text)
    assert resp.header("x-a") == "1"
    assert not resp.has_header("fake-header")


def test_with_header_returns_new_envelope():
    original = _response()
    updated = original.with_header("X", "v")
    assert updated.header("X") == "v"
    assert original.header("X") is None

    replaced = original.with_header("content-type", "text/plain")
    assert replaced.header("Content-Type") == "text/plain"
    assert list(replaced.headers).count("Content-Type") == 0
    assert original.header("content-type") == "application/json"


def test_with_added_header_promotes_scalar_to_list():
    original = _response()
    added = original.with_added_header("Content-Type", "text/plain")
    assert added.header("content-type") == ["application/json", "text/plain"]
    assert original.header("content-type") == "application/json"

    appended = original.with_added_header("Set-Cookie", "c=3")
    assert appended.header("set-cookie") == ["a=1", "b=2", "c=3"]
    assert original.header("set-cookie") == ["a=1", "b=2"]

    fresh = original.with_added_header("X-New", "1")
    assert fresh.header("x-new") == "1"


def test_without_header_and_body_and_status():
    original = _response()

    stripped = original.without_header("set-cookie")
    assert not stripped.has_header("Set-Cookie")
    assert original.has_header("Set-Cookie")

    rebodied = original.with_body("[1, 2]")
    assert rebodied.raw_body == b"[1, 2]"
    assert rebodied.body == [1, 2]
    assert original.body == {"a": 1}

    teapot = original.with_status(418)
    assert teapot.status_code == 418
    assert teapot.reason_phrase == "I'm a teapot"
    assert original.status_code == 200
    assert original.with_status(299, "Custom").reason_phrase == "Custom"


def test_protocol_version_and_text():
    resp = Response.from_raw(200, "é".encode("latin-1"), "HTTP/2 200\r\nContent-Type: text/plain; charset=latin-1\r\n")
    assert resp.protocol_version == "2"
    assert resp.text == "é"
    assert resp.with_protocol_version("1.0").protocol_version == "1.0"
    assert resp.protocol_version == "2"
    assert Response(status_code=204).protocol_version == "1.1"

    unknown_charset = Response.from_raw(200, b"ok", "Content-Type: text/plain; charset=nope\r\n")
    assert unknown_charset.text == "ok"


def test_reason_phrase_table():
    assert reason_phrase(200) == "OK"
    assert reason_phrase(404) == "Not Found"
    assert reason_phrase(511) == "Network Authentication Required"
    assert reason_phrase(999) == ""
    assert _response().reason_phrase == "OK"


def test_explain_status_curated_subset():
    explanation = explain_status(429)
    assert set(explanation) == {"meaning", "cause", "next_actions"}
    assert explanation["next_actions"]
    assert explain_status(200) == {}
    assert explain_status(999) == {}

    explanation["next_actions"].append("mutated")
    assert "mutated" not in explain_status(429)["next_actions"]
