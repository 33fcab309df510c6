# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from httpsclient.errors import MalformedURLError
from httpsclient.http.headers import (
    STATUS_LINE_KEY,
    find_header_key,
    format_headers,
    header_value,
    normalize_headers,
    parse_header_text,
)
from httpsclient.http.url import append_query, build_http_query, encode_query, encode_url, is_structured


def test_format_headers_per_call_wins_case_insensitively():
    formatted = format_headers({"X-Token": "default", "Accept": "text/html"}, {" x-token ": "call"}, user_agent="UA/1.0")
    assert formatted == [
        ("x-token", "call"),
        ("accept", "text/html"),
        ("user-agent", "UA/1.0"),
        ("expect", ""),
    ]


def test_format_headers_keeps_explicit_user_agent_and_expect():
    formatted = format_headers(None, {"User-Agent": "Mine", "Expect": "100-continue"}, user_agent="UA/1.0")
    assert formatted == [("user-agent", "Mine"), ("expect", "100-continue")]


def test_normalize_headers_accepts_httpx_headers_and_pairs():
    assert normalize_headers(httpx.Headers({"X-A": "1"})) == {"x-a": "1"}
    assert normalize_headers([("X-B", 2), ("X-C", None)]) == {"x-b": "2", "x-c": ""}
    assert normalize_headers(None) == {}


def test_parse_header_text_collects_repeats_continuations_and_status_line():
    raw = (
        "HTTP/1.1 200 OK\r\n"
        "Set-Cookie: a=1\r\n"
        "Content-Type: text/plain\r\n"
        "Set-Cookie: b=2\r\n"
        "Set-Cookie: c=3\r\n"
        "X-Folded: first\r\n"
        "\tsecond\r\n"
        "\r\n"
    )
    headers = parse_header_text(raw)
    assert headers[STATUS_LINE_KEY] == "HTTP/1.1 200 OK"
    assert headers["Set-Cookie"] == ["a=1", "b=2", "c=3"]
    assert headers["Content-Type"] == "text/plain"
    assert headers["X-Folded"] == "first\r\n\tsecond"


def test_parse_header_text_splits_on_first_colon_only():
    headers = parse_header_text("Location: http://example.com:8080/next\n")
    assert headers == {"Location": "http://example.com:8080/next"}


def test_parse_header_text_strips_padding_around_names():
    headers = parse_header_text("HTTP/1.1 200 OK\r\nX-Padded : v\r\n")
    assert headers["X-Padded"] == "v"
    assert find_header_key(headers, "x-padded") == "X-Padded"


def test_header_value_joins_lists_and_ignores_case():
    headers = {"Set-Cookie": ["a=1", "b=2"], "Content-Type": "text/plain"}
    assert header_value(headers, "set-cookie") == "a=1, b=2"
    assert header_value(headers, "CONTENT-TYPE") == "text/plain"
    assert header_value(headers, "missing", "fallback") == "fallback"


def test_encode_url_preserves_query_order():
    assert encode_url("http://x/test?b=2&a=1") == "http://x/test?b=2&a=1"


def test_encode_url_reencodes_query_and_drops_fragment():
    assert encode_url("https://example.com:8443/a?q=a%20b&flag#frag") == "https://example.com:8443/a?q=a+b&flag="
    assert encode_url("http://example.com/p?a[b]=1&a[b]=2") == "http://example.com/p?a%5Bb%5D=1&a%5Bb%5D=2"
    assert encode_url("http://example.com") == "http://example.com"


@pytest.mark.parametrize("url", ["", "example.com/path", "not a url", "http://", "http://host:99999/", "http://host:abc/"])
def test_encode_url_rejects_malformed(url):
    with pytest.raises(MalformedURLError):
        encode_url(url)


def test_build_http_query_flattens_nested_structures():
    assert build_http_query({"a": {"b": 1, "c": 2}}) == {"a[b]": 1, "a[c]": 2}
    assert build_http_query({"a": [1, {"x": "y"}], "b": "z"}) == {"a[0]": 1, "a[1][x]": "y", "b": "z"}
    assert build_http_query({"empty": {}, "k": None}) == {"k": None}


def test_build_http_query_reads_plain_objects():
    class Filter:
        def __init__(self):
            self.status = "open"
            self.tags = ["a", "b"]

    assert build_http_query({"filter": Filter()}) == {
        "filter[status]": "open",
        "filter[tags][0]": "a",
        "filter[tags][1]": "b",
    }


def test_encode_query_converts_leaves():
    assert encode_query({"a": True, "b": None, "c": "x y", "d": {"e": False}}) == "a=1&c=x+y&d%5Be%5D=0"


def test_append_query_and_is_structured():
    assert append_query("http://x/p", "a=1") == "http://x/p?a=1"
    assert append_query("http://x/p?z=0", "a=1") == "http://x/p?z=0&a=1"
    assert append_query("http://x/p", "") == "http://x/p"
    assert append_query("http://x/p#top", "a=1") == "http://x/p?a=1#top"
    assert is_structured({"a": 1}) is True
    assert is_structured(["a"]) is True
    assert is_structured("a=1") is False
    assert is_structured(b"raw") is False
    assert is_structured(None) is False
