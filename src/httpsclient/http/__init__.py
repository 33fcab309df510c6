# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubTransport, make_raw_result
from .auth import build_auth, build_proxy_url
from .client import Client, create_default_client
from .headers import STATUS_LINE_KEY, format_headers, header_value, normalize_headers, parse_header_text
from .models import HttpRequest, Method, PreparedRequest, RawTransportResult
from .response import Response
from .status import explain_status, reason_phrase
from .transport import HttpxTransport, Transport
from .url import build_http_query, encode_query, encode_url

__all__ = [
    "STATUS_LINE_KEY",
    "Client",
    "HttpRequest",
    "HttpxTransport",
    "Method",
    "PreparedRequest",
    "RawTransportResult",
    "Response",
    "StubTransport",
    "Transport",
    "build_auth",
    "build_http_query",
    "build_proxy_url",
    "create_default_client",
    "encode_query",
    "encode_url",
    "explain_status",
    "format_headers",
    "header_value",
    "make_raw_result",
    "normalize_headers",
    "parse_header_text",
    "reason_phrase",
]
