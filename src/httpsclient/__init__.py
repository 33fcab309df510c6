# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpsclient package entrypoint.

A thin convenience layer over httpx: a Client that carries default headers, cookies,
credentials, proxy and TLS settings, a façade module (`httpsclient.api`) bound to a
shared default Client, an immutable Response envelope that parses headers and tries
to decode JSON bodies, and fail-fast JSON helpers (`httpsclient.jsonutil`).
"""

from . import api, jsonutil
from .config import (
    AuthCredentials,
    AuthScheme,
    ClientSettings,
    JsonOptions,
    ProxyConfig,
    ProxyType,
    TransportConfig,
    load_client_settings,
)
from .errors import (
    ErrorCategory,
    HttpsClientError,
    JSONDecodeError,
    JSONEncodeError,
    MalformedURLError,
    TransportError,
    UnsupportedAuthError,
)
from .http import (
    Client,
    HttpxTransport,
    Method,
    Response,
    StubTransport,
    Transport,
    build_http_query,
    create_default_client,
    explain_status,
    reason_phrase,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "AuthCredentials",
    "AuthScheme",
    "Client",
    "ClientSettings",
    "ErrorCategory",
    "HttpsClientError",
    "HttpxTransport",
    "JSONDecodeError",
    "JSONEncodeError",
    "JsonOptions",
    "MalformedURLError",
    "Method",
    "ProxyConfig",
    "ProxyType",
    "Response",
    "StubTransport",
    "Transport",
    "TransportConfig",
    "TransportError",
    "UnsupportedAuthError",
    "api",
    "build_http_query",
    "create_default_client",
    "explain_status",
    "jsonutil",
    "load_client_settings",
    "reason_phrase",
    "setup_logging",
    "__version__",
]
