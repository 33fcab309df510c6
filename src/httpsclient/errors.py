# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy and transport error taxonomy."""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROXY_ERROR = "PROXY_ERROR"
    TOO_MANY_REDIRECTS = "TOO_MANY_REDIRECTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class HttpsClientError(Exception):
    """Base class for every error raised by httpsclient."""


class TransportError(HttpsClientError):
    """The underlying transport failed before a response was produced."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.category = category

    @property
    def reason(self) -> str:
        return error_category_to_reason(self.category)


class MalformedURLError(HttpsClientError, ValueError):
    """URL cannot be split into scheme, host and path."""


class JSONEncodeError(HttpsClientError, ValueError):
    pass


class JSONDecodeError(HttpsClientError, ValueError):
    pass


class UnsupportedAuthError(HttpsClientError):
    """Auth scheme needs an optional package that is not installed."""


_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "getaddrinfo failed",
    "no address associated",
)


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.ProxyError):
        return ErrorCategory.PROXY_ERROR

    if isinstance(exc, httpx.TooManyRedirects):
        return ErrorCategory.TOO_MANY_REDIRECTS

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_REQUEST

    cause = exc.__cause__ or exc.__context__
    if isinstance(exc, ssl.SSLError) or isinstance(cause, ssl.SSLError):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)) or isinstance(cause, socket.gaierror):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, httpx.ConnectError):
        message = str(exc).lower()
        if any(marker in message for marker in _DNS_MARKERS):
            return ErrorCategory.DNS_ERROR
        if "certificate" in message or "ssl" in message:
            return ErrorCategory.SSL_ERROR
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError, ConnectionError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.PROXY_ERROR: "Proxy connection failure",
        ErrorCategory.TOO_MANY_REDIRECTS: "Redirect limit exceeded",
        ErrorCategory.INVALID_REQUEST: "Request rejected by the transport",
        ErrorCategory.UNKNOWN_ERROR: "Network error",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed due to network error")


__all__ = [
    "ErrorCategory",
    "HttpsClientError",
    "JSONDecodeError",
    "JSONEncodeError",
    "MalformedURLError",
    "TransportError",
    "UnsupportedAuthError",
    "categorize_exception",
    "error_category_to_reason",
]
