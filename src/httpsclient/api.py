# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Module-level façade over a shared default Client.

Convenient for scripts: configure once, then call the verb functions. The shared
client is process-wide mutable state without locking, so configure it before
using it from several threads, or give each thread its own Client.
"""

from __future__ import annotations

import os
from typing import Any

from .config import (
    DEFAULT_JSON_DEPTH,
    DEFAULT_PROXY_PORT,
    AuthCredentials,
    AuthScheme,
    JsonOptions,
    ProxyConfig,
    ProxyType,
)
from .http.client import Client, create_default_client
from .http.models import Method
from .http.response import Response

_default_client: Client | None = None


def get_default_client() -> Client:
    """Return the shared Client, creating it from environment settings on first use."""
    global _default_client
    if _default_client is None:
        _default_client = create_default_client()
    return _default_client


def set_default_client(client: Client) -> Client:
    global _default_client
    _default_client = client
    return client


def reset_default_client() -> None:
    """Drop the shared Client; the next call builds a fresh one."""
    global _default_client
    if _default_client is not None:
        _default_client.close()
    _default_client = None


def json_opts(depth: int = DEFAULT_JSON_DEPTH, bigint_as_string: bool = False) -> JsonOptions:
    return get_default_client().json_opts(depth, bigint_as_string)


def verify_peer(enabled: bool) -> bool:
    return get_default_client().verify_peer(enabled)


def verify_host(enabled: bool) -> bool:
    return get_default_client().verify_host(enabled)


def timeout(seconds: float | None) -> float | None:
    return get_default_client().timeout(seconds)


def default_headers(headers: Any) -> dict[str, str]:
    return get_default_client().default_headers(headers)


def default_header(name: str, value: Any) -> str:
    return get_default_client().default_header(name, value)


def clear_default_headers() -> dict[str, str]:
    return get_default_client().clear_default_headers()


def transport_opts(options: dict[str, Any]) -> dict[str, Any]:
    return get_default_client().transport_opts(options)


def transport_opt(name: str, value: Any) -> Any:
    return get_default_client().transport_opt(name, value)


def clear_transport_opts() -> dict[str, Any]:
    return get_default_client().clear_transport_opts()


def cookie(value: str | None) -> str | None:
    return get_default_client().cookie(value)


def cookie_file(path: str | os.PathLike[str] | None) -> str | None:
    return get_default_client().cookie_file(path)


def auth(user: str = "", password: str = "", scheme: AuthScheme | str = AuthScheme.BASIC) -> AuthCredentials:
    return get_default_client().auth(user, password, scheme)


def proxy(
    address: str | None,
    port: int = DEFAULT_PROXY_PORT,
    proxy_type: ProxyType | str = ProxyType.HTTP,
    tunnel: bool = False,
) -> ProxyConfig:
    return get_default_client().proxy(address, port, proxy_type, tunnel)


def proxy_auth(user: str = "", password: str = "", scheme: AuthScheme | str = AuthScheme.BASIC) -> AuthCredentials:
    return get_default_client().proxy_auth(user, password, scheme)


def send(
    method: Method | str,
    url: str,
    body: Any = None,
    headers: Any = None,
    username: str | None = None,
    password: str | None = None,
) -> Response:
    return get_default_client().send(method, url, body, headers, username, password)


def get(url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().get(url, headers, params, username, password)


def head(url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().head(url, headers, params, username, password)


def options(url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().options(url, headers, params, username, password)


def connect(url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().connect(url, headers, params, username, password)


def post(url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().post(url, headers, body, username, password)


def put(url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().put(url, headers, body, username, password)


def patch(url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().patch(url, headers, body, username, password)


def delete(url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().delete(url, headers, body, username, password)


def trace(url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
    return get_default_client().trace(url, headers, body, username, password)


__all__ = [
    "auth",
    "clear_default_headers",
    "clear_transport_opts",
    "connect",
    "cookie",
    "cookie_file",
    "default_header",
    "default_headers",
    "delete",
    "get",
    "get_default_client",
    "head",
    "json_opts",
    "options",
    "patch",
    "post",
    "proxy",
    "proxy_auth",
    "put",
    "reset_default_client",
    "send",
    "set_default_client",
    "timeout",
    "trace",
    "transport_opt",
    "transport_opts",
    "verify_host",
    "verify_peer",
]
