# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client: per-instance transport configuration and request dispatch."""

from __future__ import annotations

import logging
import os
import ssl
from dataclasses import replace
from enum import Enum
from http.cookiejar import FileCookieJar, LoadError, MozillaCookieJar
from typing import Any

import certifi
import httpx

from ..config import (
    DEFAULT_JSON_DEPTH,
    DEFAULT_PROXY_PORT,
    AuthCredentials,
    AuthScheme,
    ClientSettings,
    JsonOptions,
    ProxyConfig,
    ProxyType,
    TransportConfig,
    load_client_settings,
)
from ..errors import TransportError
from .auth import build_auth, build_proxy_url
from .headers import format_headers, normalize_headers, normalize_name
from .models import HeaderList, HttpRequest, Method, PreparedRequest
from .response import Response
from .transport import HttpxTransport, Transport
from .url import append_query, encode_query, encode_url, is_structured

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _method_name(method: Method | str) -> str:
    if isinstance(method, Enum):
        return str(method.value).upper()
    return str(method).strip().upper()


def _has_header(headers: HeaderList, name: str) -> bool:
    return any(key == name for key, _ in headers)


class Client:
    """
    HTTP client holding its own transport configuration.

    Setters mutate this client's TransportConfig and return the new value. Verb
    methods merge that configuration with per-call arguments and dispatch through the
    Transport. Clients do not share configuration with each other.
    """

    def __init__(self, settings: ClientSettings | None = None, transport: Transport | None = None):
        self.settings = settings or load_client_settings()
        self.transport = transport or HttpxTransport()
        self.config = TransportConfig.from_settings(self.settings)

    def reset(self) -> TransportConfig:
        self.config = TransportConfig.from_settings(self.settings)
        return self.config

    # Configuration setters

    def json_opts(self, depth: int = DEFAULT_JSON_DEPTH, bigint_as_string: bool = False) -> JsonOptions:
        self.config.json_options = JsonOptions(depth=depth, bigint_as_string=bigint_as_string)
        return self.config.json_options

    def verify_peer(self, enabled: bool) -> bool:
        self.config.verify_peer = enabled
        return enabled

    def verify_host(self, enabled: bool) -> bool:
        self.config.verify_host = enabled
        return enabled

    def timeout(self, seconds: float | None) -> float | None:
        """Set the whole-request timeout. Zero or a negative value means no timeout."""
        if seconds is not None and seconds <= 0:
            seconds = None
        self.config.timeout = seconds
        return seconds

    def default_headers(self, headers: Any) -> dict[str, str]:
        self.config.headers = {**self.config.headers, **normalize_headers(headers)}
        return dict(self.config.headers)

    def default_header(self, name: str, value: Any) -> str:
        self.config.headers[normalize_name(name)] = "" if value is None else str(value)
        return self.config.headers[normalize_name(name)]

    def clear_default_headers(self) -> dict[str, str]:
        self.config.headers = {}
        return {}

    def transport_opts(self, options: dict[str, Any]) -> dict[str, Any]:
        self.config.transport_options = {**self.config.transport_options, **options}
        return dict(self.config.transport_options)

    def transport_opt(self, name: str, value: Any) -> Any:
        self.config.transport_options[name] = value
        return value

    def clear_transport_opts(self) -> dict[str, Any]:
        self.config.transport_options = {}
        return {}

    def cookie(self, cookie: str | None) -> str | None:
        self.config.cookie = cookie
        return cookie

    def cookie_file(self, path: str | os.PathLike[str] | None) -> str | None:
        self.config.cookie_file = os.fspath(path) if path is not None else None
        return self.config.cookie_file

    def auth(self, user: str = "", password: str = "", scheme: AuthScheme | str = AuthScheme.BASIC) -> AuthCredentials:
        self.config.auth = AuthCredentials(user=user, password=password, scheme=AuthScheme(scheme))
        return self.config.auth

    def proxy(
        self,
        address: str | None,
        port: int = DEFAULT_PROXY_PORT,
        proxy_type: ProxyType | str = ProxyType.HTTP,
        tunnel: bool = False,
    ) -> ProxyConfig:
        self.config.proxy = replace(
            self.config.proxy,
            address=address,
            port=port,
            type=ProxyType(proxy_type),
            tunnel=tunnel,
        )
        return self.config.proxy

    def proxy_auth(self, user: str = "", password: str = "", scheme: AuthScheme | str = AuthScheme.BASIC) -> AuthCredentials:
        credentials = AuthCredentials(user=user, password=password, scheme=AuthScheme(scheme))
        self.config.proxy = replace(self.config.proxy, auth=credentials)
        return credentials

    # Request assembly

    def _verify_option(self) -> ssl.SSLContext | bool:
        if not self.config.verify_peer:
            return False
        context = ssl.create_default_context(cafile=self.settings.ca_bundle or certifi.where())
        if not self.config.verify_host:
            context.check_hostname = False
        return context

    def _base_options(self) -> dict[str, Any]:
        return {
            "follow_redirects": True,
            "max_redirects": self.settings.max_redirects,
            "verify": self._verify_option(),
            "timeout": None,
        }

    def _load_cookie_jar(self, path: str) -> MozillaCookieJar:
        jar = MozillaCookieJar(path)
        if os.path.isfile(path) and os.path.getsize(path) > 0:
            try:
                jar.load(ignore_discard=True, ignore_expires=True)
            except LoadError as exc:
                logger.warning("Ignoring unreadable cookie file %s: %s", path, exc)
        return jar

    @staticmethod
    def _encode_body(body: Any) -> tuple[bytes | None, str | None]:
        if body is None:
            return None, None
        if isinstance(body, (bytes, bytearray)):
            return bytes(body), None
        if isinstance(body, str):
            return body.encode("utf-8"), None
        if is_structured(body):
            return encode_query(body).encode("ascii"), FORM_CONTENT_TYPE
        return str(body).encode("utf-8"), None

    def prepare(self, request: HttpRequest) -> PreparedRequest:
        """Merge configuration and per-call arguments into a PreparedRequest."""
        method = _method_name(request.method)
        url = request.url
        content: bytes | None = None
        content_type: str | None = None

        if method == Method.GET.value:
            if is_structured(request.body):
                url = append_query(str(url), encode_query(request.body))
            elif request.body is not None:
                logger.debug("Dropping non-structured body on GET %s", url)
        else:
            content, content_type = self._encode_body(request.body)

        url = encode_url(url)

        headers = format_headers(self.config.headers, request.headers, user_agent=self.settings.user_agent)
        if content_type and not _has_header(headers, "content-type"):
            headers.append(("content-type", content_type))
        if self.config.cookie and not _has_header(headers, "cookie"):
            headers.append(("cookie", self.config.cookie))

        options = self._base_options()
        options.update(self.config.transport_options)

        if self.config.timeout is not None:
            options["timeout"] = self.config.timeout
        if self.config.cookie_file:
            options["cookies"] = self._load_cookie_jar(self.config.cookie_file)
        if request.username:
            options["auth"] = httpx.BasicAuth(request.username, request.password or "")
        if self.config.auth.enabled:
            options["auth"] = build_auth(self.config.auth)
        if self.config.proxy.enabled:
            options["proxy"] = build_proxy_url(self.config.proxy)

        return PreparedRequest(method=method, url=url, headers=headers, content=content, options=options)

    def send(
        self,
        method: Method | str,
        url: str,
        body: Any = None,
        headers: Any = None,
        username: str | None = None,
        password: str | None = None,
    ) -> Response:
        """
        Send a request and wrap the result in a Response.

        Raises MalformedURLError before any network activity when the URL cannot be
        parsed, and TransportError when the transport fails. No retries are attempted.
        """
        request = HttpRequest(
            url=url,
            method=_method_name(method),
            body=body,
            headers=headers,
            username=username,
            password=password,
        )
        prepared = self.prepare(request)
        logger.debug("%s %s", prepared.method, prepared.url)

        result = self.transport.execute(prepared)
        if not result.ok:
            raise TransportError(result.error_message or "Transport error", result.error_category)

        jar = prepared.options.get("cookies")
        if isinstance(jar, FileCookieJar) and jar.filename:
            try:
                jar.save(ignore_discard=True, ignore_expires=True)
            except OSError as exc:
                logger.warning("Could not write cookie file %s: %s", jar.filename, exc)

        header_text, raw_body = result.split()
        logger.debug("%s %s -> %s", prepared.method, prepared.url, result.status_code)
        return Response.from_raw(result.status_code, raw_body, header_text, self.config.json_options)

    # Verbs

    def get(self, url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.GET, url, params, headers, username, password)

    def head(self, url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.HEAD, url, params, headers, username, password)

    def options(self, url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.OPTIONS, url, params, headers, username, password)

    def connect(self, url: str, headers: Any = None, params: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.CONNECT, url, params, headers, username, password)

    def post(self, url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.POST, url, body, headers, username, password)

    def put(self, url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.PUT, url, body, headers, username, password)

    def patch(self, url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.PATCH, url, body, headers, username, password)

    def delete(self, url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.DELETE, url, body, headers, username, password)

    def trace(self, url: str, headers: Any = None, body: Any = None, username: str | None = None, password: str | None = None) -> Response:
        return self.send(Method.TRACE, url, body, headers, username, password)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


def create_default_client(settings: ClientSettings | None = None) -> Client:
    """Factory for a Client backed by the default httpx transport."""
    return Client(settings or load_client_settings(), HttpxTransport())


__all__ = ["Client", "FORM_CONTENT_TYPE", "create_default_client"]
