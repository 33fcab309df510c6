# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpsclient."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .version import __version__

DEFAULT_USER_AGENT = f"Litebase-httpsClient/{__version__}"
DEFAULT_MAX_REDIRECTS = 10
DEFAULT_PROXY_PORT = 1080
DEFAULT_JSON_DEPTH = 512


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


class AuthScheme(str, Enum):
    BASIC = "basic"
    DIGEST = "digest"
    NTLM = "ntlm"
    NEGOTIATE = "negotiate"
    NONE = "none"


class ProxyType(str, Enum):
    HTTP = "http"
    HTTP_1_0 = "http1.0"
    HTTPS = "https"
    SOCKS4 = "socks4"
    SOCKS4A = "socks4a"
    SOCKS5 = "socks5"
    SOCKS5_HOSTNAME = "socks5h"

    @property
    def url_scheme(self) -> str:
        if self is ProxyType.HTTP_1_0:
            return "http"
        return self.value


@dataclass(frozen=True)
class AuthCredentials:
    user: str = ""
    password: str = ""
    scheme: AuthScheme = AuthScheme.BASIC

    @property
    def enabled(self) -> bool:
        return bool(self.user) and self.scheme is not AuthScheme.NONE


@dataclass(frozen=True)
class ProxyConfig:
    address: str | None = None
    port: int = DEFAULT_PROXY_PORT
    type: ProxyType = ProxyType.HTTP
    tunnel: bool = False
    auth: AuthCredentials = field(default_factory=AuthCredentials)

    @property
    def enabled(self) -> bool:
        return self.address is not None


@dataclass(frozen=True)
class JsonOptions:
    """Options used when decoding response bodies as JSON."""

    depth: int = DEFAULT_JSON_DEPTH
    bigint_as_string: bool = False


@dataclass
class ClientSettings:
    """Environment-backed defaults for new clients."""

    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = None
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    verify_peer: bool = True
    verify_host: bool = True
    ca_bundle: str | None = None

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Create settings from environment variables (evaluated at call time)."""
        max_redirects = _int_env("HTTPSCLIENT_MAX_REDIRECTS", cls.max_redirects)
        if max_redirects < 0:
            max_redirects = cls.max_redirects
        return cls(
            user_agent=os.getenv("HTTPSCLIENT_USER_AGENT", cls.user_agent),
            timeout=_optional_float_env("HTTPSCLIENT_TIMEOUT", cls.timeout),
            max_redirects=max_redirects,
            verify_peer=_bool_env("HTTPSCLIENT_VERIFY_PEER", cls.verify_peer),
            verify_host=_bool_env("HTTPSCLIENT_VERIFY_HOST", cls.verify_host),
            ca_bundle=os.getenv("HTTPSCLIENT_CA_BUNDLE") or cls.ca_bundle,
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()


@dataclass
class TransportConfig:
    """
    Mutable per-client defaults applied to every outgoing request.

    Header names are stored lower-cased so lookups and merges are case-insensitive.
    `transport_options` holds raw httpx.Client keyword arguments and wins over the
    options the dispatcher builds itself.
    """

    headers: dict[str, str] = field(default_factory=dict)
    cookie: str | None = None
    cookie_file: str | None = None
    auth: AuthCredentials = field(default_factory=AuthCredentials)
    proxy: ProxyConfig = field(default_factory=ProxyConfig)
    verify_peer: bool = True
    verify_host: bool = True
    timeout: float | None = None
    transport_options: dict[str, Any] = field(default_factory=dict)
    json_options: JsonOptions = field(default_factory=JsonOptions)

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> TransportConfig:
        return cls(
            verify_peer=settings.verify_peer,
            verify_host=settings.verify_host,
            timeout=settings.timeout,
        )


__all__ = [
    "AuthCredentials",
    "AuthScheme",
    "ClientSettings",
    "DEFAULT_USER_AGENT",
    "JsonOptions",
    "ProxyConfig",
    "ProxyType",
    "TransportConfig",
    "load_client_settings",
]
