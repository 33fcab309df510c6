# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Translate configured credentials and proxies into httpx options."""

from __future__ import annotations

import importlib
import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..config import AuthCredentials, AuthScheme, ProxyConfig
from ..errors import UnsupportedAuthError

logger = logging.getLogger(__name__)

# scheme -> (module, attribute, pip extra)
_OPTIONAL_AUTH: dict[AuthScheme, tuple[str, str, str]] = {
    AuthScheme.NTLM: ("httpx_ntlm", "HttpNtlmAuth", "ntlm"),
    AuthScheme.NEGOTIATE: ("httpx_gssapi", "HTTPSPNEGOAuth", "negotiate"),
}


def _load_optional_auth(scheme: AuthScheme) -> Any:
    module_name, attribute, extra = _OPTIONAL_AUTH[scheme]
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise UnsupportedAuthError(
            f"{scheme.value} authentication requires the {module_name!r} package; "
            f"install it with `pip install httpsclient[{extra}]`"
        ) from exc
    return getattr(module, attribute)


def build_auth(credentials: AuthCredentials) -> httpx.Auth | None:
    """Return an httpx auth flow for `credentials`, or None when auth is disabled."""
    if not credentials.enabled:
        return None
    if credentials.scheme is AuthScheme.BASIC:
        return httpx.BasicAuth(credentials.user, credentials.password)
    if credentials.scheme is AuthScheme.DIGEST:
        return httpx.DigestAuth(credentials.user, credentials.password)
    if credentials.scheme is AuthScheme.NTLM:
        return _load_optional_auth(AuthScheme.NTLM)(credentials.user, credentials.password)
    if credentials.scheme is AuthScheme.NEGOTIATE:
        # SPNEGO takes its identity from the Kerberos credential cache.
        return _load_optional_auth(AuthScheme.NEGOTIATE)()
    return None


def build_proxy_url(proxy: ProxyConfig) -> str:
    """
    Build a proxy URL from the configured address, port, type and credentials.

    An address that already carries a scheme or port keeps it.
    """
    address = str(proxy.address or "")
    scheme = proxy.type.url_scheme
    if "://" in address:
        scheme, _, address = address.partition("://")
    host = address.rstrip("/")

    has_port = host.rsplit("]", 1)[-1].count(":") == 1 if host.startswith("[") else ":" in host
    if not has_port and proxy.port:
        host = f"{host}:{proxy.port}"

    userinfo = ""
    if proxy.auth.user:
        if proxy.auth.scheme is not AuthScheme.BASIC:
            logger.warning("Proxy auth scheme %s is not supported; sending basic credentials", proxy.auth.scheme.value)
        userinfo = f"{quote(proxy.auth.user, safe='')}:{quote(proxy.auth.password, safe='')}@"

    if proxy.tunnel:
        logger.debug("Proxy tunnelling is negotiated by httpx for https targets only")

    return f"{scheme}://{userinfo}{host}"


__all__ = ["build_auth", "build_proxy_url"]
