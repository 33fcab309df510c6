# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Status code reason phrases and human-oriented explanations."""

from __future__ import annotations

from typing import Any

REASON_PHRASES: dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
}

_EXPLANATIONS: dict[int, dict[str, Any]] = {
    400: {
        "meaning": "The server could not understand the request.",
        "cause": "Malformed syntax, invalid framing or a body that fails validation.",
        "next_actions": ["Check the request body and query parameters", "Compare the payload against the API documentation"],
    },
    401: {
        "meaning": "The request lacks valid authentication credentials.",
        "cause": "Missing, expired or wrong credentials for the target resource.",
        "next_actions": ["Configure credentials with auth()", "Check the WWW-Authenticate response header for the expected scheme"],
    },
    403: {
        "meaning": "The server understood the request but refuses to authorize it.",
        "cause": "The authenticated identity has no permission, or a WAF blocked the request.",
        "next_actions": ["Verify account permissions", "Check whether a firewall or rate limiter is in front of the server"],
    },
    404: {
        "meaning": "The server cannot find the requested resource.",
        "cause": "Wrong URL path, a removed resource, or a hidden resource.",
        "next_actions": ["Double-check the URL path and spelling", "Confirm the resource still exists"],
    },
    405: {
        "meaning": "The method is not supported for the target resource.",
        "cause": "For example, a POST sent to a read-only endpoint.",
        "next_actions": ["Check the Allow response header", "Use a method the endpoint accepts"],
    },
    407: {
        "meaning": "The client must authenticate with the proxy.",
        "cause": "Missing or wrong proxy credentials.",
        "next_actions": ["Configure proxy credentials with proxy_auth()"],
    },
    408: {
        "meaning": "The server timed out waiting for the request.",
        "cause": "A slow client connection or a stalled upload.",
        "next_actions": ["Retry the request", "Reduce the request size or check network stability"],
    },
    409: {
        "meaning": "The request conflicts with the current state of the resource.",
        "cause": "Concurrent modification or a duplicate create.",
        "next_actions": ["Fetch the latest resource state and retry with updated data"],
    },
    413: {
        "meaning": "The request body is larger than the server allows.",
        "cause": "An upload or payload above the server's configured limit.",
        "next_actions": ["Reduce the payload size", "Split the upload into smaller parts"],
    },
    415: {
        "meaning": "The payload format is not supported.",
        "cause": "A missing or wrong Content-Type header.",
        "next_actions": ["Set the content-type header to a format the endpoint accepts"],
    },
    422: {
        "meaning": "The request was well-formed but contained semantic errors.",
        "cause": "Field-level validation failures.",
        "next_actions": ["Inspect the response body for validation details"],
    },
    429: {
        "meaning": "The client has sent too many requests in a given time.",
        "cause": "Rate limiting by the server or an intermediary.",
        "next_actions": ["Honour the Retry-After response header", "Slow down the request rate"],
    },
    500: {
        "meaning": "The server hit an unexpected condition.",
        "cause": "An unhandled error in the server application.",
        "next_actions": ["Retry later", "Report the failure to the service owner with the request details"],
    },
    502: {
        "meaning": "A gateway or proxy got an invalid response from the upstream server.",
        "cause": "The upstream service is down or returned garbage.",
        "next_actions": ["Retry later", "Check the upstream service health"],
    },
    503: {
        "meaning": "The server is temporarily unable to handle the request.",
        "cause": "Maintenance or overload.",
        "next_actions": ["Honour the Retry-After response header", "Retry later"],
    },
    504: {
        "meaning": "A gateway or proxy did not get a timely response from the upstream server.",
        "cause": "A slow or unreachable upstream service.",
        "next_actions": ["Retry later", "Check the upstream service latency"],
    },
}


def reason_phrase(code: int) -> str:
    """Return the standard reason phrase for `code`, or an empty string."""
    return REASON_PHRASES.get(code, "")


def explain_status(code: int) -> dict[str, Any]:
    """
    Return {"meaning", "cause", "next_actions"} for a curated set of status codes.

    Codes outside that set yield an empty dict.
    """
    explanation = _EXPLANATIONS.get(code)
    if explanation is None:
        return {}
    return {**explanation, "next_actions": list(explanation["next_actions"])}


__all__ = ["REASON_PHRASES", "explain_status", "reason_phrase"]
