"""Minimal HTTP helpers for the CLI.

The implementation uses :mod:`urllib` from the Python standard library.
Failures are raised as :class:`ServiceRejected` when Notion sent a
structured error body and :class:`TransportFailure` otherwise; callers never
see :mod:`urllib` exceptions.
"""

from __future__ import annotations

import errno
import json
import socket
from typing import Any, Dict
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import NOTION_VERSION
from .errors import ServiceRejected, TransportFailure

TIMEOUT = 60


def http_json(
    method: str,
    url: str,
    token: str,
    payload: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Perform an HTTP request and return the parsed JSON object."""

    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
        "Notion-Version": NOTION_VERSION,
    }
    data = None
    if payload is not None:
        # JSON body for POST/PATCH requests
        headers["Content-Type"] = "application/json"
        data = json.dumps(payload).encode("utf-8")
    req = Request(url=url, method=method.upper(), headers=headers, data=data)
    try:
        with urlopen(req, timeout=TIMEOUT) as resp:
            raw = resp.read()
    except HTTPError as e:
        raise _error_from_http(e) from e
    except URLError as e:
        raise _error_from_url(e) from e

    if not raw:
        return {}
    try:
        body = json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise TransportFailure(f"Unexpected response from {url}: {e}") from e
    if not isinstance(body, dict):
        raise TransportFailure(f"Unexpected response from {url}")
    return body


def _error_from_http(e: HTTPError) -> Exception:
    body = e.read().decode("utf-8", errors="ignore")
    try:
        data = json.loads(body)
    except ValueError:
        data = None
    # Notion errors look like {"object": "error", "status": 404, "code": ..., "message": ...}
    if isinstance(data, dict) and data.get("code"):
        return ServiceRejected(data["code"], data.get("message") or body, status=e.code)
    return TransportFailure(body.strip() or str(e.reason), status=e.code)


def _error_from_url(e: URLError) -> Exception:
    reason = e.reason
    network = isinstance(reason, (socket.gaierror, ConnectionRefusedError)) or (
        isinstance(reason, OSError) and reason.errno == errno.ECONNREFUSED
    )
    return TransportFailure(str(reason), network=network)
