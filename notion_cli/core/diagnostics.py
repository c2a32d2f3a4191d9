"""Turn command failures into readable diagnostics.

:func:`describe` never prints or exits; it returns the lines to show and
the exit status so the entry point can do both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import CommandFailed, NotionCliError, ServiceRejected, TransportFailure

REDACTED = "[REDACTED]"
_SENSITIVE = ("token", "secret")

_RELOGIN = '  Run "notion auth login" to re-authenticate.'

# Notion error codes, see https://developers.notion.com/reference/status-codes
_CODE_HINTS: Dict[str, List[str]] = {
    "unauthorized": [
        "  Authentication failed. Your token may be invalid or expired.",
        _RELOGIN,
    ],
    "restricted_resource": ["  Access denied. You may not have permission for this resource."],
    "object_not_found": ["  Resource not found. Check the ID and try again."],
    "rate_limited": ["  Rate limit exceeded. Please wait a moment and try again."],
    "conflict_error": ["  Conflict error. The resource may have been modified."],
    "service_unavailable": ["  Notion service is temporarily unavailable. Try again later."],
}

_STATUS_HINTS: Dict[int, List[str]] = {
    400: ["  Bad request. Check your input and try again."],
    401: ["  Authentication failed.", _RELOGIN],
    403: ["  Permission denied."],
    404: ["  Resource not found."],
    429: ["  Rate limit exceeded. Please wait and try again."],
    500: ["  Notion server error. Please try again later."],
    502: ["  Notion server error. Please try again later."],
    503: ["  Notion server error. Please try again later."],
}


@dataclass
class Diagnostic:
    lines: List[str] = field(default_factory=list)
    exit_code: int = 1

    def render(self) -> str:
        return "\n".join(self.lines)


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(word in lowered for word in _SENSITIVE)


def redact_context(context: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of *context* with credential-like values masked."""
    return {k: (REDACTED if is_sensitive(str(k)) else v) for k, v in context.items()}


def _context_lines(context: Dict[str, Any]) -> List[str]:
    entries = [(k, v) for k, v in redact_context(context).items() if v is not None]
    if not entries:
        return []
    return ["", "  Context:"] + [f"    {k}: {v}" for k, v in entries]


def _code_lines(error: ServiceRejected) -> List[str]:
    if error.code in _CODE_HINTS:
        return list(_CODE_HINTS[error.code])
    if error.code in ("invalid_json", "invalid_request", "invalid_request_url"):
        return [f"  Invalid request: {error.message}"]
    if error.code == "validation_error":
        return [f"  Validation error: {error.message}"]
    return [f"  Error: {error.message}"]


def _status_lines(status: int) -> List[str]:
    if status in _STATUS_HINTS:
        return list(_STATUS_HINTS[status])
    return [f"  HTTP {status} error."]


def _classify(error: BaseException, operation: str) -> List[str]:
    if isinstance(error, ServiceRejected) and error.code:
        return [f"✗ {operation} failed"] + _code_lines(error)

    status: Optional[int] = getattr(error, "status", None)
    if isinstance(error, (ServiceRejected, TransportFailure)) and status:
        return [f"✗ {operation} failed"] + _status_lines(status)

    if isinstance(error, TransportFailure) and error.network:
        return [
            "✗ Network error",
            "  Could not connect to Notion API. Check your internet connection.",
        ]

    if isinstance(error, NotionCliError) and error.hint:
        return [f"✗ {error.message}", f"  {error.hint}"]
    if isinstance(error, NotionCliError):
        return [f"✗ {operation} failed: {error.message}"]
    return [f"✗ {operation} failed: {error or type(error).__name__}"]


def describe(
    error: BaseException,
    operation: str = "Command",
    context: Dict[str, Any] | None = None,
) -> Diagnostic:
    """Classify *error* and build the diagnostic for *operation*."""
    if isinstance(error, CommandFailed):
        return describe(error.error, error.operation, {**error.context, **(context or {})})

    lines = _classify(error, operation)
    lines.extend(_context_lines(context or {}))
    if os.getenv("NOTION_CLI_DEBUG"):
        lines.extend(["", "  Full error details:", f"    {type(error).__name__}: {error}"])
    return Diagnostic(lines=lines)
