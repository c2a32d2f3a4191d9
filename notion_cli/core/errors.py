"""Error types raised by notion CLI.

Nothing below ``__main__`` terminates the process.  Handlers raise one of
these exceptions and the entry point turns it into a diagnostic (see
:mod:`notion_cli.core.diagnostics`) and an exit status.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional


class NotionCliError(Exception):
    """Base class for errors the CLI knows how to explain."""

    hint: Optional[str] = None

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if hint is not None:
            self.hint = hint


class NotAuthenticated(NotionCliError):
    hint = 'Run "notion auth login" first.'

    def __init__(self, message: str = "Not authenticated.", hint: Optional[str] = None):
        super().__init__(message, hint)


class InvalidInput(NotionCliError):
    """Bad command-line input; raised before any network call."""


class ServiceRejected(NotionCliError):
    """The API answered with a structured error body."""

    def __init__(self, code: Optional[str], message: str, status: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.status = status


class TransportFailure(NotionCliError):
    """HTTP or connection failure without a structured error body.

    ``network`` is set for DNS lookup failures and refused connections.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        network: bool = False,
    ):
        super().__init__(message)
        self.status = status
        self.network = network


class CommandFailed(Exception):
    """A command handler failed while performing *operation*."""

    def __init__(self, operation: str, error: BaseException, context: Dict[str, Any] | None = None):
        super().__init__(f"{operation} failed: {error}")
        self.operation = operation
        self.error = error
        self.context = dict(context or {})


@contextmanager
def command_context(operation: str, /, **context: Any) -> Iterator[None]:
    """Attach *operation* and diagnostic *context* to any error raised inside."""
    try:
        yield
    except CommandFailed:
        raise
    except Exception as exc:
        raise CommandFailed(operation, exc, context) from exc
