"""Core utilities for notion CLI."""

from .config import (
    CONFIG_DIR,
    CONFIG_PATH,
    DEFAULT_BASE,
    API_MAX_PAGE_SIZE,
    load_config,
    save_config,
    delete_config,
    stored_token,
    require_token,
)
from .errors import (
    NotionCliError,
    NotAuthenticated,
    InvalidInput,
    ServiceRejected,
    TransportFailure,
    CommandFailed,
    command_context,
)
from .http import http_json
from .notion import NotionSession, create_session, create_client, validate_token
from .formatter import OUTPUT_FORMATS, DEFAULT_FORMAT, format_output, get_encoder
from .diagnostics import Diagnostic, describe, redact_context
from .models import extract_title
from .utils import CommandContext, parse_json_option
from .interactive import prompt_token

__all__ = [
    "CONFIG_DIR", "CONFIG_PATH", "DEFAULT_BASE", "API_MAX_PAGE_SIZE",
    "load_config", "save_config", "delete_config", "stored_token", "require_token",
    "NotionCliError", "NotAuthenticated", "InvalidInput", "ServiceRejected",
    "TransportFailure", "CommandFailed", "command_context",
    "http_json",
    "NotionSession", "create_session", "create_client", "validate_token",
    "OUTPUT_FORMATS", "DEFAULT_FORMAT", "format_output", "get_encoder",
    "Diagnostic", "describe", "redact_context",
    "extract_title",
    "CommandContext", "parse_json_option",
    "prompt_token",
]
