"""Authentication related commands."""

from __future__ import annotations

import sys

from ..core import (
    InvalidInput,
    command_context,
    delete_config,
    prompt_token,
    save_config,
    stored_token,
    validate_token,
)
from ..core.interactive import TOKEN_URL


def cmd_auth_login(args, ctx):
    with command_context("Authentication", operation="login"):
        token = (args.token or "").strip() or prompt_token()

        print("Validating token...", file=sys.stderr)
        if not validate_token(token):
            raise InvalidInput(
                "Invalid token",
                hint=f"Make sure you copied the correct integration token from {TOKEN_URL}",
            )

        save_config({"notionToken": token})
    ctx.emit({"status": "success", "message": "Successfully authenticated"})
    return 0


def cmd_auth_logout(_args, ctx):
    if not stored_token():
        ctx.emit({"status": "info", "message": "Not authenticated"})
        return 0
    with command_context("Logout", operation="logout"):
        delete_config()
    ctx.emit({"status": "success", "message": "Successfully logged out"})
    return 0


def cmd_auth_status(_args, ctx):
    token = stored_token()
    if not token:
        ctx.emit({
            "authenticated": False,
            "message": 'Not authenticated. Run "notion auth login" to authenticate.',
        })
        return 0

    with command_context("Status check", operation="status"):
        valid = validate_token(token)
    if valid:
        ctx.emit({"authenticated": True, "message": "Authenticated"})
    else:
        ctx.emit({
            "authenticated": False,
            "message": 'Token is invalid or expired. Run "notion auth login" to re-authenticate.',
        })
    return 0
