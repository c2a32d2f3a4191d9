"""Interactive prompts using InquirerPy."""

from __future__ import annotations

import sys

from InquirerPy import inquirer

from .errors import InvalidInput

TOKEN_URL = "https://www.notion.so/my-integrations"


def _execute(prompt):
    """Execute a prompt and turn ``Ctrl-C`` into an input error."""
    try:
        return prompt.execute()
    except KeyboardInterrupt:
        raise InvalidInput("Cancelled by user") from None


def prompt_token() -> str:
    """Ask for an integration token without echoing it."""
    print("Enter your Notion integration token:", file=sys.stderr)
    print(f"(Get it from {TOKEN_URL})", file=sys.stderr)
    value = _execute(inquirer.secret(message="Token:"))
    token = (value or "").strip()
    if not token:
        raise InvalidInput("Token is required")
    return token
