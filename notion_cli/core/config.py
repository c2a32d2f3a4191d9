"""Configuration helpers for notion CLI."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import NotAuthenticated

CONFIG_DIR = Path(os.path.expanduser("~")) / ".notion-cli"
CONFIG_PATH = CONFIG_DIR / "config.json"
# Default API endpoint used when NOTION_BASE_URL is not set
DEFAULT_BASE = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
# API limit for the ``page_size`` parameter
API_MAX_PAGE_SIZE = 100


def load_config() -> Optional[Dict[str, Any]]:
    """Load the credential record, or ``None`` if it is missing or unreadable."""
    try:
        cfg = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(cfg, dict):
        return None
    return cfg


def save_config(record: Dict[str, Any]) -> None:
    """Persist *record* to CONFIG_PATH, replacing any previous one."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_PATH.with_name(CONFIG_PATH.name + ".tmp")
    tmp.write_text(json.dumps(record, ensure_ascii=False, indent=2), encoding="utf-8")
    os.chmod(tmp, 0o600)
    os.replace(tmp, CONFIG_PATH)


def delete_config() -> None:
    if CONFIG_PATH.exists():
        CONFIG_PATH.unlink()


def stored_token() -> Optional[str]:
    cfg = load_config()
    return (cfg or {}).get("notionToken") or None


def require_token() -> str:
    """Return the Notion token or raise :class:`NotAuthenticated`.

    ``NOTION_TOKEN`` in the environment takes precedence over the stored
    record so the CLI can run in CI without a config file.
    """
    token = os.getenv("NOTION_TOKEN") or stored_token()
    if not token:
        raise NotAuthenticated()
    return token


def get_base_url() -> str:
    return (os.getenv("NOTION_BASE_URL") or DEFAULT_BASE).rstrip("/")
