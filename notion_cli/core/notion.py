"""Thin wrapper around the Notion REST endpoints used by the CLI."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tqdm import tqdm

from .config import API_MAX_PAGE_SIZE, get_base_url, require_token
from .http import http_json


def clamp_page_size(limit: int) -> int:
    return max(1, min(limit, API_MAX_PAGE_SIZE))


class NotionSession:
    """API calls bound to a single integration token.

    Each method maps to exactly one endpoint and returns the JSON object
    Notion sent back.
    """

    def __init__(self, token: str, base_url: str | None = None):
        self.token = token
        self.base_url = (base_url or get_base_url()).rstrip("/")

    def _call(self, method: str, path: str, payload: Dict[str, Any] | None = None) -> Dict[str, Any]:
        return http_json(method, f"{self.base_url}/{path.lstrip('/')}", self.token, payload)

    def users_me(self) -> Dict[str, Any]:
        return self._call("GET", "/users/me")

    def search(
        self,
        object_kind: str,
        page_size: int = API_MAX_PAGE_SIZE,
        start_cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "filter": {"property": "object", "value": object_kind},
            "page_size": clamp_page_size(page_size),
        }
        if start_cursor:
            payload["start_cursor"] = start_cursor
        return self._call("POST", "/search", payload)

    def retrieve_page(self, page_id: str) -> Dict[str, Any]:
        return self._call("GET", f"/pages/{page_id}")

    def create_page(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("POST", "/pages", payload)

    def update_page(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("PATCH", f"/pages/{page_id}", payload)

    def retrieve_database(self, database_id: str) -> Dict[str, Any]:
        return self._call("GET", f"/databases/{database_id}")

    def query_database(
        self,
        database_id: str,
        *,
        filter: Any = None,
        sorts: Any = None,
        page_size: int = API_MAX_PAGE_SIZE,
        start_cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"page_size": clamp_page_size(page_size)}
        if filter is not None:
            payload["filter"] = filter
        if sorts is not None:
            payload["sorts"] = sorts
        if start_cursor:
            payload["start_cursor"] = start_cursor
        return self._call("POST", f"/databases/{database_id}/query", payload)

    def create_database(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("POST", "/databases", payload)

    def update_database(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("PATCH", f"/databases/{database_id}", payload)

    def list_block_children(
        self,
        block_id: str,
        page_size: int = API_MAX_PAGE_SIZE,
        start_cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        path = f"/blocks/{block_id}/children?page_size={clamp_page_size(page_size)}"
        if start_cursor:
            path += f"&start_cursor={start_cursor}"
        return self._call("GET", path)

    def list_all_block_children(self, block_id: str) -> List[dict]:
        """Follow ``next_cursor`` until every child block of *block_id* is fetched."""
        blocks: List[dict] = []
        cursor = None
        # tqdm hides itself when stderr is not a terminal (disable=None)
        with tqdm(total=None, unit="pg", desc="Blocks", disable=None) as bar:
            while True:
                data = self.list_block_children(block_id, start_cursor=cursor)
                blocks.extend(data.get("results") or [])
                bar.update(1)
                cursor = data.get("next_cursor")
                if not data.get("has_more") or not cursor:
                    break
        return blocks


def create_session(token: str) -> NotionSession:
    """Return a session for *token*; the token is not checked here."""
    return NotionSession(token)


def create_client() -> NotionSession:
    """Return a session for the stored token or raise ``NotAuthenticated``."""
    return create_session(require_token())


def validate_token(token: str) -> bool:
    """Return ``True`` if Notion accepts *token*.

    Any failure counts as invalid, so a network outage looks the same as a
    revoked token here.
    """
    try:
        create_session(token).users_me()
    except Exception:
        return False
    return True
