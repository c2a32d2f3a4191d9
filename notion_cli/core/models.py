"""Result shapes produced by the commands.

Notion responses carry far more than the CLI prints.  Each type below keeps
only the fields a command reports; ``from_api`` picks them out of the raw
payload and ignores everything else.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

UNTITLED = "Untitled"
# Checked by name before scanning every property
TITLE_PROPERTY_NAMES = ("title", "Name")


def _first_plain_text(fragments: Any) -> Optional[str]:
    if isinstance(fragments, list) and fragments and isinstance(fragments[0], dict):
        return fragments[0].get("plain_text") or None
    return None


def extract_title(resource: Dict[str, Any]) -> str:
    """Return the display title of a page or database.

    Databases carry a top-level ``title`` array.  Otherwise the well-known
    ``title`` and ``Name`` properties are tried first, then the first
    property of type ``title`` in iteration order.
    """
    title = _first_plain_text(resource.get("title"))
    if title:
        return title

    properties = resource.get("properties") or {}
    for name in TITLE_PROPERTY_NAMES:
        prop = properties.get(name)
        if isinstance(prop, dict):
            title = _first_plain_text(prop.get("title"))
            if title:
                return title

    for prop in properties.values():
        if isinstance(prop, dict) and prop.get("type") == "title":
            title = _first_plain_text(prop.get("title"))
            if title:
                return title
    return UNTITLED


def rich_text(content: str) -> List[Dict[str, Any]]:
    return [{"type": "text", "text": {"content": content}}]


@dataclass
class ResourceSummary:
    """One row of ``page list`` / ``database list``."""

    id: str
    title: str
    url: Optional[str]
    created_time: Optional[str]
    last_edited_time: Optional[str]
    archived: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ResourceSummary":
        return cls(
            id=data.get("id"),
            title=extract_title(data),
            url=data.get("url"),
            created_time=data.get("created_time"),
            last_edited_time=data.get("last_edited_time"),
            archived=bool(data.get("archived")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PageDetail(ResourceSummary):
    properties: Dict[str, Any] = field(default_factory=dict)
    blocks: Optional[List[dict]] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any], blocks: Optional[List[dict]] = None) -> "PageDetail":
        base = ResourceSummary.from_api(data)
        return cls(**asdict(base), properties=data.get("properties") or {}, blocks=blocks)

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        if self.blocks is None:
            del out["blocks"]
        return out


@dataclass
class DatabaseDetail(ResourceSummary):
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "DatabaseDetail":
        base = ResourceSummary.from_api(data)
        return cls(**asdict(base), properties=data.get("properties") or {})


@dataclass
class QueryEntry:
    id: str
    properties: Dict[str, Any]
    url: Optional[str]
    created_time: Optional[str]
    last_edited_time: Optional[str]
    archived: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "QueryEntry":
        return cls(
            id=data.get("id"),
            properties=data.get("properties") or {},
            url=data.get("url"),
            created_time=data.get("created_time"),
            last_edited_time=data.get("last_edited_time"),
            archived=bool(data.get("archived")),
        )


@dataclass
class QueryResult:
    entries: List[QueryEntry]
    has_more: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "QueryResult":
        entries = [QueryEntry.from_api(r) for r in data.get("results") or []]
        return cls(entries=entries, has_more=bool(data.get("has_more")))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [asdict(e) for e in self.entries],
            "total": len(self.entries),
            "has_more": self.has_more,
        }


@dataclass
class CreatedResource:
    id: str
    title: str
    url: Optional[str]

    @classmethod
    def from_api(cls, data: Dict[str, Any], title: str) -> "CreatedResource":
        # Echo the requested title; the response may not carry it back
        return cls(id=data.get("id"), title=title, url=data.get("url"))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class UpdatedResource:
    id: str
    title: str
    archived: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "UpdatedResource":
        return cls(id=data.get("id"), title=extract_title(data), archived=bool(data.get("archived")))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
