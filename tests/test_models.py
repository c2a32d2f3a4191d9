import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from notion_cli.core.models import (
    DatabaseDetail,
    PageDetail,
    QueryResult,
    ResourceSummary,
    extract_title,
)


def _title(text):
    return {"type": "title", "title": [{"plain_text": text}]}


def test_title_from_title_property():
    assert extract_title({"properties": {"title": {"title": [{"plain_text": "Foo"}]}}}) == "Foo"


def test_title_from_name_property():
    assert extract_title({"properties": {"Name": {"title": [{"plain_text": "Bar"}]}}}) == "Bar"


def test_title_defaults_to_untitled():
    assert extract_title({"properties": {"Status": {"type": "select", "select": None}}}) == "Untitled"
    assert extract_title({}) == "Untitled"


def test_named_lookup_beats_scan():
    page = {"properties": {"Task": _title("Scanned"), "Name": _title("Named")}}
    assert extract_title(page) == "Named"


def test_first_title_property_in_iteration_order_wins():
    page = {"properties": {"Alpha": _title("First"), "Beta": _title("Second")}}
    assert extract_title(page) == "First"


def test_empty_title_property_is_skipped():
    page = {"properties": {"Alpha": {"type": "title", "title": []}, "Beta": _title("Second")}}
    assert extract_title(page) == "Second"


def test_database_title_array():
    assert extract_title({"title": [{"plain_text": "Tasks"}], "properties": {}}) == "Tasks"


def test_summary_drops_unused_fields():
    raw = {
        "object": "page",
        "id": "p1",
        "url": "https://notion.so/p1",
        "created_time": "2024-01-01T00:00:00.000Z",
        "last_edited_time": "2024-01-02T00:00:00.000Z",
        "archived": False,
        "icon": {"emoji": "x"},
        "properties": {"title": _title("Hello")},
    }
    assert ResourceSummary.from_api(raw).to_dict() == {
        "id": "p1",
        "title": "Hello",
        "url": "https://notion.so/p1",
        "created_time": "2024-01-01T00:00:00.000Z",
        "last_edited_time": "2024-01-02T00:00:00.000Z",
        "archived": False,
    }


def test_page_detail_blocks_only_when_requested():
    raw = {"id": "p1", "properties": {"title": _title("Hello")}}
    assert "blocks" not in PageDetail.from_api(raw).to_dict()
    with_blocks = PageDetail.from_api(raw, blocks=[{"id": "b1"}]).to_dict()
    assert with_blocks["blocks"] == [{"id": "b1"}]
    assert with_blocks["properties"] == raw["properties"]


def test_database_detail_keeps_schema():
    raw = {"id": "d1", "title": [{"plain_text": "Tasks"}], "properties": {"Name": {"type": "title"}}}
    out = DatabaseDetail.from_api(raw).to_dict()
    assert out["title"] == "Tasks"
    assert out["properties"] == {"Name": {"type": "title"}}


def test_query_result_shape():
    raw = {"results": [{"id": "e1", "properties": {}}, {"id": "e2"}], "has_more": True, "next_cursor": "c"}
    out = QueryResult.from_api(raw).to_dict()
    assert out["total"] == 2
    assert out["has_more"] is True
    assert [e["id"] for e in out["entries"]] == ["e1", "e2"]
    assert "next_cursor" not in out
