"""Page related commands."""

from __future__ import annotations

from typing import Any, Dict

from ..core import InvalidInput, command_context, create_client
from ..core.models import (
    CreatedResource,
    PageDetail,
    ResourceSummary,
    UpdatedResource,
    rich_text,
)


def _title_property(title: str) -> Dict[str, Any]:
    return {"title": {"title": rich_text(title)}}


def _archive_flag(args):
    if args.archive:
        return True
    if args.unarchive:
        return False
    return None


def cmd_page_list(args, ctx):
    with command_context("List pages", limit=args.limit):
        notion = create_client()
        response = notion.search("page", page_size=args.limit)
    pages = [ResourceSummary.from_api(it).to_dict() for it in response.get("results") or []]
    ctx.emit({"pages": pages, "total": len(pages)})
    return 0


def cmd_page_get(args, ctx):
    with command_context("Get page", pageId=args.page_id):
        notion = create_client()
        data = notion.retrieve_page(args.page_id)
        blocks = notion.list_all_block_children(args.page_id) if args.content else None
    ctx.emit({"page": PageDetail.from_api(data, blocks=blocks).to_dict()})
    return 0


def cmd_page_create(args, ctx):
    with command_context("Create page", title=args.title, parent=args.parent):
        if not args.parent:
            raise InvalidInput(
                "Parent page or database ID is required",
                hint="Use --parent <id> to specify where to create the page",
            )
        payload: Dict[str, Any] = {
            "parent": {"type": "page_id", "page_id": args.parent},
            "properties": _title_property(args.title),
        }
        if args.content:
            payload["children"] = [
                {
                    "object": "block",
                    "type": "paragraph",
                    "paragraph": {"rich_text": rich_text(args.content)},
                }
            ]
        notion = create_client()
        created = notion.create_page(payload)
    ctx.emit({"status": "success", "page": CreatedResource.from_api(created, args.title).to_dict()})
    return 0


def cmd_page_update(args, ctx):
    with command_context(
        "Update page",
        pageId=args.page_id,
        title=args.title,
        archive=args.archive or None,
        unarchive=args.unarchive or None,
    ):
        update: Dict[str, Any] = {}
        if args.title:
            update["properties"] = _title_property(args.title)
        archived = _archive_flag(args)
        if archived is not None:
            update["archived"] = archived
        if not update:
            raise InvalidInput("No updates specified", hint="Use --title, --archive, or --unarchive")

        notion = create_client()
        updated = notion.update_page(args.page_id, update)
    ctx.emit({"status": "success", "page": UpdatedResource.from_api(updated).to_dict()})
    return 0
