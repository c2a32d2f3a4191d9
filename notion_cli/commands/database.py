"""Database related commands."""

from __future__ import annotations

from typing import Any, Dict

from ..core import InvalidInput, command_context, create_client, parse_json_option
from ..core.models import (
    CreatedResource,
    DatabaseDetail,
    QueryResult,
    ResourceSummary,
    UpdatedResource,
    rich_text,
)
from .page import _archive_flag

# Every database needs exactly one title property
DEFAULT_SCHEMA: Dict[str, Any] = {"Name": {"title": {}}}


def cmd_database_list(args, ctx):
    with command_context("List databases", limit=args.limit):
        notion = create_client()
        response = notion.search("database", page_size=args.limit)
    databases = [ResourceSummary.from_api(it).to_dict() for it in response.get("results") or []]
    ctx.emit({"databases": databases, "total": len(databases)})
    return 0


def cmd_database_get(args, ctx):
    with command_context("Get database", databaseId=args.database_id):
        notion = create_client()
        data = notion.retrieve_database(args.database_id)
    ctx.emit({"database": DatabaseDetail.from_api(data).to_dict()})
    return 0


def cmd_database_query(args, ctx):
    with command_context(
        "Query database",
        databaseId=args.database_id,
        filter=args.filter,
        sorts=args.sorts,
    ):
        # Validate JSON before touching credentials or the network
        query_filter = parse_json_option(args.filter, "filter")
        sorts = parse_json_option(args.sorts, "sorts")

        notion = create_client()
        response = notion.query_database(
            args.database_id,
            filter=query_filter,
            sorts=sorts,
            page_size=args.limit,
        )
    ctx.emit(QueryResult.from_api(response).to_dict())
    return 0


def cmd_database_create(args, ctx):
    with command_context("Create database", title=args.title, parent=args.parent):
        properties = parse_json_option(args.schema, "schema")
        if properties is None:
            properties = dict(DEFAULT_SCHEMA)
        payload = {
            "parent": {"type": "page_id", "page_id": args.parent},
            "title": rich_text(args.title),
            "properties": properties,
        }
        notion = create_client()
        created = notion.create_database(payload)
    ctx.emit({"status": "success", "database": CreatedResource.from_api(created, args.title).to_dict()})
    return 0


def cmd_database_update(args, ctx):
    with command_context(
        "Update database",
        databaseId=args.database_id,
        title=args.title,
        schema=args.schema,
        archive=args.archive or None,
        unarchive=args.unarchive or None,
    ):
        update: Dict[str, Any] = {}
        if args.title:
            update["title"] = rich_text(args.title)
        properties = parse_json_option(args.schema, "schema")
        if properties is not None:
            update["properties"] = properties
        archived = _archive_flag(args)
        if archived is not None:
            update["archived"] = archived
        if not update:
            raise InvalidInput(
                "No updates specified",
                hint="Use --title, --schema, --archive, or --unarchive",
            )

        notion = create_client()
        updated = notion.update_database(args.database_id, update)
    ctx.emit({"status": "success", "database": UpdatedResource.from_api(updated).to_dict()})
    return 0
