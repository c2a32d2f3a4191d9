"""Command line entry point for notion CLI."""

from __future__ import annotations

import argparse
import sys

from notion_cli import __version__
from notion_cli.core import (
    DEFAULT_FORMAT,
    OUTPUT_FORMATS,
    API_MAX_PAGE_SIZE,
    CommandContext,
    CommandFailed,
    NotionCliError,
    describe,
    get_encoder,
)
from notion_cli.commands import (
    cmd_auth_login,
    cmd_auth_logout,
    cmd_auth_status,
    cmd_page_list,
    cmd_page_get,
    cmd_page_create,
    cmd_page_update,
    cmd_database_list,
    cmd_database_get,
    cmd_database_query,
    cmd_database_create,
    cmd_database_update,
)


def _add_archive_flags(parser, noun):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-a", "--archive", action="store_true", help=f"Archive the {noun}")
    group.add_argument("-u", "--unarchive", action="store_true", help=f"Unarchive the {noun}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="notion", description="Notion CLI - Manage Notion from the command line"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-f",
        "--format",
        default=DEFAULT_FORMAT,
        metavar="{" + ",".join(OUTPUT_FORMATS) + "}",
        help="Output format: toon (token-efficient for LLMs), json (for scripting), "
        f"plain (human-readable). Default: {DEFAULT_FORMAT}",
    )
    sub = parser.add_subparsers(dest="cmd")

    # auth
    p_auth = sub.add_parser("auth", help="Manage Notion authentication")
    sub_auth = p_auth.add_subparsers(dest="auth_cmd")

    p_auth_login = sub_auth.add_parser("login", help="Authenticate with Notion integration token")
    p_auth_login.add_argument("token", nargs="?", help="Notion integration token (prompted if omitted)")
    p_auth_login.set_defaults(func=cmd_auth_login)

    p_auth_logout = sub_auth.add_parser("logout", help="Remove authentication credentials")
    p_auth_logout.set_defaults(func=cmd_auth_logout)

    p_auth_status = sub_auth.add_parser("status", help="Check authentication status")
    p_auth_status.set_defaults(func=cmd_auth_status)

    # page
    p_page = sub.add_parser("page", help="Manage Notion pages")
    sub_page = p_page.add_subparsers(dest="page_cmd")

    p_page_list = sub_page.add_parser("list", help="List all accessible pages")
    p_page_list.add_argument("-l", "--limit", type=int, default=API_MAX_PAGE_SIZE,
                             help=f"Maximum number of pages to return (max {API_MAX_PAGE_SIZE})")
    p_page_list.set_defaults(func=cmd_page_list)

    p_page_get = sub_page.add_parser("get", help="Get page details")
    p_page_get.add_argument("page_id", metavar="page-id", help="Page ID")
    p_page_get.add_argument("-c", "--content", action="store_true", help="Include page content (blocks)")
    p_page_get.set_defaults(func=cmd_page_get)

    p_page_create = sub_page.add_parser("create", help="Create a new page")
    p_page_create.add_argument("-t", "--title", required=True, help="Page title")
    p_page_create.add_argument("-p", "--parent", required=True, help="Parent page ID")
    p_page_create.add_argument("-c", "--content", help="Initial page content")
    p_page_create.set_defaults(func=cmd_page_create)

    p_page_update = sub_page.add_parser("update", help="Update page properties")
    p_page_update.add_argument("page_id", metavar="page-id", help="Page ID")
    p_page_update.add_argument("-t", "--title", help="New page title")
    _add_archive_flags(p_page_update, "page")
    p_page_update.set_defaults(func=cmd_page_update)

    # database
    p_db = sub.add_parser("database", help="Manage Notion databases")
    sub_db = p_db.add_subparsers(dest="database_cmd")

    p_db_list = sub_db.add_parser("list", help="List all accessible databases")
    p_db_list.add_argument("-l", "--limit", type=int, default=API_MAX_PAGE_SIZE,
                           help=f"Maximum number of databases to return (max {API_MAX_PAGE_SIZE})")
    p_db_list.set_defaults(func=cmd_database_list)

    p_db_get = sub_db.add_parser("get", help="Get database schema and properties")
    p_db_get.add_argument("database_id", metavar="database-id", help="Database ID")
    p_db_get.set_defaults(func=cmd_database_get)

    p_db_query = sub_db.add_parser("query", help="Query database entries")
    p_db_query.add_argument("database_id", metavar="database-id", help="Database ID")
    p_db_query.add_argument("-f", "--filter", help="Filter as JSON string")
    p_db_query.add_argument("-s", "--sorts", help="Sorts as JSON string")
    p_db_query.add_argument("-l", "--limit", type=int, default=API_MAX_PAGE_SIZE,
                            help=f"Maximum number of entries to return (max {API_MAX_PAGE_SIZE})")
    p_db_query.set_defaults(func=cmd_database_query)

    p_db_create = sub_db.add_parser("create", help="Create a new database")
    p_db_create.add_argument("-t", "--title", required=True, help="Database title")
    p_db_create.add_argument("-p", "--parent", required=True, help="Parent page ID")
    p_db_create.add_argument("-s", "--schema", help="Database schema as JSON")
    p_db_create.set_defaults(func=cmd_database_create)

    p_db_update = sub_db.add_parser("update", help="Update database properties")
    p_db_update.add_argument("database_id", metavar="database-id", help="Database ID")
    p_db_update.add_argument("-t", "--title", help="New database title")
    p_db_update.add_argument("-s", "--schema", help="Updated schema as JSON")
    _add_archive_flags(p_db_update, "database")
    p_db_update.set_defaults(func=cmd_database_update)

    groups = {"auth": (p_auth, "auth_cmd"), "page": (p_page, "page_cmd"), "database": (p_db, "database_cmd")}
    return parser, groups


def _report(error: BaseException) -> int:
    diag = describe(error)
    print(diag.render(), file=sys.stderr)
    return diag.exit_code


def main(argv=None):
    parser, groups = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0
    group_parser, dest = groups[args.cmd]
    if not getattr(args, dest, None):
        group_parser.print_help()
        return 0

    try:
        get_encoder(args.format)
    except NotionCliError as e:
        return _report(e)

    ctx = CommandContext(output_format=args.format)
    try:
        return args.func(args, ctx)
    except (CommandFailed, NotionCliError) as e:
        return _report(e)


if __name__ == "__main__":
    sys.exit(main())
