"""Command handlers for notion CLI."""

from .auth import cmd_auth_login, cmd_auth_logout, cmd_auth_status
from .page import cmd_page_list, cmd_page_get, cmd_page_create, cmd_page_update
from .database import (
    cmd_database_list,
    cmd_database_get,
    cmd_database_query,
    cmd_database_create,
    cmd_database_update,
)

__all__ = [
    "cmd_auth_login",
    "cmd_auth_logout",
    "cmd_auth_status",
    "cmd_page_list",
    "cmd_page_get",
    "cmd_page_create",
    "cmd_page_update",
    "cmd_database_list",
    "cmd_database_get",
    "cmd_database_query",
    "cmd_database_create",
    "cmd_database_update",
]
