"""Audit log tools for Pocket ID MCP.

Read-only access to the Pocket ID audit trail: the caller's own events,
all events (admin), and the values available for filtering.
"""

from typing import Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from .utils import pagination_params, tool_call, tool_output


async def audit_log_list(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List audit log entries for the current user (paginated)."""
    with tool_call("audit_log_list"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.audit_logs.list_mine(params)
    return tool_output(result)


async def audit_log_list_all(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List all audit log entries (paginated, admin)."""
    with tool_call("audit_log_list_all"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.audit_logs.list_all(params)
    return tool_output(result)


async def audit_log_filter_clients():
    """List client names available as audit log filters."""
    with tool_call("audit_log_filter_clients"):
        result = await pocketid_api.audit_logs.filter_clients()
    return tool_output(result)


async def audit_log_filter_users():
    """List users available as audit log filters."""
    with tool_call("audit_log_filter_users"):
        result = await pocketid_api.audit_logs.filter_users()
    return tool_output(result)


def register_audit_log_tools(server: FastMCP) -> None:
    """Register audit log tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="audit_log_list",
        description="List audit logs for the current user (paginated)",
    )(audit_log_list)
    server.tool(
        name="audit_log_list_all",
        description="List all audit logs (paginated, admin)",
    )(audit_log_list_all)
    server.tool(
        name="audit_log_filter_clients",
        description="List client names for audit log filtering",
    )(audit_log_filter_clients)
    server.tool(
        name="audit_log_filter_users",
        description="List users for audit log filtering",
    )(audit_log_filter_users)
