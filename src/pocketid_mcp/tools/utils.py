"""Shared helpers for Pocket ID tool handlers.

Every tool follows the same shape: validate the arguments, call one
resource method, and turn the outcome into a tool result. Failures of any
kind reach the MCP client as a :class:`fastmcp.exceptions.ToolError`
carrying the original message, which FastMCP reports with
``isError=True``. Mutating tools also write one audit record per call.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from fastmcp.exceptions import ToolError
from pydantic import TypeAdapter, ValidationError

from ..models import Identifier, PaginationRequest
from ..utils.http import ApiResult, PaginationParams, ResponseKind

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("pocketid_mcp.audit")

_identifier = TypeAdapter(Identifier)
_identifier_list = TypeAdapter(List[Identifier])


def require_id(value: str, name: str = "id") -> str:
    """Validate an identifier argument.

    FastMCP enforces the same constraint from the tool schema; this
    covers direct calls.

    :param value: Identifier to check
    :param name: Argument name used in the error message
    :return: The identifier
    :raises ValueError: If the identifier is empty
    """
    try:
        return _identifier.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"{name} must be a non-empty string") from e


def require_ids(values: List[str], name: str = "ids") -> List[str]:
    """Validate a list of identifiers; the list itself may be empty."""
    try:
        return _identifier_list.validate_python(values)
    except ValidationError as e:
        raise ValueError(f"{name} must contain non-empty strings") from e


def audit_log(
    tool: str,
    http_method: str,
    path: str,
    resource_id: Optional[str] = None,
    success: bool = True,
) -> None:
    """Write one audit record for a mutating tool call.

    :param tool: Tool name
    :param http_method: HTTP method sent to Pocket ID
    :param path: Request path
    :param resource_id: Identifier of the affected resource, if any
    :param success: Whether the call succeeded
    """
    audit_logger.info(
        "audit tool=%s method=%s path=%s resource_id=%s success=%s",
        tool,
        http_method,
        path,
        resource_id,
        success,
        extra={
            "audit": {
                "tool": tool,
                "httpMethod": http_method,
                "path": path,
                "resourceId": resource_id,
                "success": success,
            }
        },
    )


@contextmanager
def tool_call(
    tool: str,
    http_method: Optional[str] = None,
    path: Optional[str] = None,
    resource_id: Optional[str] = None,
) -> Iterator[None]:
    """Run a tool body, converting failures into ``ToolError``.

    When ``http_method`` is given the call is audited, on success and on
    failure alike.

    :param tool: Tool name
    :param http_method: HTTP method for the audit record
    :param path: Request path for the audit record
    :param resource_id: Affected resource for the audit record
    :raises ToolError: If the body raises
    """
    try:
        yield
    except Exception as e:
        if http_method:
            audit_log(tool, http_method, path or "", resource_id, success=False)
        logger.debug("Tool %s failed: %s", tool, e)
        if isinstance(e, ToolError):
            raise
        raise ToolError(str(e)) from e
    if http_method:
        audit_log(tool, http_method, path or "", resource_id, success=True)


def tool_output(result: ApiResult, empty_message: str = "OK") -> Any:
    """Render a result for the MCP client.

    JSON results are returned as the parsed value, text results as the
    raw string, and empty results as ``empty_message``.

    :param result: Result of a Pocket ID call
    :param empty_message: Text returned for empty results
    """
    if result.kind is ResponseKind.EMPTY:
        return empty_message
    return result.data


def pagination_params(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
) -> PaginationParams:
    """Validate list tool arguments and build pagination parameters."""
    request = PaginationRequest(
        page=page,
        limit=limit,
        search=search,
        sort_column=sort_column,
        sort_direction=sort_direction,
    )
    return PaginationParams(
        page=request.page,
        limit=request.limit,
        search=request.search,
        sort_column=request.sort_column,
        sort_direction=request.sort_direction,
    )
