"""Application image tools for Pocket ID MCP.

Images are passed as base64 strings and uploaded as multipart form data.
A payload that is empty or not valid base64 is rejected before any
request is made.
"""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from ..api import pocketid_api
from .utils import tool_call, tool_output

IMAGES_PATH = "/api/application-images"

# An empty payload would upload a zero-byte file
Payload = Annotated[str, Field(min_length=1)]


async def app_image_update_logo(base64_data: Payload, mime_type: Optional[str] = None):
    """Upload a new application logo.

    :param base64_data: Image content, base64-encoded
    :param mime_type: Image MIME type, e.g. ``image/png``
    """
    with tool_call("app_image_update_logo", "PUT", f"{IMAGES_PATH}/logo"):
        result = await pocketid_api.app_images.update_logo(base64_data, mime_type)
    return tool_output(result, "Logo updated")


async def app_image_update_favicon(
    base64_data: Payload, mime_type: Optional[str] = None
):
    """Upload a new favicon."""
    with tool_call("app_image_update_favicon", "PUT", f"{IMAGES_PATH}/favicon"):
        result = await pocketid_api.app_images.update_favicon(base64_data, mime_type)
    return tool_output(result, "Favicon updated")


async def app_image_update_background(
    base64_data: Payload, mime_type: Optional[str] = None
):
    """Upload a new sign-in background image."""
    with tool_call("app_image_update_background", "PUT", f"{IMAGES_PATH}/background"):
        result = await pocketid_api.app_images.update_background(base64_data, mime_type)
    return tool_output(result, "Background image updated")


async def app_image_delete_default_profile_picture():
    """Delete the default profile picture."""
    path = f"{IMAGES_PATH}/default-profile-picture"
    with tool_call("app_image_delete_default_profile_picture", "DELETE", path):
        await pocketid_api.app_images.delete_default_profile_picture()
    return "Default profile picture deleted"


def register_app_image_tools(server: FastMCP) -> None:
    """Register application image tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="app_image_update_logo",
        description="Update the application logo (base64 image)",
    )(app_image_update_logo)
    server.tool(
        name="app_image_update_favicon",
        description="Update the favicon (base64 image)",
    )(app_image_update_favicon)
    server.tool(
        name="app_image_update_background",
        description="Update the background image (base64 image)",
    )(app_image_update_background)
    server.tool(
        name="app_image_delete_default_profile_picture",
        description="Delete the default profile picture",
    )(app_image_delete_default_profile_picture)
