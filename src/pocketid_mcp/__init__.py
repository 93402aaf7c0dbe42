"""Pocket ID MCP Server package.

This package provides a Model Context Protocol (MCP) server that exposes
the Pocket ID administrative REST API as callable tools. All tool calls
share a single HTTP access layer that handles availability checks,
request construction, timeouts and error normalization.

:var __version__: Current package version
:type __version__: str
"""

__version__ = "0.1.0"
