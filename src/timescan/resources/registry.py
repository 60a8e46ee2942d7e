"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from timescan.config import BASE_DIR_ENV, DEFAULT_FORMAT_ENV, base_dir, default_format
from timescan.core import SPECIFIERS


def specifier_table() -> list[dict[str, Any]]:
    """Return the specifier table as JSON-serializable rows."""
    return [
        {
            "token": s.token,
            "pattern": s.fragment,
            "kind": s.kind.value,
            "description": s.description,
        }
        for s in SPECIFIERS
    ]


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://timescan/help")
    def help_resource() -> str:
        """Return a short description of the server and its settings."""
        return (
            "Resources:\n"
            "- app://timescan/help\n"
            "- app://timescan/specifiers\n"
            "Tools:\n"
            "- find_timestamp(text, datetime_format)\n"
            "- scan_log(log_path, datetime_format, limit, include_lines)\n"
            f"\nDefault format ({DEFAULT_FORMAT_ENV}): {default_format()}\n"
            f"Base directory ({BASE_DIR_ENV}): {base_dir()}\n"
        )

    @mcp.resource("app://timescan/specifiers")
    def specifiers() -> list[dict[str, Any]]:
        """Return the supported format specifiers."""
        return specifier_table()
