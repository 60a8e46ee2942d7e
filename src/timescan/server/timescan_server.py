"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: find a timestamp in a string, scan a log file for timestamps
- Resources: help text and the specifier table

Run locally (stdio):
    python -m timescan
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from timescan.config import log_level
from timescan.resources.registry import register_resources
from timescan.tools.scan import find_timestamp_impl, scan_log_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("timescan", json_response=True)

register_resources(mcp)


@mcp.tool()
def find_timestamp(text: str, datetime_format: str | None = None) -> dict[str, Any]:
    """Find the first timestamp in a piece of text.

    Parameters
    ----------
    text:
        Any text, typically a single log line.
    datetime_format:
        strftime-like template, e.g. "%d/%b/%Y:%H:%M:%S%.f" (the default) or "%s".

    Returns
    -------
    dict:
        {"found": bool, "timestamp": int | None, "match": str | None, "span": [start, end] | None}
    """
    return find_timestamp_impl(text=text, datetime_format=datetime_format)


@mcp.tool()
async def scan_log(
    log_path: str,
    datetime_format: str | None = None,
    limit: int | None = None,
    include_lines: bool = False,
) -> dict[str, Any]:
    """Scan a log file and return the timestamp of every matching line, in order.

    Parameters
    ----------
    log_path:
        Path to a local log file (plain text or .gz), relative to TIMESCAN_BASE_DIR.
    datetime_format:
        strftime-like template; defaults to TIMESCAN_DEFAULT_FORMAT or the built-in format.
    limit:
        Maximum number of timestamps returned (hard-capped in the implementation).
    include_lines:
        Also return line numbers and matched text for every hit.

    Returns
    -------
    dict:
        {"count": int, "timestamps": list[int], "first": int, "last": int, "truncated": bool}
    """
    return await scan_log_impl(
        log_path=log_path,
        datetime_format=datetime_format,
        limit=limit,
        include_lines=include_lines,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
