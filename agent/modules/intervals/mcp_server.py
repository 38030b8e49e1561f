"""Intervals.icu MCP stdio server.

Exposes the same tools as the FastAPI service to MCP clients, under their
unprefixed names (``get_activities`` rather than ``intervals.get_activities``).
"""

from __future__ import annotations

import json

import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from modules.intervals.dispatch import dispatch
from modules.intervals.manifest import MANIFEST
from modules.intervals.tools import IntervalsTools
from shared.schemas.tools import ToolCall

logger = structlog.get_logger()

SERVER_NAME = "intervals-icu-mcp"

server = Server(SERVER_NAME)

tools: IntervalsTools | None = None


class ToolExecutionError(RuntimeError):
    """Raised from ``call_tool`` so the MCP server flags the result as an error."""


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(name=t.action, description=t.description, inputSchema=t.input_schema())
        for t in MANIFEST.tools
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:
    if tools is None:
        raise ToolExecutionError("Error: server not initialised")

    result = await dispatch(tools, ToolCall(tool_name=name, arguments=arguments or {}))
    if not result.success:
        raise ToolExecutionError(f"Error: {result.error}")

    return [
        TextContent(
            type="text",
            text=json.dumps(result.result, indent=2, ensure_ascii=False, default=str),
        )
    ]


async def run(intervals_tools: IntervalsTools) -> None:
    """Serve MCP over stdio until the client disconnects."""
    global tools
    tools = intervals_tools
    logger.info("intervals_mcp_started", tool_count=len(MANIFEST.tools))
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
