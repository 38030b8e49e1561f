"""Route tool calls to ``IntervalsTools`` methods.

Shared by the FastAPI service and the MCP stdio server.
"""

from __future__ import annotations

import structlog

from modules.intervals.manifest import MANIFEST
from modules.intervals.tools import IntervalsTools
from shared.schemas.tools import ToolCall, ToolResult

logger = structlog.get_logger()


async def dispatch(tools: IntervalsTools, call: ToolCall) -> ToolResult:
    """Execute ``call`` and wrap the outcome; tool failures never raise."""
    definition = MANIFEST.get_tool(call.tool_name)
    if definition is None:
        logger.warning("unknown_tool", tool=call.tool_name)
        return ToolResult(
            tool_name=call.tool_name,
            success=False,
            error=f"Unknown tool: {call.tool_name}",
        )

    args = dict(call.arguments or {})
    missing = [
        p.name for p in definition.parameters
        if p.required and args.get(p.name) in (None, "")
    ]
    if missing:
        return ToolResult(
            tool_name=call.tool_name,
            success=False,
            error=f"Missing required argument(s): {', '.join(missing)}",
        )

    # Unknown arguments are ignored rather than rejected.
    accepted = {p.name for p in definition.parameters}
    kwargs = {k: v for k, v in args.items() if k in accepted}

    try:
        result = await getattr(tools, definition.action)(**kwargs)
    except Exception as e:
        logger.error("tool_execution_error", tool=call.tool_name, error=str(e), exc_info=True)
        return ToolResult(tool_name=call.tool_name, success=False, error=str(e))

    return ToolResult(tool_name=call.tool_name, success=True, result=result)
