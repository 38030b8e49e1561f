"""Intervals.icu module FastAPI service."""

from __future__ import annotations

import structlog
from fastapi import Depends, FastAPI

from modules.intervals.client import IntervalsClient
from modules.intervals.dispatch import dispatch
from modules.intervals.manifest import MANIFEST
from modules.intervals.tools import IntervalsTools
from shared.auth import require_service_auth
from shared.config import ConfigurationError, get_settings
from shared.log import configure_logging
from shared.schemas.common import HealthResponse
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

configure_logging(get_settings().log_level)

logger = structlog.get_logger()
app = FastAPI(title="Intervals.icu Module", version="1.0.0")

tools: IntervalsTools | None = None


@app.on_event("startup")
async def startup():
    global tools
    settings = get_settings()

    # Missing credentials abort startup; no tool is served without them.
    try:
        settings.require_intervals_credentials()
    except ConfigurationError as e:
        logger.error("intervals_config_missing", missing=e.missing, error=str(e))
        raise

    tools = IntervalsTools(IntervalsClient.from_settings(settings))
    logger.info(
        "intervals_module_ready",
        base_url=settings.intervals_base_url,
        tool_count=len(MANIFEST.tools),
    )


@app.get("/manifest", response_model=ModuleManifest)
async def manifest(_=Depends(require_service_auth)):
    """Return the module manifest."""
    return MANIFEST


@app.post("/execute", response_model=ToolResult)
async def execute(call: ToolCall, _=Depends(require_service_auth)):
    """Execute a tool call."""
    if tools is None:
        return ToolResult(tool_name=call.tool_name, success=False, error="Module not ready")
    return await dispatch(tools, call)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", module=MANIFEST.module_name)
