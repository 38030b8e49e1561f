"""Inter-service authentication for module endpoints.

The agent runtime sends ``Authorization: Bearer <SERVICE_AUTH_TOKEN>`` when it
fetches a manifest or executes a tool.  Usage::

    from shared.auth import require_service_auth

    @app.post("/execute")
    async def execute(call: ToolCall, _=Depends(require_service_auth)):
        ...
"""

from __future__ import annotations

import secrets

import structlog
from fastapi import HTTPException, Request

from shared.config import get_settings

logger = structlog.get_logger()


async def require_service_auth(request: Request) -> None:
    """FastAPI dependency that validates the inter-service auth token.

    Raises 401 if the token is missing or incorrect.
    Skips validation when ``service_auth_token`` is empty (dev mode).
    """
    expected = get_settings().service_auth_token
    if not expected:
        logger.warning(
            "service_auth_disabled",
            path=request.url.path,
            hint="Set SERVICE_AUTH_TOKEN in .env for production",
        )
        return

    auth_header = request.headers.get("authorization", "")
    if not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing service auth token")

    if not secrets.compare_digest(auth_header[7:], expected):
        logger.warning(
            "service_auth_failed",
            path=request.url.path,
            remote=request.client.host if request.client else "unknown",
        )
        raise HTTPException(status_code=401, detail="Invalid service auth token")
