"""Tests for the MCP stdio server handlers."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from modules.intervals import mcp_server
from modules.intervals.client import IntervalsAPIError, IntervalsClient
from modules.intervals.manifest import MANIFEST
from modules.intervals.tests.fixtures import RIDE_CURVES_RESPONSE_SMALL
from modules.intervals.tools import IntervalsTools


@pytest.fixture
def tools(monkeypatch):
    instance = IntervalsTools(IntervalsClient(api_key="k", athlete_id="i12345"))
    monkeypatch.setattr(mcp_server, "tools", instance)
    return instance


@pytest.mark.asyncio
async def test_list_tools_uses_unprefixed_names():
    listed = await mcp_server.list_tools()

    assert len(listed) == len(MANIFEST.tools)
    names = {t.name for t in listed}
    assert "get_activities_with_details" in names
    assert all("." not in n for n in names)


@pytest.mark.asyncio
async def test_list_tools_input_schema():
    listed = {t.name: t for t in await mcp_server.list_tools()}

    schema = listed["get_activity_streams"].inputSchema
    assert schema["type"] == "object"
    assert schema["required"] == ["activity_id"]
    assert schema["properties"]["types"]["items"] == {"type": "string"}

    recent = listed["get_recent_activities_with_details"].inputSchema
    assert recent["required"] == []
    assert set(recent["properties"]) == {"n", "type", "lookback_days", "newest"}


@pytest.mark.asyncio
async def test_call_tool_returns_json_text(tools):
    with patch.object(tools.client, "get_power_curves", return_value=RIDE_CURVES_RESPONSE_SMALL):
        content = await mcp_server.call_tool(
            "get_activities_with_details",
            {"oldest": "2024-02-09", "newest": "2024-03-10", "limit": 1},
        )

    assert len(content) == 1
    assert content[0].type == "text"
    payload = json.loads(content[0].text)
    assert [a["id"] for a in payload["activities"]] == ["i2003"]
    # pretty-printed with two-space indentation
    assert '\n  "activities"' in content[0].text


@pytest.mark.asyncio
async def test_call_tool_error_raises(tools):
    with patch.object(tools.client, "get_activity", side_effect=IntervalsAPIError(404, "Not Found")):
        with pytest.raises(mcp_server.ToolExecutionError) as exc_info:
            await mcp_server.call_tool("get_activity_detail", {"activity_id": "i1"})

    assert str(exc_info.value) == "Error: Intervals.icu API error: 404 - Not Found"


@pytest.mark.asyncio
async def test_call_tool_unknown_name(tools):
    with pytest.raises(mcp_server.ToolExecutionError, match="Unknown tool: nope"):
        await mcp_server.call_tool("nope", None)


@pytest.mark.asyncio
async def test_call_tool_before_run(monkeypatch):
    monkeypatch.setattr(mcp_server, "tools", None)
    with pytest.raises(mcp_server.ToolExecutionError, match="not initialised"):
        await mcp_server.call_tool("get_gear", {})
