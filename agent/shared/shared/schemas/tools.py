"""Tool and module manifest schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    name: str
    type: str  # string, integer, boolean, number, array, object
    description: str
    required: bool = True
    enum: list[str] | None = None
    items: str | None = None  # element type when type == "array"


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a module."""

    name: str  # e.g. "intervals.get_activities"
    description: str
    parameters: list[ToolParameter]
    required_permission: str = "guest"  # minimum permission level

    @property
    def action(self) -> str:
        """Tool name without the module prefix."""
        return self.name.split(".")[-1]

    def input_schema(self) -> dict[str, Any]:
        """Render the parameters as a JSON Schema object."""
        properties: dict[str, Any] = {}
        for param in self.parameters:
            prop: dict[str, Any] = {"type": param.type, "description": param.description}
            if param.enum:
                prop["enum"] = param.enum
            if param.type == "array":
                prop["items"] = {"type": param.items or "string"}
            properties[param.name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [p.name for p in self.parameters if p.required],
        }


class ModuleManifest(BaseModel):
    """Manifest describing a module and its tools."""

    module_name: str
    description: str
    tools: list[ToolDefinition]

    def get_tool(self, name: str) -> ToolDefinition | None:
        """Look up a tool by its full or unprefixed name."""
        action = name.split(".")[-1]
        for tool in self.tools:
            if tool.action == action:
                return tool
        return None


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict = {}


class ToolResult(BaseModel):
    """Result from a tool execution."""

    tool_name: str
    success: bool
    result: Any = None
    error: str | None = None
