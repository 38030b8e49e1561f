"""Command-line entry point for the Intervals.icu agent module."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from shared.config import ConfigurationError, Settings, get_settings


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


def _load_settings() -> Settings:
    """Return settings, exiting with status 1 if credentials are missing."""
    settings = get_settings()
    try:
        settings.require_intervals_credentials()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return settings


def _build_tools(settings: Settings):
    from modules.intervals.client import IntervalsClient
    from modules.intervals.tools import IntervalsTools

    return IntervalsTools(IntervalsClient.from_settings(settings))


def _parse_arg(raw: str) -> tuple[str, object]:
    """Parse ``key=value``; values that are valid JSON are decoded."""
    if "=" not in raw:
        raise click.BadParameter(f"expected key=value, got '{raw}'", param_hint="--arg")
    key, value = raw.split("=", 1)
    try:
        return key.strip(), json.loads(value)
    except json.JSONDecodeError:
        return key.strip(), value


@click.group()
def cli():
    """Intervals.icu tools for AI agents."""
    pass


# --- Servers ---


@cli.command()
@click.option("--host", default="0.0.0.0", help="Bind address")
@click.option("--port", default=8000, type=int, help="Bind port")
def serve(host, port):
    """Run the module HTTP service (/manifest, /execute, /health)."""
    import uvicorn

    _load_settings()
    uvicorn.run("modules.intervals.main:app", host=host, port=port)


@cli.command()
def mcp():
    """Run the MCP server over stdio."""
    from modules.intervals import mcp_server
    from shared.log import configure_logging

    settings = _load_settings()
    # stdout carries MCP frames
    configure_logging(settings.log_level, stderr=True)
    run_async(mcp_server.run(_build_tools(settings)))


# --- Tools ---


@cli.group()
def tools():
    """Inspect and call tools directly."""
    pass


@tools.command("list")
def list_tools():
    """Show every tool with its parameters."""
    from modules.intervals.manifest import MANIFEST

    for tool in MANIFEST.tools:
        params = ", ".join(
            p.name if p.required else f"[{p.name}]" for p in tool.parameters
        )
        click.echo(f"{tool.action}({params})")


@tools.command("call")
@click.argument("tool_name")
@click.option("--arg", "args", multiple=True, help="Tool argument as key=value (repeatable)")
def call_tool(tool_name, args):
    """Call one tool and print its JSON result."""
    from modules.intervals.dispatch import dispatch
    from shared.log import configure_logging
    from shared.schemas.tools import ToolCall

    settings = _load_settings()
    configure_logging(settings.log_level, stderr=True)
    arguments = dict(_parse_arg(a) for a in args)

    result = run_async(
        dispatch(_build_tools(settings), ToolCall(tool_name=tool_name, arguments=arguments))
    )
    if not result.success:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result.result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
