"""Entry point for the GPT-5 MCP server."""

from __future__ import annotations

import sys

import anyio
import click
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from gpt5_mcp.config import Settings, load_settings
from gpt5_mcp.core.errors import ConfigError
from gpt5_mcp.handlers import register_tool_handlers
from gpt5_mcp.logging import setup_logging

SERVER_NAME = "gpt5-mcp-server"
SERVER_VERSION = "1.0.0"
SERVER_DESCRIPTION = (
    "MCP server for GPT-5 API integration - provides text generation and conversation tools"
)


def create_server(settings: Settings) -> Server:
    server = Server(
        SERVER_NAME,
        version=SERVER_VERSION,
        instructions=SERVER_DESCRIPTION,
    )

    register_tool_handlers(server, settings)

    return server


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        click.echo("GPT-5 MCP server running on stdio", err=True)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


@click.command(name=SERVER_NAME, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)")
@click.option("-q", "--quiet", is_flag=True, help="Suppress all log output except errors")
@click.option("--log-level", default=None, help="Override GPT5_MCP_LOG_LEVEL")
def cli(verbose: int, quiet: bool, log_level: str | None) -> None:
    """Expose GPT-5 text generation as MCP tools over stdio."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    setup_logging(level=log_level or settings.log_level, verbose=verbose, quiet=quiet)
    anyio.run(serve, create_server(settings))
