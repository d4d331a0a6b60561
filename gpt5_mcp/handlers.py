from __future__ import annotations

from functools import partial
from typing import Any

import mcp.types as types
from anyio import to_thread
from mcp.server.lowlevel import Server

from gpt5_mcp.config import Settings
from gpt5_mcp.tools.adapter import dispatch
from gpt5_mcp.tools.schemas import tool_declarations


def register_tool_handlers(server: Server, settings: Settings) -> None:
    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [types.Tool.model_validate(declaration) for declaration in tool_declarations()]

    # Argument errors must come back as in-band text, so the SDK's schema check is off.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str,
        arguments: dict[str, Any],
    ) -> list[types.TextContent]:
        result = await to_thread.run_sync(partial(dispatch, name, arguments, settings))
        return [types.TextContent.model_validate(part) for part in result["content"]]
