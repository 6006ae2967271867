"""
MCP stdio server exposing the web search tools.
Run with: python mcp_server.py
"""
import asyncio
import json
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from config import Config
from services.dispatcher import OperationDispatcher
from services.forwarder import RequestForwarder
from utils.http_client import HTTPClientManager
from utils.logger import app_logger

server = Server(Config.SERVER_NAME, version=Config.VERSION)
dispatcher = OperationDispatcher(RequestForwarder(Config.OPENAI_API_KEY))


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    """Advertise both tools with their input schemas."""
    return [
        types.Tool(
            name=tool["name"],
            description=tool["description"],
            inputSchema=tool["inputSchema"],
        )
        for tool in dispatcher.list_tools()
    ]


@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """
    Invoke a tool and return the OpenAI response as pretty-printed JSON text.
    Classified errors propagate; the SDK reports them as isError results.
    """
    app_logger.info(f"MCP tool call: {name}")
    payload = await dispatcher.dispatch(name, arguments)
    return [types.TextContent(type="text", text=json.dumps(payload["content"], indent=2))]


async def run_server() -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    try:
        async with stdio_server() as (read_stream, write_stream):
            app_logger.info(f"{Config.SERVER_NAME} v{Config.VERSION} running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await HTTPClientManager.close_all()


def main() -> None:
    try:
        asyncio.run(run_server())
    except Exception as e:
        app_logger.critical(f"Fatal error in MCP server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
