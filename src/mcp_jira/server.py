import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from . import __version__
from .catalog import list_tools as catalog_tools
from .client import JiraClient
from .config import JiraConfig
from .dispatcher import ToolDispatcher
from .utils.logging import log_config_param

# Configure logging
logger = logging.getLogger("mcp-jira")


@dataclass
class AppContext:
    """Application context for MCP Jira."""

    config: JiraConfig
    dispatcher: ToolDispatcher


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Build the configuration and dispatcher shared by every tool call."""
    logger.info("Starting MCP Jira server")

    config = JiraConfig.from_env()
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Email", config.email)
    log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))

    client = JiraClient(config=config)
    try:
        yield AppContext(config=config, dispatcher=ToolDispatcher(client))
    finally:
        logger.info("MCP Jira server stopped")


# Create server instance
app = Server("mcp-jira", version=__version__, lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available Jira tools."""
    return catalog_tools()


# Arguments are validated by the dispatcher, which coerces loosely typed values
@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Any) -> Sequence[TextContent]:
    """Handle tool calls for Jira operations.

    Unknown tools and bad arguments raise; the MCP runtime reports them as
    error results. Jira errors are returned as regular tool output.
    """
    ctx = app.request_context.lifespan_context
    return await ctx.dispatcher.invoke(name, arguments)


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the MCP Jira server with the specified transport."""
    if transport == "sse":
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        import uvicorn

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # Use server.serve() instead of run() to stay in the same event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
