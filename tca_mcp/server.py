"""
Core server bootstrap for the TCA documentation MCP server.

Wires up the fastmcp instance and registers the documentation resources and
the template, lint, search and scaffolding tools.
"""

import logging

from fastmcp import FastMCP

from tca_mcp import __version__, catalog
from tca_mcp.resources import register_tca_resources
from tca_mcp.settings import Settings
from tca_mcp.tools import register_tca_tools

SERVER_NAME = "tca-cursor-mcp"


class ServerApp:
    """Owns the FastMCP instance and runs it on the configured transport."""

    def __init__(self, settings: Settings) -> None:
        self._logger = logging.getLogger(__name__)
        self._settings = settings
        self._mcp_app = FastMCP(
            name=SERVER_NAME,
            version=__version__,
            instructions=(
                "Browse Composable Architecture documentation, fetch feature templates, "
                "lint TCA Swift code and generate reducer scaffolds."
            ),
        )
        register_tca_resources(self._mcp_app)
        register_tca_tools(self._mcp_app)

    def startup(self) -> None:
        """Log the static catalog sizes before serving the first request."""
        self._logger.info(
            "Starting server bootstrap",
            extra={
                "version": __version__,
                "docs": len(catalog.DOCS),
                "templates": len(catalog.TEMPLATES),
                "transport": self._settings.transport,
            },
        )

    def shutdown(self) -> None:
        """Log shutdown; the catalogs are static so nothing needs releasing."""
        self._logger.info("Shutting down server bootstrap")

    def serve_forever(self) -> None:
        """Run the FastMCP server on the configured transport until interrupted."""
        if self._settings.transport == "stdio":
            self._logger.info("Starting stdio transport")
            self._mcp_app.run(transport="stdio")
            return

        host = self._settings.mcp_sse_host
        port = self._settings.mcp_sse_port
        self._logger.info("Starting SSE transport", extra={"host": host, "port": port})
        self._mcp_app.run(transport="sse", host=host, port=port)

    async def serve_sse_async(self, host: str | None = None) -> None:
        """Async helper for running the SSE transport (used by smoke tests)."""
        await self._mcp_app.run_http_async(
            transport="sse",
            host=host or self._settings.mcp_sse_host,
            port=self._settings.mcp_sse_port,
        )

    @property
    def mcp(self) -> FastMCP:
        """Expose the configured FastMCP instance."""
        return self._mcp_app


def build_server(settings: Settings) -> ServerApp:
    """Factory used by main.py to create the configured server instance."""
    return ServerApp(settings)
