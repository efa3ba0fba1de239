"""MCP resource registrations: one static Markdown resource per documentation topic."""

import logging
from typing import Callable

from fastmcp import FastMCP

from tca_mcp import dispatcher

logger = logging.getLogger(__name__)


def _reader(uri: str) -> Callable[[], str]:
    def read_documentation() -> str:
        return dispatcher.read_resource(uri)["text"]

    return read_documentation


def register_tca_resources(mcp: FastMCP) -> None:
    """Expose each catalog entry at its ``tca://docs/<key>`` URI."""
    resources = dispatcher.list_resources()
    for resource in resources:
        mcp.resource(
            resource["uri"],
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mimeType"],
        )(_reader(resource["uri"]))

    logger.info("TCA documentation resources registered.", extra={"count": len(resources)})
