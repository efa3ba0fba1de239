"""MCP tool registrations for the TCA documentation server."""

import logging
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from tca_mcp import dispatcher
from tca_mcp.catalog import TEMPLATE_NAMES
from tca_mcp.dispatcher import ToolName
from tca_mcp.errors import TCAServerError

logger = logging.getLogger(__name__)


def _describe(tool: ToolName, parameter: str | None = None) -> str:
    descriptor = dispatcher.tool_descriptor(tool)
    if parameter is None:
        return descriptor["description"]
    return descriptor["inputSchema"]["properties"][parameter]["description"]


def register_tca_tools(mcp: FastMCP) -> None:
    """Register the four TCA tools, each delegating to the request dispatcher."""

    def _log_tool_event(tool_name: str, event: str, **fields: object) -> None:
        logger.info(
            "tca_tool_event",
            extra={"tool": tool_name, "event": event, **fields},
        )

    def _call(tool: ToolName, arguments: dict[str, Any]) -> str:
        try:
            response = dispatcher.call_tool(tool.value, arguments)
        except TCAServerError as exc:
            logger.warning("%s rejected the request", tool.value, exc_info=True)
            _log_tool_event(tool.value, "rejected", error=str(exc))
            raise ToolError(str(exc)) from exc
        except Exception:
            logger.exception("%s failed unexpectedly", tool.value)
            _log_tool_event(tool.value, "unexpected_error")
            raise

        text = response["content"][0]["text"]
        _log_tool_event(tool.value, "success", response_chars=len(text))
        return text

    @mcp.tool(
        name=ToolName.GET_TEMPLATE.value,
        description=_describe(ToolName.GET_TEMPLATE),
    )
    async def get_template(
        template: Annotated[
            str,
            Field(
                description=_describe(ToolName.GET_TEMPLATE, "template"),
                json_schema_extra={"enum": list(TEMPLATE_NAMES)},
            ),
        ],
    ) -> str:
        """Return a ready-made feature, or a notice when the template is unknown."""
        return _call(ToolName.GET_TEMPLATE, {"template": template})

    @mcp.tool(
        name=ToolName.LINT_CODE.value,
        description=_describe(ToolName.LINT_CODE),
    )
    async def lint_code(
        code: Annotated[str, Field(description=_describe(ToolName.LINT_CODE, "code"))],
    ) -> str:
        """Return a lint report for the submitted Swift source."""
        return _call(ToolName.LINT_CODE, {"code": code})

    @mcp.tool(
        name=ToolName.SEARCH_DOCS.value,
        description=_describe(ToolName.SEARCH_DOCS),
    )
    async def search_docs(
        query: Annotated[str, Field(description=_describe(ToolName.SEARCH_DOCS, "query"))],
    ) -> str:
        """Return links to documentation topics matching the query."""
        return _call(ToolName.SEARCH_DOCS, {"query": query})

    @mcp.tool(
        name=ToolName.GENERATE_REDUCER.value,
        description=_describe(ToolName.GENERATE_REDUCER),
    )
    async def generate_reducer(
        name: Annotated[str, Field(description=_describe(ToolName.GENERATE_REDUCER, "name"))],
        hasEffects: Annotated[  # noqa: N803
            bool,
            Field(description=_describe(ToolName.GENERATE_REDUCER, "hasEffects")),
        ] = False,
    ) -> str:
        """Return a reducer scaffold for the named feature."""
        return _call(ToolName.GENERATE_REDUCER, {"name": name, "hasEffects": hasEffects})

    logger.info("TCA MCP tools registered.", extra={"tools": [tool.value for tool in ToolName]})
