"""
Request routing for the four MCP request kinds.

Every function here is pure over the static catalogs: the same request always
produces the same response. Protocol-level failures are raised as
``TCAServerError`` subclasses; soft outcomes (unknown template, no search
matches, clean lint) are returned as ordinary text responses.
"""

import copy
import logging
from enum import Enum
from typing import Any, Callable, Mapping
from urllib.parse import urlsplit

from tca_mcp import catalog, linter, scaffold
from tca_mcp.errors import InvalidToolArgumentsError, NotFoundError, UnknownToolError

logger = logging.getLogger(__name__)

RESOURCE_SCHEME = "tca"
DOCS_PREFIX = "docs/"
MARKDOWN_MIME_TYPE = "text/markdown"


class ToolName(str, Enum):
    GET_TEMPLATE = "get-template"
    LINT_CODE = "lint-code"
    SEARCH_DOCS = "search-docs"
    GENERATE_REDUCER = "generate-reducer"


TOOL_DESCRIPTORS: tuple[Mapping[str, Any], ...] = (
    {
        "name": ToolName.GET_TEMPLATE.value,
        "description": "Get a code template for a TCA feature (counter, api-call, list, timer)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "template": {
                    "type": "string",
                    "enum": list(catalog.TEMPLATE_NAMES),
                    "description": "Template name",
                },
            },
            "required": ["template"],
        },
    },
    {
        "name": ToolName.LINT_CODE.value,
        "description": "Analyze Swift TCA code for common issues",
        "inputSchema": {
            "type": "object",
            "properties": {
                "code": {
                    "type": "string",
                    "description": "Swift code to lint",
                },
            },
            "required": ["code"],
        },
    },
    {
        "name": ToolName.SEARCH_DOCS.value,
        "description": "Search TCA documentation by topic",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": (
                        "Search topic (reducer, store, effects, navigation, presentation, testing)"
                    ),
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": ToolName.GENERATE_REDUCER.value,
        "description": "Generate a basic TCA reducer scaffold",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Feature name (e.g., Counter, User, Settings)",
                },
                "hasEffects": {
                    "type": "boolean",
                    "description": "Include effect handling",
                },
            },
            "required": ["name"],
        },
    },
)


def doc_uri(key: str) -> str:
    return f"{RESOURCE_SCHEME}://{DOCS_PREFIX}{key}"


def tool_descriptor(name: ToolName) -> Mapping[str, Any]:
    return next(descriptor for descriptor in TOOL_DESCRIPTORS if descriptor["name"] == name.value)


def list_resources() -> list[dict[str, str]]:
    """Describe every documentation entry as an MCP resource."""
    return [
        {
            "uri": doc_uri(doc["key"]),
            "name": doc["title"],
            "description": doc["description"],
            "mimeType": MARKDOWN_MIME_TYPE,
        }
        for doc in catalog.list_docs()
    ]


def read_resource(uri: str) -> dict[str, str]:
    """Return the Markdown body of the documentation entry addressed by ``uri``."""
    parts = urlsplit(uri)
    location = f"{parts.netloc}{parts.path}".lstrip("/")
    if parts.scheme != RESOURCE_SCHEME or not location.startswith(DOCS_PREFIX):
        raise NotFoundError(f"Documentation not found: {uri}")

    entry = catalog.read_doc(location[len(DOCS_PREFIX) :])
    return {"uri": uri, "mimeType": MARKDOWN_MIME_TYPE, "text": entry.content}


def list_tools() -> list[dict[str, Any]]:
    """Return the static tool descriptors; each call gets an independent copy."""
    return copy.deepcopy(list(TOOL_DESCRIPTORS))


def _text_response(text: str) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


def _require_str(arguments: Mapping[str, Any], field_name: str) -> str:
    value = arguments.get(field_name)
    if not isinstance(value, str):
        raise InvalidToolArgumentsError(f"'{field_name}' is required and must be a string.")
    return value


def _optional_bool(arguments: Mapping[str, Any], field_name: str, default: bool) -> bool:
    value = arguments.get(field_name)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidToolArgumentsError(f"'{field_name}' must be a boolean.")
    return value


def _get_template(arguments: Mapping[str, Any]) -> str:
    name = _require_str(arguments, "template")
    try:
        template = catalog.get_template(name)
    except NotFoundError:
        logger.info("Unknown template requested", extra={"template": name})
        return f"Unknown template: {name}"
    return f"# {template.description}\n\n```swift\n{template.code}\n```"


def _lint_code(arguments: Mapping[str, Any]) -> str:
    findings = linter.lint(_require_str(arguments, "code"))
    if not findings:
        report = "✅ No issues found!"
    else:
        report = "\n".join(
            f"[{finding.severity.value.upper()}] {finding.message} (line {finding.line})"
            for finding in findings
        )
    return f"# Lint Report\n\n{report}"


def _search_docs(arguments: Mapping[str, Any]) -> str:
    query = _require_str(arguments, "query")
    matches = catalog.search_docs(query)
    if not matches:
        return f'No documentation found for "{query.lower()}"'
    links = "\n".join(f"- [{doc['title']}]({doc_uri(doc['key'])})" for doc in matches)
    return f"# TCA Documentation\n\nFound {len(matches)} matches:\n\n{links}"


def _generate_reducer(arguments: Mapping[str, Any]) -> str:
    code = scaffold.generate_reducer(
        _require_str(arguments, "name"),
        include_effects=_optional_bool(arguments, "hasEffects", False),
    )
    return f"# Generated Reducer\n\n```swift\n{code}\n```"


_HANDLERS: dict[ToolName, Callable[[Mapping[str, Any]], str]] = {
    ToolName.GET_TEMPLATE: _get_template,
    ToolName.LINT_CODE: _lint_code,
    ToolName.SEARCH_DOCS: _search_docs,
    ToolName.GENERATE_REDUCER: _generate_reducer,
}


def call_tool(name: str, arguments: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Run tool ``name`` and wrap its text output in the tool response envelope."""
    try:
        tool = ToolName(name)
    except ValueError as exc:
        raise UnknownToolError(f"Unknown tool: {name}") from exc

    logger.debug("Dispatching tool call", extra={"tool": tool.value})
    return _text_response(_HANDLERS[tool](arguments or {}))
