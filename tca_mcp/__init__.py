"""
TCA documentation and code-generation MCP server.

Serves Composable Architecture documentation as MCP resources and exposes
template, lint, search and scaffolding tools.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
