"""
Integration smoke test for the TCA documentation MCP server.

This script spins up:
1. The MCP SSE server (running in-process via FastMCP's HTTP transport).
2. A FastMCP client that connects over SSE, lists and reads a documentation
   resource, invokes the four tools, and prints the responses.

Usage:
    uv run python scripts/smoke_test.py

The script prints the tool outputs and exits with code 0 if the end-to-end flow
works. Use Ctrl+C to abort.
"""

import asyncio
import contextlib
import os

from fastmcp.client import Client

from tca_mcp.server import build_server
from tca_mcp.settings import Settings

SSE_HOST = "127.0.0.1"
SSE_PORT = 18080


def _text(result: object) -> str:
    return result.content[0].text  # type: ignore[attr-defined]


async def run_smoke_flow() -> None:
    os.environ["MCP_TRANSPORT"] = "sse"
    os.environ["MCP_SSE_PORT"] = str(SSE_PORT)
    settings = Settings.load()

    app_server = build_server(settings)
    app_server.startup()

    async def _run_sse() -> None:
        await app_server.serve_sse_async(host=SSE_HOST)

    print("Starting MCP SSE server...")
    sse_task = asyncio.create_task(_run_sse())
    await asyncio.sleep(0.5)

    client = Client(f"http://{SSE_HOST}:{SSE_PORT}/sse", name="smoke-client")

    try:
        async with client:
            resources = await client.list_resources()
            print("Resources:", [str(resource.uri) for resource in resources])
            contents = await client.read_resource(resources[0].uri)
            print("First resource starts with:", contents[0].text.splitlines()[0])

            tools = await client.list_tools()
            print("Tools:", [tool.name for tool in tools])

            print("Calling get-template tool...")
            print(_text(await client.call_tool("get-template", {"template": "timer"})))

            print("Calling lint-code tool...")
            lint_result = await client.call_tool(
                "lint-code",
                {"code": "struct State {\n  var count = 0\n}\nenum Action { case tap }"},
            )
            print(_text(lint_result))

            print("Calling search-docs tool...")
            print(_text(await client.call_tool("search-docs", {"query": "navigation"})))

            print("Calling generate-reducer tool...")
            reducer_result = await client.call_tool(
                "generate-reducer",
                {"name": "Settings", "hasEffects": True},
            )
            print(_text(reducer_result))

            print("Smoke test succeeded ✅")
    finally:
        print("Stopping MCP SSE server...")
        sse_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sse_task
        app_server.shutdown()


if __name__ == "__main__":
    try:
        asyncio.run(run_smoke_flow())
    except KeyboardInterrupt:
        print("Smoke test interrupted.")
