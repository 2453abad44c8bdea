"""Tests for the MCP server tool definitions."""

from __future__ import annotations

import asyncio
from typing import Any

from fastmcp import Client

from review_context.mcp.server import create_mcp_server


def _call(tool: str, arguments: dict[str, Any]) -> Any:
    async def _run() -> Any:
        async with Client(create_mcp_server()) as client:
            result = await client.call_tool(tool, arguments)
        return result.data

    return asyncio.run(_run())


def _tool_names() -> set[str]:
    async def _run() -> set[str]:
        async with Client(create_mcp_server()) as client:
            tools = await client.list_tools()
        return {tool.name for tool in tools}

    return asyncio.run(_run())


class TestMcpServerCreation:
    def test_creates_server(self) -> None:
        server = create_mcp_server()
        assert server is not None
        assert server.name == "review-context"

    def test_server_has_tools(self) -> None:
        assert _tool_names() == {"find_enclosing_context", "check_syntax", "number_patch_lines", "list_languages"}


class TestMcpTools:
    def test_find_enclosing_context(self, class_with_method: str) -> None:
        data = _call("find_enclosing_context", {"code": class_with_method, "language": "python", "start_line": 3})
        assert data["status"] == "found"
        assert data["context"]["name"] == "C"
        assert data["context"]["start_line"] == 1
        assert data["context"]["end_line"] == 4

    def test_find_enclosing_context_none(self, nested_functions: str) -> None:
        data = _call(
            "find_enclosing_context",
            {"code": nested_functions, "language": "python", "start_line": 11, "end_line": 11},
        )
        assert data == {"status": "none"}

    def test_find_enclosing_context_unsupported_language(self) -> None:
        data = _call("find_enclosing_context", {"code": "x", "language": "cobol", "start_line": 1})
        assert data["status"] == "error"
        assert data["error"].startswith("Error: Unsupported language")

    def test_check_syntax(self) -> None:
        assert _call("check_syntax", {"code": "x = 1\n", "language": "python"}) == {"valid": True, "error": ""}
        assert _call("check_syntax", {"code": "def f(:\n", "language": "python"})["valid"] is False

    def test_number_patch_lines(self, sample_patch: str) -> None:
        numbered = _call("number_patch_lines", {"patch": sample_patch})
        assert "11: +x = outer(1)" in numbered

    def test_list_languages(self) -> None:
        data = _call("list_languages", {})
        assert data["python"] == ["class_definition", "decorated_definition", "function_definition"]
