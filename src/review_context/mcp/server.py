"""FastMCP server exposing review-context tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from review_context.core.context import check_source, find_context_in_source
from review_context.core.diff import assign_line_numbers
from review_context.core.languages import DEFINITION_NODE_TYPES, supported_languages


def create_mcp_server() -> FastMCP:
    """Create a FastMCP server exposing the enclosing-context resolver."""

    mcp = FastMCP(
        "review-context",
        instructions="Find the function or class that encloses a changed line range in a source file.",
    )

    @mcp.tool()
    def find_enclosing_context(
        code: str,
        language: str,
        start_line: int,
        end_line: int | None = None,
    ) -> dict[str, Any]:
        """Return the outermost function or class containing the given 1-based line range."""
        try:
            result = find_context_in_source(code, language, start_line, end_line)
        except ValueError as exc:
            return {"status": "error", "error": f"Error: {exc}"}
        payload: dict[str, Any] = {"status": result.status}
        if result.context is not None:
            payload["context"] = result.context.model_dump()
        if result.error is not None:
            payload["error"] = result.error
        return payload

    @mcp.tool()
    def check_syntax(code: str, language: str) -> dict[str, Any]:
        """Report whether the source parses without syntax errors."""
        try:
            return check_source(code, language).model_dump()
        except ValueError as exc:
            return {"valid": False, "error": f"Error: {exc}"}

    @mcp.tool()
    def number_patch_lines(patch: str) -> str:
        """Prefix each new-file line of a unified diff with its line number."""
        try:
            return assign_line_numbers(patch)
        except ValueError as exc:
            return f"Error: {exc}"

    @mcp.tool()
    def list_languages() -> dict[str, list[str]]:
        """List supported languages and the node types treated as definitions."""
        return {name: sorted(DEFINITION_NODE_TYPES[name]) for name in supported_languages()}

    return mcp
