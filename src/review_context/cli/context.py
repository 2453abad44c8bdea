from collections.abc import Sequence
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from review_context.core.context import (
    check_file,
    find_context_in_file,
    hunk_contexts_in_file,
    read_source,
)
from review_context.core.diff import assign_line_numbers
from review_context.core.languages import DEFINITION_NODE_TYPES, supported_languages
from review_context.models import ContextResult

console = Console()

_LANGUAGE_HELP = "Language name or code (e.g. python, js, ts, csharp). Detected from the extension by default."


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=1)


def _describe(result: ContextResult) -> str:
    if result.context is not None:
        name = result.context.name or "<anonymous>"
        return f"{result.context.node_type} {name} (lines {result.context.start_line}-{result.context.end_line})"
    if result.error is not None:
        return f"parse failed: {result.error}"
    return "-"


def context(
    path: Annotated[str, typer.Argument(help="Path to the source file.")],
    start: Annotated[int, typer.Option("--start", "-s", help="First line of the range (1-based).")],
    end: Annotated[int | None, typer.Option("--end", "-e", help="Last line of the range; defaults to --start.")] = None,
    language: Annotated[str | None, typer.Option(help=_LANGUAGE_HELP)] = None,
) -> None:
    """Show the outermost function or class enclosing a line range."""
    try:
        result = find_context_in_file(path, start, end, language)
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(str(exc)) from None

    if result.error is not None:
        raise _fail(f"could not parse {path}: {result.error}")
    if result.context is None:
        console.print("[yellow]No enclosing context[/yellow]")
        return

    console.print(f"[green]Found[/green] {_describe(result)}")
    console.print(
        Syntax(
            result.context.text,
            lexer=Syntax.guess_lexer(path, code=result.context.text),
            line_numbers=True,
            start_line=result.context.start_line,
        )
    )


def check(
    path: Annotated[str, typer.Argument(help="Path to the source file.")],
    language: Annotated[str | None, typer.Option(help=_LANGUAGE_HELP)] = None,
) -> None:
    """Check that a source file parses without syntax errors."""
    try:
        result = check_file(path, language)
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(str(exc)) from None

    if not result.valid:
        raise _fail(result.error)
    console.print(f"[green]Valid[/green] {path}")


def hunks(
    path: Annotated[str, typer.Argument(help="Path to the changed source file (new version).")],
    patch: Annotated[str, typer.Argument(help="Path to a unified diff for that file.")],
    language: Annotated[str | None, typer.Option(help=_LANGUAGE_HELP)] = None,
) -> None:
    """List every hunk of a patch with its enclosing function or class."""
    try:
        results = hunk_contexts_in_file(path, read_source(patch), language)
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(str(exc)) from None

    rows = [
        (f"{item.hunk.new_range.start_line}-{item.hunk.new_range.end_line}", item.hunk.header, _describe(item.result))
        for item in results
    ]
    _render_table(["lines", "header", "context"], rows)


def number(
    patch: Annotated[str, typer.Argument(help="Path to a unified diff.")],
) -> None:
    """Print a patch with new-file line numbers."""
    try:
        numbered = assign_line_numbers(read_source(patch))
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(str(exc)) from None
    console.print(numbered, markup=False, highlight=False, soft_wrap=True)


def languages() -> None:
    """List supported languages and the node types treated as definitions."""
    rows = [(name, ", ".join(sorted(DEFINITION_NODE_TYPES[name]))) for name in supported_languages()]
    _render_table(["language", "definition node types"], rows)
