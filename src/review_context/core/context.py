from pathlib import Path

from review_context.core.diff import HunkContext, resolve_hunk_contexts
from review_context.core.parsers import get_context_parser, get_context_parser_for_path
from review_context.models import ContextResult, LineRange, ValidityResult


def read_source(path: str) -> str:
    file_path = Path(path)
    try:
        return file_path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None


def make_line_range(start_line: int, end_line: int | None = None) -> LineRange:
    return LineRange(start_line=start_line, end_line=start_line if end_line is None else end_line)


def find_context_in_source(
    code: str,
    language: str,
    start_line: int,
    end_line: int | None = None,
) -> ContextResult:
    parser = get_context_parser(language)
    return parser.find_enclosing_context(code, make_line_range(start_line, end_line))


def find_context_in_file(
    path: str,
    start_line: int,
    end_line: int | None = None,
    language: str | None = None,
) -> ContextResult:
    line_range = make_line_range(start_line, end_line)
    parser = get_context_parser_for_path(Path(path), language)
    return parser.find_enclosing_context(read_source(path), line_range)


def check_source(code: str, language: str) -> ValidityResult:
    return get_context_parser(language).dry_run(code)


def check_file(path: str, language: str | None = None) -> ValidityResult:
    parser = get_context_parser_for_path(Path(path), language)
    return parser.dry_run(read_source(path))


def hunk_contexts_in_source(code: str, language: str, patch: str) -> list[HunkContext]:
    return resolve_hunk_contexts(get_context_parser(language), code, patch)


def hunk_contexts_in_file(path: str, patch: str, language: str | None = None) -> list[HunkContext]:
    parser = get_context_parser_for_path(Path(path), language)
    return resolve_hunk_contexts(parser, read_source(path), patch)
