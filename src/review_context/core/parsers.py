import logging
from collections.abc import Collection
from pathlib import Path
from typing import cast

from tree_sitter import Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser

from review_context.core.enclosing import find_enclosing_node, to_enclosing_context
from review_context.core.languages import (
    DEFINITION_NODE_TYPES,
    display_name,
    normalize_language,
    resolve_language,
)
from review_context.models import ContextResult, LineRange, ValidityResult

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


class TreeSitterContextParser:
    """Locate enclosing definitions and check syntax with a tree-sitter grammar.

    Implements the ``ContextParser`` protocol. Every call builds its own parser
    and tree, so one instance can serve concurrent callers.
    """

    def __init__(self, language: str, definition_types: Collection[str]) -> None:
        self.language = language
        self.definition_types = frozenset(definition_types)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self.language!r})"

    def _parse(self, source: str) -> Tree:
        parser = get_parser(cast(SupportedLanguage, self.language))
        return parser.parse(source.encode("utf-8"))

    def find_enclosing_context(self, source: str, line_range: LineRange) -> ContextResult:
        try:
            tree = self._parse(source)
            node = find_enclosing_node(tree.root_node, line_range, self.definition_types)
            context = to_enclosing_context(node, source) if node is not None else None
        except Exception as exc:  # noqa: BLE001
            logger.exception("Error parsing %s file", display_name(self.language))
            return ContextResult(error=_describe(exc))

        if context is None:
            logger.debug("No enclosing %s definition for %s", self.language, line_range)
        else:
            logger.debug("%s enclosed by %s at %d-%d", line_range, context.node_type, context.start_line, context.end_line)
        return ContextResult(context=context)

    def dry_run(self, source: str) -> ValidityResult:
        try:
            tree = self._parse(source)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Error parsing %s file", display_name(self.language))
            return ValidityResult(valid=False, error=_describe(exc))

        if tree.root_node.has_error:
            return ValidityResult(valid=False, error=f"Syntax error in {display_name(self.language)} code")
        return ValidityResult(valid=True)


def get_context_parser(language: str) -> TreeSitterContextParser:
    """Return the parser for ``language`` (a name or alias such as ``py``)."""
    resolved = normalize_language(language)
    return TreeSitterContextParser(resolved, DEFINITION_NODE_TYPES[resolved])


def get_context_parser_for_path(file_path: Path, language: str | None = None) -> TreeSitterContextParser:
    resolved = resolve_language(language, file_path)
    return TreeSitterContextParser(resolved, DEFINITION_NODE_TYPES[resolved])
