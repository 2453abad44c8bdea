"""Grammar-agnostic search for the outermost definition enclosing a line range."""

from collections.abc import Collection, Iterator

from tree_sitter import Node

from review_context.core.languages import DEFINITION_PREDICATES
from review_context.models import EnclosingContext, LineRange


def node_line_span(node: Node) -> tuple[int, int]:
    """Return the 1-based (start, end) lines of ``node``."""
    return node.start_point[0] + 1, node.end_point[0] + 1


def iter_candidate_nodes(root: Node, line_range: LineRange) -> Iterator[Node]:
    """Yield nodes in depth-first pre-order, skipping subtrees that cannot contain ``line_range``."""
    stack = [root]
    while stack:
        node = stack.pop()
        start_line, end_line = node_line_span(node)
        # Descendants never extend past their ancestor's span.
        if not line_range.within(start_line, end_line):
            continue
        yield node
        stack.extend(reversed(node.children))


def is_definition(node: Node, definition_types: Collection[str]) -> bool:
    """Return ``True`` when ``node`` is one of ``definition_types`` and passes its node-type check."""
    if node.type not in definition_types:
        return False
    predicate = DEFINITION_PREDICATES.get(node.type)
    return predicate is None or predicate(node)


def find_enclosing_node(root: Node, line_range: LineRange, definition_types: Collection[str]) -> Node | None:
    """Return the largest-span definition node containing ``line_range``.

    Equal spans keep the node visited first.
    """
    best: Node | None = None
    best_span = -1
    for node in iter_candidate_nodes(root, line_range):
        if not is_definition(node, definition_types):
            continue
        start_line, end_line = node_line_span(node)
        span = end_line - start_line
        if span > best_span:
            best = node
            best_span = span
    return best


def _name_node(node: Node) -> Node | None:
    name_node = node.child_by_field_name("name")
    if name_node is not None:
        return name_node
    # Python decorated_definition wraps the named def or class.
    definition = node.child_by_field_name("definition")
    if definition is not None:
        return _name_node(definition)
    # C/C++ function_definition: the identifier sits at the bottom of the declarator chain.
    declarator = node.child_by_field_name("declarator")
    if declarator is not None:
        while (inner := declarator.child_by_field_name("declarator")) is not None:
            declarator = inner
        return declarator
    # Rust impl_item
    impl_type = node.child_by_field_name("type")
    if impl_type is not None:
        return impl_type
    # Go type_declaration
    for child in node.named_children:
        if child.type in ("type_spec", "type_alias"):
            return child.child_by_field_name("name")
    return None


def _node_name(node: Node) -> str | None:
    name_node = _name_node(node)
    if name_node is None or name_node.text is None:
        return None
    return name_node.text.decode("utf-8", errors="replace")


def to_enclosing_context(node: Node, source: str) -> EnclosingContext:
    """Copy the facts callers need out of ``node`` so the tree can be dropped."""
    start_line, end_line = node_line_span(node)
    lines = source.split("\n")
    return EnclosingContext(
        node_type=node.type,
        name=_node_name(node),
        start_line=start_line,
        end_line=end_line,
        text="\n".join(lines[start_line - 1 : end_line]),
    )
