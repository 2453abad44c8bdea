from collections.abc import Callable
from pathlib import Path

from tree_sitter import Node

_LANGUAGE_ALIASES = {
    "c#": "csharp",
    "csharp": "csharp",
    "cpp": "cpp",
    "c++": "cpp",
    "cs": "csharp",
    "go": "go",
    "golang": "go",
    "java": "java",
    "javascript": "javascript",
    "js": "javascript",
    "python": "python",
    "py": "python",
    "rb": "ruby",
    "ruby": "ruby",
    "rs": "rust",
    "rust": "rust",
    "ts": "typescript",
    "tsx": "tsx",
    "typescript": "typescript",
    "c": "c",
}

_EXTENSION_LANGUAGE_MAP = {
    ".c": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".cs": "csharp",
    ".cxx": "cpp",
    ".go": "go",
    ".h": "c",
    ".hh": "cpp",
    ".hpp": "cpp",
    ".java": "java",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".py": "python",
    ".pyi": "python",
    ".rb": "ruby",
    ".rs": "rust",
    ".ts": "typescript",
    ".tsx": "tsx",
}

_JAVASCRIPT_DEFINITIONS = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "method_definition",
        "class_declaration",
        "variable_declarator",
    }
)

_TYPESCRIPT_DEFINITIONS = _JAVASCRIPT_DEFINITIONS | {
    "abstract_class_declaration",
    "interface_declaration",
    "type_alias_declaration",
    "enum_declaration",
}

# Node types that count as an enclosing definition, per grammar.
DEFINITION_NODE_TYPES: dict[str, frozenset[str]] = {
    "python": frozenset({"function_definition", "class_definition", "decorated_definition"}),
    "javascript": _JAVASCRIPT_DEFINITIONS,
    "typescript": _TYPESCRIPT_DEFINITIONS,
    "tsx": _TYPESCRIPT_DEFINITIONS,
    "go": frozenset({"function_declaration", "method_declaration", "type_declaration"}),
    "java": frozenset(
        {
            "class_declaration",
            "interface_declaration",
            "enum_declaration",
            "record_declaration",
            "method_declaration",
            "constructor_declaration",
        }
    ),
    "rust": frozenset({"function_item", "impl_item", "struct_item", "enum_item", "trait_item"}),
    "ruby": frozenset({"method", "singleton_method", "class", "module"}),
    "c": frozenset({"function_definition", "struct_specifier"}),
    "cpp": frozenset({"function_definition", "class_specifier", "struct_specifier"}),
    "csharp": frozenset(
        {
            "class_declaration",
            "struct_declaration",
            "interface_declaration",
            "record_declaration",
            "method_declaration",
            "constructor_declaration",
        }
    ),
}

_FUNCTION_VALUE_TYPES = frozenset({"arrow_function", "function_expression", "function", "generator_function"})


def _has_body(node: Node) -> bool:
    return node.child_by_field_name("body") is not None


def _binds_function(node: Node) -> bool:
    value = node.child_by_field_name("value")
    return value is not None and value.type in _FUNCTION_VALUE_TYPES


# Node types that only count as a definition when the check passes. C/C++
# specifiers also appear as bare type references and forward declarations,
# and a JS/TS declarator is a definition only when it binds a function.
DEFINITION_PREDICATES: dict[str, Callable[[Node], bool]] = {
    "struct_specifier": _has_body,
    "class_specifier": _has_body,
    "variable_declarator": _binds_function,
}

_DISPLAY_NAMES = {
    "c": "C",
    "cpp": "C++",
    "csharp": "C#",
    "go": "Go",
    "java": "Java",
    "javascript": "JavaScript",
    "python": "Python",
    "ruby": "Ruby",
    "rust": "Rust",
    "tsx": "TSX",
    "typescript": "TypeScript",
}

_SUPPORTED_LANGUAGES = set(DEFINITION_NODE_TYPES)


def supported_languages() -> list[str]:
    return sorted(_SUPPORTED_LANGUAGES)


def display_name(language: str) -> str:
    return _DISPLAY_NAMES.get(language, language)


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise ValueError(f"Unsupported file extension: {suffix}")


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    raise ValueError("Language must be provided when no file path is available.")
