"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from review_context.core.parsers import TreeSitterContextParser, get_context_parser

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

CLASS_WITH_METHOD = """\
class C:
    def m(self):
        x = 1
        y = 2
"""

NESTED_FUNCTIONS = """\
import os


def outer(a):
    def inner(b):
        return b + 1

    return inner(a)


x = outer(1)
"""

SAMPLE_PATCH = """\
diff --git a/sample.py b/sample.py
--- a/sample.py
+++ b/sample.py
@@ -5,2 +5,2 @@ def outer(a):
     def inner(b):
-        return b
+        return b + 1
@@ -11,1 +11,1 @@
-x = outer(0)
+x = outer(1)
"""


@pytest.fixture
def python_parser() -> Parser:
    """Return a tree-sitter parser for Python."""
    return get_parser("python")


@pytest.fixture
def python_context_parser() -> TreeSitterContextParser:
    """Return the enclosing-context parser for Python."""
    return get_context_parser("python")


@pytest.fixture
def class_with_method() -> str:
    return CLASS_WITH_METHOD


@pytest.fixture
def nested_functions() -> str:
    return NESTED_FUNCTIONS


@pytest.fixture
def sample_patch() -> str:
    return SAMPLE_PATCH


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write ``NESTED_FUNCTIONS`` to a ``.py`` file."""
    path = tmp_path / "sample.py"
    path.write_text(NESTED_FUNCTIONS, encoding="utf-8")
    return path


@pytest.fixture
def patch_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.diff"
    path.write_text(SAMPLE_PATCH, encoding="utf-8")
    return path
