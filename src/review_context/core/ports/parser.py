from typing import Protocol

from review_context.models import ContextResult, LineRange, ValidityResult


class ContextParser(Protocol):
    language: str

    def find_enclosing_context(self, source: str, line_range: LineRange) -> ContextResult: ...

    def dry_run(self, source: str) -> ValidityResult: ...
