"""Unified-diff hunk parsing and new-file line numbering."""

import re

from pydantic import BaseModel, Field

from review_context.core.ports.parser import ContextParser
from review_context.models import ContextResult, LineRange

_HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$")
# Starts the next file of a multi-file patch.
_FILE_HEADER_PREFIX = "diff --git"


class DiffParseError(ValueError):
    pass


class Hunk(BaseModel):
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    header: str = ""
    lines: list[str] = Field(default_factory=list)

    @property
    def new_range(self) -> LineRange:
        """New-file lines covered by this hunk; a pure deletion maps to the line it sits at."""
        start_line = max(self.new_start, 1)
        end_line = max(start_line, self.new_start + self.new_count - 1)
        return LineRange(start_line=start_line, end_line=end_line)


class HunkContext(BaseModel):
    hunk: Hunk
    result: ContextResult


def parse_hunk_header(line: str) -> Hunk:
    match = _HUNK_HEADER_RE.match(line)
    if match is None:
        raise DiffParseError(f"Malformed hunk header: {line!r}")
    old_start, old_count, new_start, new_count, header = match.groups()
    return Hunk(
        old_start=int(old_start),
        old_count=int(old_count) if old_count is not None else 1,
        new_start=int(new_start),
        new_count=int(new_count) if new_count is not None else 1,
        header=header.strip(),
    )


def parse_hunks(patch: str) -> list[Hunk]:
    hunks: list[Hunk] = []
    current: Hunk | None = None
    for line in patch.splitlines():
        if line.startswith(_FILE_HEADER_PREFIX):
            current = None
        elif line.startswith("@@"):
            current = parse_hunk_header(line)
            hunks.append(current)
        elif current is not None:
            current.lines.append(line)
    return hunks


def assign_line_numbers(patch: str) -> str:
    """Prefix each new-file line of ``patch`` with its line number.

    Hunk headers are kept as-is and removed lines are dropped. File headers
    (``diff --git``, ``---``/``+++``) pass through, and a ``diff --git`` line
    ends numbering until the next hunk header.
    """
    numbered: list[str] = []
    new_line: int | None = None
    for line in patch.splitlines():
        if line.startswith(_FILE_HEADER_PREFIX):
            new_line = None
            numbered.append(line)
        elif line.startswith("@@"):
            new_line = parse_hunk_header(line).new_start
            numbered.append(line)
        elif new_line is None or line.startswith("\\"):
            numbered.append(line)
        elif not line.startswith("-"):
            numbered.append(f"{new_line}: {line}")
            new_line += 1
    return "\n".join(numbered)


def resolve_hunk_contexts(parser: ContextParser, source: str, patch: str) -> list[HunkContext]:
    """Pair every hunk of ``patch`` with the definition enclosing its new-file lines.

    ``source`` is the full text of the file after the change.
    """
    return [
        HunkContext(hunk=hunk, result=parser.find_enclosing_context(source, hunk.new_range))
        for hunk in parse_hunks(patch)
    ]
