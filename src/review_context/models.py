from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LineRange(BaseModel):
    """Inclusive, 1-based range of source lines."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(ge=1)
    end_line: int = Field(ge=1)

    @model_validator(mode="after")
    def check_order(self) -> Self:
        if self.start_line > self.end_line:
            raise ValueError(f"start_line ({self.start_line}) must not exceed end_line ({self.end_line})")
        return self

    @classmethod
    def single(cls, line: int) -> "LineRange":
        return cls(start_line=line, end_line=line)

    def within(self, start_line: int, end_line: int) -> bool:
        """Return ``True`` when this range lies entirely inside ``start_line..end_line``."""
        return start_line <= self.start_line and self.end_line <= end_line


class EnclosingContext(BaseModel):
    """Owned copy of the definition node that encloses a line range."""

    model_config = ConfigDict(frozen=True)

    node_type: str
    name: str | None = None
    start_line: int
    end_line: int
    text: str = ""

    @property
    def span(self) -> int:
        return self.end_line - self.start_line


class ContextResult(BaseModel):
    """Outcome of an enclosing-context lookup.

    Exactly one of three states: ``context`` set (found), ``error`` set (the
    grammar engine failed), or neither (no definition encloses the range).
    """

    model_config = ConfigDict(frozen=True)

    context: EnclosingContext | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_exclusive(self) -> Self:
        if self.context is not None and self.error is not None:
            raise ValueError("A result cannot carry both a context and an error")
        return self

    @property
    def found(self) -> bool:
        return self.context is not None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def status(self) -> str:
        if self.context is not None:
            return "found"
        if self.error is not None:
            return "error"
        return "none"


class ValidityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str = ""
