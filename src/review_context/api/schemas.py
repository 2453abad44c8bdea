from __future__ import annotations

from pydantic import BaseModel, Field

from review_context.core.diff import Hunk
from review_context.models import EnclosingContext


class HealthResponse(BaseModel):
    status: str = "ok"


class ContextRequest(BaseModel):
    code: str
    language: str
    start_line: int
    end_line: int | None = None


class ContextResponse(BaseModel):
    """``status`` is ``found``, ``none`` or ``error``."""

    status: str
    context: EnclosingContext | None = None
    error: str | None = None


class ValidateRequest(BaseModel):
    code: str
    language: str


class HunksRequest(BaseModel):
    code: str
    language: str
    patch: str


class HunkContextResponse(BaseModel):
    hunk: Hunk
    status: str
    context: EnclosingContext | None = None
    error: str | None = None


class LanguageResponse(BaseModel):
    language: str
    definition_types: list[str] = Field(default_factory=list)
