from fastapi import APIRouter, HTTPException

from review_context.api.schemas import (
    ContextRequest,
    ContextResponse,
    HunkContextResponse,
    HunksRequest,
    LanguageResponse,
    ValidateRequest,
)
from review_context.core.context import check_source, find_context_in_source, hunk_contexts_in_source
from review_context.core.languages import DEFINITION_NODE_TYPES, supported_languages
from review_context.models import ValidityResult

router = APIRouter(tags=["context"])


@router.post("/context", response_model=ContextResponse)
def find_context(body: ContextRequest) -> ContextResponse:
    try:
        result = find_context_in_source(body.code, body.language, body.start_line, body.end_line)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None
    return ContextResponse(status=result.status, context=result.context, error=result.error)


@router.post("/validate", response_model=ValidityResult)
def validate(body: ValidateRequest) -> ValidityResult:
    try:
        return check_source(body.code, body.language)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None


@router.post("/hunks", response_model=list[HunkContextResponse])
def hunks(body: HunksRequest) -> list[HunkContextResponse]:
    try:
        results = hunk_contexts_in_source(body.code, body.language, body.patch)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None
    return [
        HunkContextResponse(
            hunk=item.hunk,
            status=item.result.status,
            context=item.result.context,
            error=item.result.error,
        )
        for item in results
    ]


@router.get("/languages", response_model=list[LanguageResponse])
def languages() -> list[LanguageResponse]:
    return [
        LanguageResponse(language=name, definition_types=sorted(DEFINITION_NODE_TYPES[name]))
        for name in supported_languages()
    ]
