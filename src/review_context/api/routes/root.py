from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Review Context API",
            "description": "Find the function or class that encloses a changed line range.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "context": "/context",
            "validate": "/validate",
            "hunks": "/hunks",
            "languages": "/languages",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
