from __future__ import annotations

from fastapi import FastAPI

from review_context.api.routes.context import router as context_router
from review_context.api.routes.health import router as health_router
from review_context.api.routes.root import router as root_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Review Context API",
        description="Find the function or class that encloses a changed line range.",
        version="0.1.0",
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(context_router)

    return app
