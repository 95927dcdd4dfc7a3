from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.errors import JournalAPIError
from app.core.logging import setup_logging

from app.api.v1.health import router as health_router
from app.api.v1.generate import router as generate_router

logger = setup_logging()

async def _journal_error_handler(request: Request, exc: JournalAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    else:
        logger.info("{} {} rejected ({}): {}", request.method, request.url.path, exc.kind.value, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)

    app.add_exception_handler(JournalAPIError, _journal_error_handler)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(generate_router, prefix="/api/v1")

    return app

app = create_app()
