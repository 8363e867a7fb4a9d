"""
Purpose:
- FastAPI application factory and router mounts.
- Adds CORS for local dev + future domain.
- Uvicorn will serve this on 0.0.0.0:8000 by default (python -m quotegen).
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.settings import settings
from .api.ui import router as ui_router
from .api.caption import router as caption_router
from .api.health import router as health_router
from .generation.schema import ErrorResponse

log = logging.getLogger(__name__)

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # keep the {"error": ...} contract for malformed forms too
    errors = exc.errors()
    detail = errors[0].get("msg") if errors else "Invalid request."
    log.info("Rejected malformed request to %s: %s", request.url.path, detail)
    return JSONResponse(status_code=400, content=ErrorResponse(error=f"Invalid request: {detail}").model_dump())

async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # body-parse failures (e.g. multipart without a boundary) are raised before the route runs
    log.info("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )

def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="AI Quote Generator", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(ui_router)
    app.include_router(caption_router)
    app.include_router(health_router)
    return app


app = create_app()
