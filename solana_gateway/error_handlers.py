"""
Error handlers for the API
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solana_gateway.logging_config import get_logger

logger = get_logger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten validation errors into one message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers for the application"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions"""
        logger.warning(
            "HTTP exception",
            status_code=exc.status_code,
            detail=str(exc.detail),
            path=request.url.path
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle requests rejected before reaching a handler"""
        message = format_validation_errors(exc)
        logger.info("Request rejected", detail=message, path=request.url.path)
        return JSONResponse(status_code=422, content={"error": message})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all uncaught exceptions"""
        logger.exception(
            "Uncaught exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method
        )
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) if app.debug else "Internal server error"}
        )
