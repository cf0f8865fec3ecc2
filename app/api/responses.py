"""Response envelope and exception-to-envelope translation"""
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Optional
import logging

from app.config import settings
from app.schemas.common import ApiResponse
from app.services.asset_service import (
    AssetServiceError,
    AssetValidationError,
    AssetNotFoundError,
    AssetConflictError,
)

logger = logging.getLogger(__name__)


def envelope(message: str, data: Any = None) -> ApiResponse:
    """Wrap a successful payload"""
    return ApiResponse(success=True, message=message, data=data)


def error_body(message: str, error: Optional[str] = None) -> dict:
    return {
        "success": False,
        "message": message,
        "data": None,
        "error": error or "",
    }


def service_error(message: str, exc: AssetServiceError) -> HTTPException:
    """Map an asset store failure onto an HTTPException carrying the envelope detail"""
    if isinstance(exc, AssetValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, AssetNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        message = "Asset not found"
    elif isinstance(exc, AssetConflictError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(
        status_code=status_code,
        detail={
            "message": message,
            "error": str(exc),
        },
    )


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTPException details inside the envelope"""
        if isinstance(exc.detail, dict):
            body = error_body(exc.detail.get("message", "Request failed"), exc.detail.get("error"))
        else:
            body = error_body(str(exc.detail))

        return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))

    # Validation error handler - invalid payloads are client errors (400)
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed messages"""
        errors = []
        for error in exc.errors():
            field = " -> ".join(str(loc) for loc in error["loc"] if loc != "body")
            errors.append(f"{field}: {error['msg']}" if field else error["msg"])

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(error_body("Invalid request data", "; ".join(errors))),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions"""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                "An internal server error occurred",
                str(exc) if settings.DEBUG else "Internal Server Error",
            ),
        )
