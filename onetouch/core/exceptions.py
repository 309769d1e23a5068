import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# ==================== ERRORES DE DOMINIO ====================

class AppError(HTTPException):
    """
    Base error for the business operations.

    `detail` becomes the `error` field of the response body and every keyword
    passed as `extra` is merged next to it.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **extra: Any):
        super().__init__(status_code=self.status_code, detail=message)
        self.extra = extra

class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

class ConflictError(AppError):
    """Deletion blocked by rows that still reference the target"""
    status_code = status.HTTP_400_BAD_REQUEST

class InsufficientStockError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, available: int, requested: int):
        super().__init__("Insufficient stock", available=available, requested=requested)
        self.available = available
        self.requested = requested

class UnexpectedError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

# ==================== HANDLERS ====================

def setup_exception_handlers(app: FastAPI):
    """Render every error as a JSON body with an `error` key"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, **exc.extra}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.warning(f"Route not found: {request.method} {request.url.path}")
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": "Route not found",
                    "path": request.url.path,
                    "method": request.method
                }
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "Invalid request body",
                "details": jsonable_encoder(exc.errors())
            }
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"}
        )
