"""
Gestionnaires d'exceptions: traduit la taxonomie AppError en réponses JSON {error, ...}.
- 429: en-têtes Retry-After et X-RateLimit-Reset
- 402: errorCode, category, suggestion
- RequestValidationError: 400 "Invalid request data" (détails hors production uniquement)
- toute autre exception: 500 avec message assaini
"""
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portrait_backend import config
from portrait_backend.utils.errors import (
    AppError,
    PaymentError,
    RateLimitError,
    ValidationError,
    log_error,
    sanitize_error_for_production,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        content = {"error": sanitize_error_for_production(exc)}
        headers = {}
        if isinstance(exc, ValidationError) and exc.details is not None and config.IS_DEVELOPMENT:
            content["details"] = exc.details
        if isinstance(exc, PaymentError):
            content.update({
                "errorCode": exc.error_code,
                "category": exc.category,
                "suggestion": exc.suggestion,
            })
        if isinstance(exc, RateLimitError):
            logger.warning("rate limit exceeded path=%s", request.url.path)
            headers["Retry-After"] = str(exc.retry_after)
            if exc.reset_time is not None:
                headers["X-RateLimit-Reset"] = str(exc.reset_time)
        return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(content), headers=headers or None)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        content = {"error": "Invalid request data"}
        if config.IS_DEVELOPMENT:
            content["details"] = exc.errors()
        return JSONResponse(status_code=400, content=jsonable_encoder(content))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        log_error(exc, {"action": "unexpected_error", "path": request.url.path})
        return JSONResponse(status_code=500, content={"error": sanitize_error_for_production(exc)})
