"""
Taxonomie d'erreurs de l'API de réservation.

- AppError: base (message, status_code, code, is_operational)
- ValidationError 400, AuthenticationError 401, PaymentError 402, ConflictError 409,
  RateLimitError 429, DatabaseConnectionError 503, PaymentProviderUnavailableError 503
- sanitize_error_for_production: jamais de détail interne côté client en production
- handle_supabase_error / log_error: normalisation et journalisation
"""
import logging
from typing import Any, Dict, Optional

from portrait_backend import config

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"


class AppError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: Optional[str] = None,
        is_operational: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.is_operational = is_operational


class ValidationError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, 400, "VALIDATION_ERROR")
        self.details = details


class AuthenticationError(AppError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, 401, "AUTHENTICATION_ERROR")


class PaymentError(AppError):
    """
    Échec métier déclaré par le fournisseur (fonds insuffisants, carte refusée...).
    Porte le message localisé, la suggestion et la catégorie issus de la table d'erreurs.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        category: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        super().__init__(message, 402, "PAYMENT_ERROR")
        self.error_code = error_code
        self.category = category
        self.suggestion = suggestion


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(message, 409, "CONFLICT")


class RateLimitError(AppError):
    def __init__(self, retry_after: int, reset_time: Optional[int] = None):
        super().__init__("Too many requests. Please try again later.", 429, "RATE_LIMIT_EXCEEDED")
        self.retry_after = retry_after
        self.reset_time = reset_time


class DatabaseConnectionError(AppError):
    def __init__(self, message: str = "Database connection failed. Please try again later."):
        super().__init__(message, 503, "DATABASE_CONNECTION_ERROR")


class PaymentProviderUnavailableError(AppError):
    def __init__(self, message: str = "Payment provider is temporarily unavailable. Please try again later."):
        super().__init__(message, 503, "PAYMENT_PROVIDER_UNAVAILABLE")


def sanitize_error_for_production(error: BaseException) -> str:
    if isinstance(error, AppError) and error.is_operational:
        return error.message
    if config.IS_DEVELOPMENT:
        return str(error) or GENERIC_ERROR_MESSAGE
    return GENERIC_ERROR_MESSAGE


def handle_supabase_error(error: Any) -> Dict[str, Any]:
    """
    Normalise une erreur Supabase/PostgREST en {message, code, details}.
    Accepte une exception APIError (attributs message/code/details) ou un dict brut.
    """
    if isinstance(error, dict):
        return {
            "message": error.get("message") or GENERIC_ERROR_MESSAGE,
            "code": error.get("code"),
            "details": error.get("details"),
        }
    return {
        "message": getattr(error, "message", None) or str(error) or GENERIC_ERROR_MESSAGE,
        "code": getattr(error, "code", None),
        "details": getattr(error, "details", None),
    }


def log_error(error: BaseException, context: Optional[Dict[str, Any]] = None) -> None:
    context = context or {}
    if config.IS_DEVELOPMENT:
        logger.error("error=%s context=%s", error, context, exc_info=error)
    else:
        logger.error("error=%s action=%s", error, context.get("action"))
