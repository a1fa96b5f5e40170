"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Active le rate limiting stocké en base (table rate_limits, fail open).
- Variables d'environnement supportées:
  - DISABLE_RATE_LIMIT_FOR_TESTS=1: désactive complètement (tests)
"""
import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from portrait_backend import config
from portrait_backend.payments import get_provider


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Configure le rate limiting et signale les fournisseurs en mode dégradé.
    Les logs indiquent l'état effectif (enabled/disabled) pour observabilité.
    """
    logger = logging.getLogger("uvicorn.error")
    if os.getenv("DISABLE_RATE_LIMIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_RATE_LIMIT_FOR_TESTS")
    else:
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled (supabase table rate_limits, fail open)")

    if not config.SUPABASE_URL:
        logger.warning("SUPABASE_URL is not configured: database calls will fail")
    if get_provider("iyzico").demo_mode:
        logger.warning("Iyzico API keys not configured: card payments run in demo mode")

    yield
