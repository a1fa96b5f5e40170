"""
Registre central des routers.
- API: bookings, payments, cron (relance des brouillons)
- Health: health_router
"""
from fastapi import FastAPI
from portrait_backend.bookings.views import router as bookings_router
from portrait_backend.payments.views import router as payments_router
from portrait_backend.recovery.views import router as recovery_router
from portrait_backend.health.router import router as health_router


def register_routers(app: FastAPI) -> None:
    app.include_router(bookings_router)
    app.include_router(payments_router)
    app.include_router(recovery_router)
    # Health & monitoring
    app.include_router(health_router)
