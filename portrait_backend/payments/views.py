"""
Routes HTTP des paiements: checkout complet, initialisations par fournisseur,
statut et webhook Turinvoice.
"""
import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request

from portrait_backend.bookings import service as booking_service
from portrait_backend.bookings.models import (
    CheckoutRequest,
    PaymentInitRequest,
    TurinvoiceInitRequest,
    TurinvoiceWebhook,
)
from portrait_backend.notifications.tasks import PostCommitTasks
from portrait_backend.utils.rate_limit import get_client_ip, optional_rate_limit

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])


@router.post("/checkout", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def checkout(payload: CheckoutRequest, request: Request, background: BackgroundTasks):
    """
    Tentative de paiement complète en un appel.
    - iyzico: débit carte du total, réservation confirmée en réponse
    - turinvoice: commande de l'acompte, réponse 'pending' avec l'URL de paiement
    """
    tasks = PostCommitTasks()
    result = booking_service.checkout(payload, get_client_ip(request), tasks)
    tasks.dispatch(background)
    return result


@router.post("/payment/initialize", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def initialize_card_payment(payload: PaymentInitRequest, request: Request):
    return booking_service.initialize_card_payment(payload, get_client_ip(request))


@router.post("/payment/initialize/turinvoice", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def initialize_turinvoice_payment(payload: TurinvoiceInitRequest, request: Request):
    return booking_service.initialize_turinvoice_payment(payload, get_client_ip(request))


@router.get("/payment/status/turinvoice")
def turinvoice_status(id_order: Optional[str] = Query(default=None, alias="idOrder")):
    return booking_service.turinvoice_status(id_order)


@router.post("/payment/webhook/turinvoice")
def turinvoice_webhook(payload: TurinvoiceWebhook, background: BackgroundTasks):
    tasks = PostCommitTasks()
    result = booking_service.handle_turinvoice_webhook(payload, tasks)
    tasks.dispatch(background)
    return result
