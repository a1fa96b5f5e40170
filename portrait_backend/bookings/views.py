import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from portrait_backend.notifications.tasks import PostCommitTasks
from portrait_backend.utils.rate_limit import optional_rate_limit
from . import service
from .models import BookingFields, ConfirmedBookingRequest, DraftBookingRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/booking", tags=["Bookings API"])


@router.post("/create-confirmed", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_confirmed(payload: ConfirmedBookingRequest, background: BackgroundTasks):
    """
    Enregistre une réservation déjà payée (Iyzico initialisé côté client ou commande
    Turinvoice payée). E-mail, audience et événement Facebook partent après la réponse.
    """
    tasks = PostCommitTasks()
    result = service.create_confirmed_booking(payload, tasks)
    tasks.dispatch(background)
    return result


@router.post("/create-draft", dependencies=[Depends(optional_rate_limit(times=20, seconds=60))])
def create_draft(payload: DraftBookingRequest):
    return service.create_draft(payload)


@router.post("", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_booking(payload: BookingFields):
    # Demande sans paiement: statut 'pending'
    return service.create_pending_booking(payload)
