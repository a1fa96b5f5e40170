"""
Relance des réservations abandonnées (brouillons), déclenchée par un planificateur externe.

Pour chaque brouillon non relancé créé entre now-24h et now-4h:
- une réservation non-brouillon plus récente existe pour le même e-mail
  -> marqué relancé sans envoi (already_converted)
- sinon e-mail localisé puis marquage (sent); échec d'envoi -> failed, non marqué
L'envoi et le marquage ne sont pas transactionnels: un brouillon peut être relancé
deux fois si le marquage échoue après l'envoi.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from portrait_backend.bookings import repository
from portrait_backend.notifications import email as email_notifications
from portrait_backend.utils.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

STATUS_SENT = "sent"
STATUS_FAILED = "failed"
STATUS_ALREADY_CONVERTED = "already_converted"

NO_DRAFTS_MESSAGE = "No abandoned drafts found"


def process_draft(draft: Dict[str, Any]) -> Dict[str, Any]:
    draft_id = draft.get("id")
    try:
        converted = repository.has_later_conversion(draft["user_email"], draft["created_at"])
    except DatabaseConnectionError as e:
        return {"id": draft_id, "status": STATUS_FAILED, "error": e.message}
    if converted:
        repository.mark_abandoned_email_sent(draft_id)
        return {"id": draft_id, "status": STATUS_ALREADY_CONVERTED}

    try:
        data = email_notifications.send_recovery_email(draft)
    except Exception as e:
        logger.exception("recovery: e-mail failed draft_id=%s", draft_id)
        return {"id": draft_id, "status": STATUS_FAILED, "error": str(e)}

    if not repository.mark_abandoned_email_sent(draft_id):
        logger.warning("recovery: e-mail sent but flag not updated draft_id=%s", draft_id)
    logger.info("recovery: e-mail sent draft_id=%s locale=%s", draft_id, draft.get("locale"))
    return {"id": draft_id, "status": STATUS_SENT, "emailId": data.get("id")}


def run_abandoned_recovery(now: Optional[datetime] = None) -> Dict[str, Any]:
    drafts = repository.fetch_abandoned_drafts(now or datetime.now(timezone.utc))
    if not drafts:
        return {"message": NO_DRAFTS_MESSAGE}

    processed: List[Dict[str, Any]] = [process_draft(draft) for draft in drafts]
    return {"success": True, "processed": processed}
