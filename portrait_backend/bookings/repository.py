"""
Accès aux données pour la feature 'bookings' (tables bookings, payments, customers).

- upsert_customer / insert_payment: échec journalisé, jamais bloquant (retour None)
- create_or_update_booking: lève DatabaseConnectionError en cas d'échec
- Aucune règle d'ordonnancement ici: l'orchestrateur décide quoi persister et quand
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
import logging

import portrait_backend.infra.supabase_client as supabase_client
from portrait_backend.utils.errors import DatabaseConnectionError, handle_supabase_error, log_error
from .models import BookingStatus, can_transition

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _first(res) -> Optional[dict]:
    rows = res.data or []
    if isinstance(rows, list):
        return rows[0] if rows else None
    return rows or None


def upsert_customer(email: str, name: str, phone: str) -> Optional[dict]:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("customers")
            .upsert({"email": email, "name": name, "phone": phone}, on_conflict="email")
            .execute()
        )
        return _first(res)
    except Exception as e:
        log_error(e, {"action": "customer_upsert", "details": handle_supabase_error(e)})
        return None


def get_booking(booking_id: str) -> Optional[dict]:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("bookings")
            .select("*")
            .eq("id", booking_id)
            .limit(1)
            .execute()
        )
        return _first(res)
    except Exception:
        logger.exception("bookings.repository.get_booking failed booking_id=%s", booking_id)
        return None


def insert_booking(fields: Dict[str, Any]) -> dict:
    try:
        res = supabase_client.get_service_supabase().table("bookings").insert(fields).execute()
    except Exception as e:
        log_error(e, {"action": "booking_insert", "details": handle_supabase_error(e)})
        raise DatabaseConnectionError() from e
    row = _first(res)
    if row is None:
        raise DatabaseConnectionError()
    return row


def update_booking(booking_id: str, fields: Dict[str, Any]) -> dict:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("bookings")
            .update({**fields, "updated_at": _now_iso()})
            .eq("id", booking_id)
            .execute()
        )
    except Exception as e:
        log_error(e, {"action": "booking_update", "booking_id": booking_id, "details": handle_supabase_error(e)})
        raise DatabaseConnectionError() from e
    row = _first(res)
    if row is None:
        raise DatabaseConnectionError()
    return row


def create_or_update_booking(booking_id: Optional[str], fields: Dict[str, Any]) -> dict:
    """
    Chemin « update » si une réservation existe déjà pour booking_id (brouillon d'une étape
    antérieure du tunnel), chemin « insert » sinon. Retourne la ligne persistée.
    Une réservation existante dont le statut ne peut pas avancer vers le statut demandé
    n'est jamais modifiée: une nouvelle ligne est insérée.
    """
    if booking_id:
        existing = get_booking(booking_id)
        target = fields.get("status")
        if existing is not None and (target is None or can_transition(existing.get("status", ""), target)):
            return update_booking(booking_id, fields)
        logger.info("bookings.repository booking_id=%s not updatable, inserting a new booking", booking_id)
    return insert_booking(fields)


def insert_payment(booking_id: str, fields: Dict[str, Any]) -> Optional[dict]:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("payments")
            .insert({**fields, "booking_id": booking_id})
            .execute()
        )
        return _first(res)
    except Exception as e:
        log_error(e, {"action": "payment_insert", "booking_id": booking_id, "details": handle_supabase_error(e)})
        return None


def find_recent_duplicate(email: str, package_id: str, booking_date: str, booking_time: str, minutes: int = 5) -> bool:
    since = (datetime.now(timezone.utc) - timedelta(minutes=minutes)).isoformat()
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("bookings")
            .select("id")
            .eq("user_email", email)
            .eq("package_id", package_id)
            .eq("booking_date", booking_date)
            .eq("booking_time", booking_time)
            .gte("created_at", since)
            .execute()
        )
        return bool(res.data)
    except Exception:
        logger.exception("bookings.repository.find_recent_duplicate failed email=%s", email)
        return False


def find_payment_by_order(provider: str, order_id: str) -> Optional[dict]:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("payments")
            .select("*")
            .eq("provider", provider)
            .eq("conversation_id", str(order_id))
            .limit(1)
            .execute()
        )
    except Exception as e:
        log_error(e, {"action": "payment_lookup", "order_id": order_id})
        raise DatabaseConnectionError() from e
    return _first(res)


def update_payment(payment_id: str, fields: Dict[str, Any]) -> None:
    try:
        (
            supabase_client.get_service_supabase()
            .table("payments")
            .update({**fields, "updated_at": _now_iso()})
            .eq("id", payment_id)
            .execute()
        )
    except Exception as e:
        log_error(e, {"action": "payment_update", "payment_id": payment_id})
        raise DatabaseConnectionError() from e


# --- job de relance des brouillons abandonnés ---

def fetch_abandoned_drafts(now: datetime, min_age_hours: int = 4, max_age_hours: int = 24) -> List[dict]:
    """Brouillons non relancés créés dans la fenêtre ]now-24h, now-4h[."""
    older_than = (now - timedelta(hours=min_age_hours)).isoformat()
    newer_than = (now - timedelta(hours=max_age_hours)).isoformat()
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("bookings")
            .select("*")
            .eq("status", BookingStatus.DRAFT.value)
            .eq("abandoned_email_sent", False)
            .lt("created_at", older_than)
            .gt("created_at", newer_than)
            .execute()
        )
    except Exception as e:
        log_error(e, {"action": "fetch_abandoned_drafts"})
        raise DatabaseConnectionError() from e
    return res.data or []


def has_later_conversion(email: str, created_after: str) -> bool:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("bookings")
            .select("id")
            .eq("user_email", email)
            .neq("status", BookingStatus.DRAFT.value)
            .gt("created_at", created_after)
            .limit(1)
            .execute()
        )
    except Exception as e:
        log_error(e, {"action": "conversion_check", "email": email})
        raise DatabaseConnectionError() from e
    return bool(res.data)


def mark_abandoned_email_sent(booking_id: str) -> bool:
    try:
        (
            supabase_client.get_service_supabase()
            .table("bookings")
            .update({"abandoned_email_sent": True, "updated_at": _now_iso()})
            .eq("id", booking_id)
            .execute()
        )
        return True
    except Exception:
        logger.exception("bookings.repository.mark_abandoned_email_sent failed booking_id=%s", booking_id)
        return False
