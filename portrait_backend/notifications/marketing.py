"""
Synchronisation marketing: audience Resend et événements Facebook Conversions API.
Ces appels sont des effets de bord post-paiement: ils retournent un booléen et ne lèvent pas
pour un refus du fournisseur.
"""
import hashlib
import logging
import re
import time
from typing import Any, Dict, List, Optional

import requests

from portrait_backend import config

logger = logging.getLogger(__name__)

MARKETING_TIMEOUT_SECONDS = 10


def hash_customer_data(value: str) -> str:
    """SHA-256 hexadécimal de la valeur normalisée (minuscules, sans espaces autour)."""
    return hashlib.sha256(value.strip().lower().encode("utf-8")).hexdigest()


def hash_phone_number(phone: str) -> str:
    # Indicatif Turquie par défaut
    digits = re.sub(r"\D", "", phone or "")
    if not digits.startswith("90"):
        digits = f"90{digits}"
    return hash_customer_data(digits)


def add_contact_to_audience(email: str, first_name: str = "", last_name: str = "") -> bool:
    if not config.RESEND_API_KEY or not config.RESEND_AUDIENCE_ID:
        logger.info("marketing: Resend audience not configured, contact %s skipped", email)
        return False
    res = requests.post(
        f"{config.RESEND_API_URL}/audiences/{config.RESEND_AUDIENCE_ID}/contacts",
        json={"email": email, "first_name": first_name, "last_name": last_name, "unsubscribed": False},
        headers={"Authorization": f"Bearer {config.RESEND_API_KEY}"},
        timeout=MARKETING_TIMEOUT_SECONDS,
    )
    if not res.ok:
        logger.warning("marketing: audience sync failed status=%s body=%s", res.status_code, res.text[:300])
        return False
    return True


def send_conversion_events(events: List[Dict[str, Any]]) -> bool:
    if not config.FACEBOOK_ACCESS_TOKEN or not config.FACEBOOK_DATASET_ID:
        logger.info("marketing: Facebook Conversions API not configured, %d event(s) skipped", len(events))
        return False
    res = requests.post(
        f"{config.FACEBOOK_GRAPH_URL}/{config.FACEBOOK_DATASET_ID}/events",
        json={"data": events, "access_token": config.FACEBOOK_ACCESS_TOKEN},
        timeout=MARKETING_TIMEOUT_SECONDS,
    )
    if not res.ok:
        logger.error("marketing: Facebook Conversions API error status=%s body=%s", res.status_code, res.text[:300])
        return False
    return True


def build_purchase_event(
    email: str,
    phone: str,
    package_id: str,
    amount: float,
    transaction_id: str,
    event_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Événement Purchase côté serveur.
    event_id reprend l'identifiant du pixel navigateur pour la déduplication.
    """
    event: Dict[str, Any] = {
        "event_name": "Purchase",
        "event_time": int(time.time()),
        "action_source": "website",
        "user_data": {
            "em": [hash_customer_data(email)] if email else [],
            "ph": [hash_phone_number(phone)] if phone else [],
            "external_id": [hash_customer_data(email)] if email else [],
        },
        "custom_data": {
            "event_source": "crm",
            "lead_event_source": "Istanbul Portrait CRM",
            "content_ids": [package_id],
            "content_type": "photography_package",
            "value": float(amount),
            "currency": "EUR",
            "transaction_id": transaction_id,
        },
    }
    if event_id:
        event["event_id"] = event_id
    return event


def track_facebook_purchase(
    email: str,
    phone: str,
    package_id: str,
    amount: float,
    transaction_id: str,
    event_id: Optional[str] = None,
) -> bool:
    event = build_purchase_event(email, phone, package_id, amount, transaction_id, event_id)
    return send_conversion_events([event])
