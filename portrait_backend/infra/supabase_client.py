"""
Clients Supabase partagés (créés au premier appel).

Les dépôts passent par get_service_supabase(): les écritures serveur
(réservations, paiements, clients, compteurs de rate limit) ne dépendent pas des RLS.
"""
import logging
from typing import Optional

from supabase import Client, create_client

from portrait_backend import config

logger = logging.getLogger(__name__)

_supabase: Optional[Client] = None
_service_supabase: Optional[Client] = None


def _create(key: str, role: str) -> Client:
    logger.info("supabase: creating %s client for %s", role, config.SUPABASE_URL or "<unset>")
    return create_client(config.SUPABASE_URL, key)


def get_supabase() -> Client:
    global _supabase
    if _supabase is None:
        _supabase = _create(config.SUPABASE_ANON, "anon")
    return _supabase


def get_service_supabase() -> Client:
    """Client service-role; retombe sur le client anon sans clé service."""
    global _service_supabase
    if not config.SUPABASE_SERVICE_KEY:
        return get_supabase()
    if _service_supabase is None:
        _service_supabase = _create(config.SUPABASE_SERVICE_KEY, "service-role")
    return _service_supabase
