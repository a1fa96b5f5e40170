"""
Rate limiting par fenêtre glissante stocké en base (table 'rate_limits').

- Cohérent entre instances (pas d'état en mémoire)
- Fail open: toute erreur du stockage laisse passer la requête
- optional_rate_limit(times, seconds): dépendance FastAPI, respecte app.state.rate_limit_enabled
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging
import math
import time

from fastapi import Request

import portrait_backend.infra.supabase_client as supabase_client
from portrait_backend.utils.errors import RateLimitError

logger = logging.getLogger(__name__)

TABLE = "rate_limits"


def get_client_ip(request: Request) -> str:
    """
    IP client derrière proxy/CDN:
    x-forwarded-for (premier élément), puis cf-connecting-ip, puis x-real-ip.
    """
    forwarded = (request.headers.get("x-forwarded-for") or "").split(",")[0].strip()
    return (
        forwarded
        or request.headers.get("cf-connecting-ip")
        or request.headers.get("x-real-ip")
        or "127.0.0.1"
    )


def _allow(max_requests: int, window_seconds: int, count: int = 0, window_start_ms: Optional[float] = None) -> Dict[str, Any]:
    now_ms = time.time() * 1000
    base = window_start_ms if window_start_ms is not None else now_ms
    return {
        "success": True,
        "remaining": max(0, max_requests - count - 1),
        "reset_time": int(base + window_seconds * 1000),
    }


def check_rate_limit(identifier: str, max_requests: int = 10, window_seconds: int = 60) -> Dict[str, Any]:
    """
    Incrémente le compteur de l'identifiant dans la fenêtre courante.
    Retour: {success, remaining, reset_time (ms epoch)}.
    """
    try:
        client = supabase_client.get_service_supabase()
        now = datetime.now(timezone.utc)
        window_start = now - timedelta(seconds=window_seconds)

        # Purge des fenêtres expirées
        client.table(TABLE).delete().lt("window_start", window_start.isoformat()).execute()

        res = (
            client.table(TABLE)
            .select("*")
            .eq("identifier", identifier)
            .gte("window_start", window_start.isoformat())
            .limit(1)
            .execute()
        )
        rows = res.data or []
        if not rows:
            client.table(TABLE).insert(
                {"identifier": identifier, "count": 1, "window_start": now.isoformat()}
            ).execute()
            return _allow(max_requests, window_seconds)

        record = rows[0]
        count = int(record.get("count") or 0)
        record_start_ms = datetime.fromisoformat(str(record["window_start"]).replace("Z", "+00:00")).timestamp() * 1000
        if count >= max_requests:
            return {
                "success": False,
                "remaining": 0,
                "reset_time": int(record_start_ms + window_seconds * 1000),
            }

        client.table(TABLE).update(
            {"count": count + 1, "updated_at": now.isoformat()}
        ).eq("id", record.get("id")).execute()
        return _allow(max_requests, window_seconds, count=count, window_start_ms=record_start_ms)
    except Exception:
        logger.warning("rate_limit.check_rate_limit failed open identifier=%s", identifier, exc_info=True)
        return _allow(max_requests, window_seconds)


def optional_rate_limit(times: int, seconds: int, scope: Optional[str] = None):
    def _dep(request: Request):
        # Respecter le flag global
        if getattr(request.app.state, "rate_limit_enabled", None) is False:
            return
        identifier = f"{get_client_ip(request)}:{scope or request.url.path}"
        result = check_rate_limit(identifier, max_requests=times, window_seconds=seconds)
        if not result["success"]:
            reset_time = result["reset_time"]
            retry_after = max(1, math.ceil((reset_time - time.time() * 1000) / 1000))
            raise RateLimitError(retry_after=retry_after, reset_time=reset_time)
    return _dep


def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "backend": "supabase",
        "table": TABLE,
        "fail_open": True,
    }
