import hmac
from typing import Optional

from fastapi import APIRouter, Header

from portrait_backend import config
from portrait_backend.utils.errors import AuthenticationError
from . import service

router = APIRouter(prefix="/api/cron", tags=["Cron"])


def _check_cron_secret(authorization: Optional[str]) -> None:
    # Sans CRON_SECRET configuré, le déclenchement reste ouvert
    if not config.CRON_SECRET:
        return
    expected = f"Bearer {config.CRON_SECRET}"
    if not authorization or not hmac.compare_digest(authorization, expected):
        raise AuthenticationError()


@router.get("/abandoned-recovery")
def abandoned_recovery(authorization: Optional[str] = Header(default=None)):
    _check_cron_secret(authorization)
    return service.run_abandoned_recovery()
