from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from portrait_backend.health import service
from portrait_backend.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_root():
    return {"ok": True}


@router.get("/supabase")
def health_supabase(request: Request):
    info = service.health_supabase_info()
    info["rate_limit"] = rate_limit_health_info(request)
    return JSONResponse(info)
