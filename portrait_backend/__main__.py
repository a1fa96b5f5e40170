"""
Lancement local: python -m portrait_backend

- PORT (8000 par défaut), LOG_LEVEL (info)
- UVICORN_RELOAD: "1"/"true"/"yes"; par défaut actif hors production
"""
import os

import uvicorn

from portrait_backend import config


def _reload_enabled() -> bool:
    raw = os.environ.get("UVICORN_RELOAD")
    if raw is None:
        return config.IS_DEVELOPMENT
    return raw.lower() in ("1", "true", "yes")


if __name__ == "__main__":
    uvicorn.run(
        "portrait_backend.asgi:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 8000)),
        reload=_reload_enabled(),
        log_level=os.environ.get("LOG_LEVEL", "info"),
    )
