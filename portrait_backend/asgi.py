"""
ASGI entrypoint: expose `app` pour les process managers / déploiements
(ex: uvicorn portrait_backend.asgi:app).
"""

from portrait_backend.app import app
