# module portrait_backend.app
from portrait_backend.app_setup.factory import create_app

# App globale
app = create_app()
