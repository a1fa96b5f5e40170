# portrait_backend.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"

"""
Configuration centrale du backend de réservation.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs (Supabase, Iyzico, Turinvoice, Resend, Facebook)
- Expose les paramètres de conversion de devise et de timeouts fournisseurs
- Les identifiants manquants ne font jamais échouer l'import
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _float_env(name: str, default: float) -> float:
    raw = _clean_env(os.getenv(name) or "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default

# Environnement: les détails d'erreurs ne sont renvoyés qu'en développement
APP_ENV = _clean_env(os.getenv("APP_ENV") or "development").lower()
IS_DEVELOPMENT = APP_ENV != "production"

# Supabase: URLs et clés (anon/service)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL") or "")
SUPABASE_ANON = _clean_env(os.getenv("SUPABASE_ANON_KEY") or os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY") or "")
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_SERVICE_ROLE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Iyzico (paiement carte). Sans clés: mode démo.
IYZICO_BASE_URL = _clean_env(os.getenv("IYZICO_BASE_URL") or "https://sandbox-api.iyzipay.com").rstrip("/")
IYZICO_API_KEY = _clean_env(os.getenv("IYZICO_API_KEY") or "")
IYZICO_SECRET_KEY = _clean_env(os.getenv("IYZICO_SECRET_KEY") or "")
IYZICO_IDENTITY_NUMBER = _clean_env(os.getenv("IYZICO_IDENTITY_NUMBER") or "11111111111")

# Turinvoice (facture en TRY)
TURINVOICE_BASE_URL = _clean_env(os.getenv("TURINVOICE_BASE_URL") or "https://my.turinvoice.com").rstrip("/")
TURINVOICE_LOGIN = _clean_env(os.getenv("TURINVOICE_LOGIN") or "")
TURINVOICE_PASSWORD = _clean_env(os.getenv("TURINVOICE_PASSWORD") or "")
TURINVOICE_ID_TSP = _clean_env(os.getenv("TURINVOICE_ID_TSP") or "")
TURINVOICE_SECRET_KEY = _clean_env(os.getenv("TURINVOICE_SECRET_KEY") or "")
TURINVOICE_CALLBACK_URL = _clean_env(os.getenv("TURINVOICE_CALLBACK_URL") or "")

# Timeout HTTP appliqué aux fournisseurs de paiement (secondes)
PROVIDER_TIMEOUT_SECONDS = _float_env("PROVIDER_TIMEOUT_SECONDS", 30.0)

# Conversion EUR -> TRY
EXCHANGE_RATE_API_URL = _clean_env(os.getenv("EXCHANGE_RATE_API_URL") or "https://open.er-api.com/v6/latest/EUR")
EXCHANGE_RATE_FALLBACK = _float_env("EXCHANGE_RATE_FALLBACK", 36.5)
EXCHANGE_RATE_CACHE_SECONDS = int(_float_env("EXCHANGE_RATE_CACHE_SECONDS", 3600))
EXCHANGE_RATE_TIMEOUT_SECONDS = _float_env("EXCHANGE_RATE_TIMEOUT_SECONDS", 5.0)

# Resend (e-mails transactionnels et audience marketing)
RESEND_API_URL = _clean_env(os.getenv("RESEND_API_URL") or "https://api.resend.com").rstrip("/")
RESEND_API_KEY = _clean_env(os.getenv("RESEND_API_KEY") or "")
RESEND_AUDIENCE_ID = _clean_env(os.getenv("RESEND_AUDIENCE_ID") or "")
EMAIL_FROM = os.getenv("EMAIL_FROM", "Photographer in Istanbul <info@istanbulportrait.com>")
RECOVERY_EMAIL_FROM = os.getenv("RECOVERY_EMAIL_FROM", "Istanbul Portrait <info@istanbulportrait.com>")

# Facebook Conversions API
FACEBOOK_GRAPH_URL = _clean_env(os.getenv("FACEBOOK_GRAPH_URL") or "https://graph.facebook.com/v19.0").rstrip("/")
FACEBOOK_ACCESS_TOKEN = _clean_env(os.getenv("FACEBOOK_ACCESS_TOKEN") or "")
FACEBOOK_DATASET_ID = _clean_env(os.getenv("FACEBOOK_DATASET_ID") or "")

# Planificateur (job de relance): secret Bearer optionnel
CRON_SECRET = _clean_env(os.getenv("CRON_SECRET") or "")

# CORS / hôtes
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

BASE_URL = _clean_env(os.getenv("BASE_URL") or os.getenv("NEXT_PUBLIC_APP_URL") or "http://localhost:3000").rstrip("/")
