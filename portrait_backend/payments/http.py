"""
Appels HTTP sortants vers les fournisseurs de paiement (requests).

Traduit les exceptions requests en ProviderNetworkError en distinguant:
- connexion jamais établie (timeout de connexion, refus, DNS) -> retryable
- tout le reste (connexion coupée après envoi, timeout de lecture...) -> terminal,
  le fournisseur a pu recevoir la requête
Les réponses HTTP (y compris 4xx/5xx) sont renvoyées telles quelles à l'adaptateur.
"""
import logging

import requests
from urllib3.exceptions import NewConnectionError

from portrait_backend import config
from .base import ProviderNetworkError

logger = logging.getLogger(__name__)


def request_never_sent(error: requests.exceptions.ConnectionError) -> bool:
    """
    Vrai si aucune requête n'a pu atteindre le fournisseur.
    NameResolutionError (urllib3 2.x) hérite de NewConnectionError.
    """
    if isinstance(error, requests.exceptions.ConnectTimeout):
        return True
    cause = error.args[0] if error.args else None
    # requests enveloppe MaxRetryError, dont 'reason' porte l'erreur urllib3 d'origine
    reason = getattr(cause, "reason", cause)
    return isinstance(reason, NewConnectionError)


def send(method: str, url: str, **kwargs) -> requests.Response:
    kwargs.setdefault("timeout", config.PROVIDER_TIMEOUT_SECONDS)
    try:
        return requests.request(method, url, **kwargs)
    except requests.exceptions.ReadTimeout as e:
        logger.warning("payments.http %s %s read timeout", method, url)
        raise ProviderNetworkError(f"Provider timeout: {e}", retryable=False) from e
    except requests.exceptions.ConnectionError as e:
        retryable = request_never_sent(e)
        logger.warning("payments.http %s %s connection error retryable=%s", method, url, retryable)
        raise ProviderNetworkError(f"Provider connection error: {e}", retryable=retryable) from e
    except requests.exceptions.RequestException as e:
        logger.warning("payments.http %s %s request error", method, url)
        raise ProviderNetworkError(f"Provider request error: {e}", retryable=False) from e
