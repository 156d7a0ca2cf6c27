import httpx
from typing import Any, Dict, Mapping, Optional

from .logger import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """Client HTTP synchrone basé sur httpx pour les appels API externes."""

    def __init__(self, base_url: str,
                 http_defaults: Optional[Mapping[str, Any]] = None,
                 transport: Optional[httpx.BaseTransport] = None,
                 event_hooks: Optional[Dict[str, list]] = None):
        self.base_url = base_url.rstrip("/")
        # Les options (proxy, timeout, verify...) sont transmises telles quelles à httpx
        self.http_defaults = dict(http_defaults or {})
        # L'URL de base reste fixe: elle ne peut pas être surchargée par les options
        options = {**self.http_defaults, "base_url": self.base_url,
                   "transport": transport, "event_hooks": event_hooks}
        self._client = httpx.Client(**options)

    def send(self, method: str, path: str,
             headers: Optional[Dict[str, str]] = None,
             params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """
        Envoie une requête et retourne la réponse brute.
        Aucun code de statut n'est interprété ici, et les erreurs httpx
        (connexion, DNS, timeout) remontent directement à l'appelant.
        """
        logger.debug(f"➡️ {method} {self.base_url}{path} | params={params}")
        response = self._client.request(method, path, headers=headers, params=params)
        logger.debug(f"⬅️ Response {response.status_code}")
        return response

    def close(self) -> None:
        """Fermeture propre de la connexion."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
