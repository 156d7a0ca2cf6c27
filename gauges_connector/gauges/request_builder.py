# gauges_connector/gauges/request_builder.py

from typing import Any, Dict, Optional, Protocol

import httpx

from gauges_connector.core.exceptions import InvalidMethodError
from gauges_connector.core.httpx_client import HTTPClient

GAUGES_URL = "https://secure.gaug.es"
TOKEN_HEADER = "X-Gauges-Token"
ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")


class DebugLogger(Protocol):
    """Tout objet exposant debug(message), ex: un logging.Logger."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> Any:
        ...


class RequestBuilder:
    """
    Construit et envoie un appel authentifié vers l'API Gauges.

    Le token, l'URL de base et les options HTTP sont fixés à la construction.
    La réponse httpx est retournée telle quelle: un statut != 200 n'est pas
    une erreur à ce niveau.
    """

    def __init__(self, token: str, http_client: HTTPClient, logger: Optional[DebugLogger] = None):
        self._token = token
        self.http = http_client
        self.logger = logger

    @property
    def token(self) -> str:
        return self._token

    @staticmethod
    def _validate_method(method: str) -> str:
        method = (method or "").upper()
        if method not in ALLOWED_METHODS:
            raise InvalidMethodError(f"Invalid method: {method}")
        return method

    @staticmethod
    def _normalize_path(path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return path

    def call(self, operation_name: str, method: str, path: str,
             params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """
        :param operation_name: nom de l'opération appelante (utilisé pour le log)
        :param method: GET, POST, PUT ou DELETE (insensible à la casse)
        :param path: chemin relatif à GAUGES_URL (ex: "gauges/42")
        :param params: paramètres de query string, quel que soit le verbe
        :return: la réponse httpx brute
        """
        method = self._validate_method(method)
        path = self._normalize_path(path)

        # L'API accepte les paramètres en query string même pour POST/PUT/DELETE:
        # aucun body n'est envoyé.
        response = self.http.send(
            method,
            path,
            headers={TOKEN_HEADER: self._token},
            params=dict(params or {}),
        )

        if self.logger is not None:
            if response.status_code == 200:
                message = "successful."
            else:
                message = f"unsuccessful. (status={response.status_code})"

            self.logger.debug(f"Gauges ({GAUGES_URL}): {operation_name} request {message}")

        return response
