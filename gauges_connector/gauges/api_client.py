# gauges_connector/gauges/api_client.py

import httpx
from typing import Any, Mapping, Optional

from gauges_connector.core.httpx_client import HTTPClient
from gauges_connector.gauges.request_builder import GAUGES_URL, DebugLogger, RequestBuilder
from gauges_connector.gauges.schema import (
    CreateClientParams,
    GaugeParams,
    ListGaugesParams,
    UpdateProfileParams,
)


class GaugesClient:
    """
    Client pour l'API Gaug.es (https://secure.gaug.es).

    Fournit une méthode par endpoint:
     - get_profile() / update_profile(...)              Informations du compte
     - list_clients() / create_client(...) / delete_client(id)   Clés d'API
     - list_gauges(...) / create_gauge(...) / get_gauge(id)
       / update_gauge(...) / delete_gauge(id)          Gauges (sites suivis)

    Chaque méthode retourne la réponse httpx brute (statut, headers, body).
    """

    BASE_URL = GAUGES_URL

    def __init__(self, token: str,
                 http_defaults: Optional[Mapping[str, Any]] = None,
                 logger: Optional[DebugLogger] = None,
                 http_client: Optional[HTTPClient] = None):
        if http_client is not None and http_defaults is not None:
            raise ValueError("http_defaults et http_client sont exclusifs: configurer les options sur le HTTPClient fourni.")
        # HTTPClient wrapper (testable / injectable)
        self.http = http_client if http_client is not None else HTTPClient(
            base_url=self.BASE_URL, http_defaults=http_defaults
        )
        self.request = RequestBuilder(token=token, http_client=self.http, logger=logger)

    # ---------------- Compte ----------------
    def get_profile(self) -> httpx.Response:
        """Retourne les informations du compte."""
        return self.request.call("get_profile", "GET", "me")

    def update_profile(self, first_name: Optional[str] = None,
                       last_name: Optional[str] = None) -> httpx.Response:
        """Met à jour le compte et retourne les informations modifiées."""
        params = UpdateProfileParams(first_name=first_name, last_name=last_name)
        return self.request.call("update_profile", "PUT", "me", params.to_params())

    # ---------------- Clés d'API ----------------
    def list_clients(self) -> httpx.Response:
        """Retourne la liste des clés d'API."""
        return self.request.call("list_clients", "GET", "clients")

    def create_client(self, description: Optional[str] = None) -> httpx.Response:
        """Crée une clé d'API utilisable pour s'authentifier sur l'API Gauges."""
        params = CreateClientParams(description=description)
        return self.request.call("create_client", "POST", "clients", params.to_params())

    def delete_client(self, id: str) -> httpx.Response:
        """Supprime définitivement une clé d'API."""
        return self.request.call("delete_client", "DELETE", f"clients/{id}")

    # ---------------- Gauges ----------------
    def list_gauges(self, page: Optional[int] = None) -> httpx.Response:
        """Retourne la liste des gauges, avec le trafic récent."""
        params = ListGaugesParams(page=page)
        return self.request.call("list_gauges", "GET", "gauges", params.to_params())

    def create_gauge(self, title: str, tz: str,
                     allowed_hosts: Optional[str] = None) -> httpx.Response:
        """Crée une gauge."""
        params = GaugeParams(title=title, tz=tz, allowed_hosts=allowed_hosts)
        return self.request.call("create_gauge", "POST", "gauges", params.to_params())

    def get_gauge(self, id: str) -> httpx.Response:
        """Détail d'une gauge."""
        return self.request.call("get_gauge", "GET", f"gauges/{id}")

    def update_gauge(self, id: str, title: str, tz: str,
                     allowed_hosts: Optional[str] = None) -> httpx.Response:
        """Met à jour une gauge et la retourne avec les modifications appliquées."""
        params = GaugeParams(title=title, tz=tz, allowed_hosts=allowed_hosts)
        return self.request.call("update_gauge", "PUT", f"gauges/{id}", params.to_params())

    def delete_gauge(self, id: str) -> httpx.Response:
        """Supprime définitivement une gauge."""
        return self.request.call("delete_gauge", "DELETE", f"gauges/{id}")

    # ---------------- Cycle de vie ----------------
    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
