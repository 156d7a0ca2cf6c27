# gauges_connector/gauges/factory.py

from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

import httpx

from gauges_connector.core.config import get_gauges_api_token, get_http_defaults
from gauges_connector.core.httpx_client import HTTPClient
from gauges_connector.gauges.api_client import GaugesClient
from gauges_connector.gauges.request_builder import GAUGES_URL, DebugLogger

# Common Log Format
CLF_FORMAT = '{host} - - [{ts}] "{method} {target} {version}" {code} {res_size}'


def make_access_log_hook(logger: DebugLogger, log_format: str) -> Callable[[httpx.Response], None]:
    """
    Hook httpx ("response") qui écrit une ligne par échange HTTP.

    Champs disponibles dans log_format: host, method, target, version,
    code, phrase, res_size, ts.
    """

    def log_response(response: httpx.Response) -> None:
        request = response.request
        line = log_format.format(
            host=request.url.host,
            method=request.method,
            target=request.url.raw_path.decode("ascii"),
            version=response.http_version,
            code=response.status_code,
            phrase=response.reason_phrase,
            res_size=response.headers.get("Content-Length", "-"),
            ts=datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z"),
        )
        logger.debug(line)

    return log_response


def create_client(token: str,
                  http_defaults: Optional[Mapping[str, Any]] = None,
                  logger: Optional[DebugLogger] = None,
                  log_format: Optional[str] = None) -> GaugesClient:
    """
    Retourne un GaugesClient entièrement construit.

    :param token: token de l'API Gauges
    :param http_defaults: options httpx (proxy, timeout, ...), appliquées à chaque requête
    :param logger: (optionnel) reçoit un message debug par appel
    :param log_format: (optionnel) ajoute une ligne d'access log par échange HTTP (ex: CLF_FORMAT)

    Sans log_format, aucun access log n'est ajouté, même avec un logger: il n'y a
    pas de format CLF par défaut, le logger reçoit un seul message par appel.
    """
    event_hooks = None
    if logger is not None and log_format is not None:
        event_hooks = {"response": [make_access_log_hook(logger, log_format)]}

    http_client = HTTPClient(base_url=GAUGES_URL, http_defaults=http_defaults, event_hooks=event_hooks)
    return GaugesClient(token=token, logger=logger, http_client=http_client)


def create_client_from_env(logger: Optional[DebugLogger] = None,
                           log_format: Optional[str] = None) -> GaugesClient:
    """Construit le client depuis GAUGES_API_TOKEN / GAUGES_HTTP_* (voir core.config)."""
    return create_client(
        token=get_gauges_api_token(),
        http_defaults=get_http_defaults(),
        logger=logger,
        log_format=log_format,
    )


def create_mocking_client(response: httpx.Response,
                          logger: Optional[DebugLogger] = None) -> GaugesClient:
    """
    Factory utilisée pour les tests: chaque requête reçoit une copie de la
    réponse fournie, sans aucun accès réseau.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code=response.status_code,
            # Le contenu est déjà décodé: on retire les headers d'encodage et de taille
            headers=[(k, v) for k, v in response.headers.multi_items()
                     if k.lower() not in ("content-encoding", "content-length")],
            content=response.content,
        )

    http_client = HTTPClient(base_url=GAUGES_URL, transport=httpx.MockTransport(handler))
    return GaugesClient(token="fake_token", logger=logger, http_client=http_client)
