# gauges_connector/core/config.py

from typing import Any, Dict

from dotenv import load_dotenv
import os

from gauges_connector.core.exceptions import ConfigurationError

load_dotenv()


def get_gauges_api_token() -> str:
    token = os.getenv("GAUGES_API_TOKEN")
    if not token:
        raise ConfigurationError("GAUGES_API_TOKEN manquant. Définir la variable d'environnement (ou le fichier .env).")
    return token


def get_http_defaults() -> Dict[str, Any]:
    """
    Options du transport httpx lues depuis l'environnement.
    Seules les clés configurées sont retournées (ex: {"timeout": 10.0}).
    """
    defaults: Dict[str, Any] = {}

    timeout = os.getenv("GAUGES_HTTP_TIMEOUT")
    if timeout:
        try:
            defaults["timeout"] = float(timeout)
        except ValueError as e:
            raise ConfigurationError(f"GAUGES_HTTP_TIMEOUT invalide : {timeout!r} (nombre de secondes attendu).") from e

    proxy = os.getenv("GAUGES_HTTP_PROXY")
    if proxy:
        defaults["proxy"] = proxy

    return defaults
