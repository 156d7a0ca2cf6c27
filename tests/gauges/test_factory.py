import gzip

import pytest
import httpx
from unittest.mock import MagicMock

from gauges_connector.core.exceptions import ConfigurationError
from gauges_connector.gauges.api_client import GaugesClient
from gauges_connector.gauges.factory import (
    CLF_FORMAT,
    create_client,
    create_client_from_env,
    create_mocking_client,
    make_access_log_hook,
)


# ---------------- Client de test (réponse fournie) ----------------

def test_mocking_client_returns_canned_response():
    canned = httpx.Response(200, json={"user": {"first_name": "Ann"}})
    client = create_mocking_client(canned)

    response = client.get_profile()

    assert response.status_code == 200
    assert response.json() == {"user": {"first_name": "Ann"}}
    assert response.request.headers["X-Gauges-Token"] == "fake_token"
    assert str(response.request.url) == "https://secure.gaug.es/me"


def test_mocking_client_answers_every_call():
    client = create_mocking_client(httpx.Response(200, json={"gauges": []}))
    first = client.list_gauges()
    second = client.list_gauges(page=2)

    assert first.json() == second.json() == {"gauges": []}
    assert second.request.url.params["page"] == "2"


def test_mocking_client_logs_success_once():
    logger = MagicMock()
    client = create_mocking_client(httpx.Response(200, json={}), logger=logger)

    client.get_profile()

    logger.debug.assert_called_once()
    message = logger.debug.call_args.args[0]
    assert "successful" in message
    assert "unsuccessful" not in message


def test_mocking_client_logs_failure_once():
    logger = MagicMock()
    client = create_mocking_client(httpx.Response(404, json={"message": "Not found"}), logger=logger)

    response = client.get_gauge("missing")

    assert response.status_code == 404
    logger.debug.assert_called_once()
    message = logger.debug.call_args.args[0]
    assert "unsuccessful" in message
    assert "404" in message
    assert "get_gauge" in message


def test_mocking_client_replays_gzip_response():
    canned = httpx.Response(200, headers={"Content-Encoding": "gzip", "Content-Type": "application/json"},
                            content=gzip.compress(b'{"gauges": [{"id": "g1"}]}'))
    client = create_mocking_client(canned)

    response = client.list_gauges()

    assert response.json() == {"gauges": [{"id": "g1"}]}
    assert "Content-Encoding" not in response.headers
    assert response.headers["Content-Type"] == "application/json"
    assert response.headers["Content-Length"] == str(len(response.content))


def test_mocking_client_without_logger():
    client = create_mocking_client(httpx.Response(500))
    assert client.delete_gauge("g1").status_code == 500


# ---------------- Client réel ----------------

def test_create_client_without_format_has_no_access_log():
    client = create_client("test_token", logger=MagicMock())
    assert isinstance(client, GaugesClient)
    assert client.http._client.event_hooks["response"] == []
    client.close()


def test_create_client_with_format_attaches_access_log():
    client = create_client("test_token", http_defaults={"timeout": 3.0},
                           logger=MagicMock(), log_format=CLF_FORMAT)
    assert len(client.http._client.event_hooks["response"]) == 1
    assert client.http._client.timeout.connect == 3.0
    client.close()


def test_log_format_without_logger_is_ignored():
    client = create_client("test_token", log_format=CLF_FORMAT)
    assert client.http._client.event_hooks["response"] == []
    assert client.request.logger is None
    client.close()


def test_access_log_hook_renders_clf():
    logger = MagicMock()
    hook = make_access_log_hook(logger, CLF_FORMAT)
    request = httpx.Request("GET", "https://secure.gaug.es/gauges?page=2")
    response = httpx.Response(200, request=request, content=b"{}")

    hook(response)

    line = logger.debug.call_args.args[0]
    assert line.startswith("secure.gaug.es - - [")
    assert line.endswith('"GET /gauges?page=2 HTTP/1.1" 200 2')


def test_access_log_hook_custom_format():
    logger = MagicMock()
    hook = make_access_log_hook(logger, "{method} {target} -> {code} {phrase}")
    request = httpx.Request("DELETE", "https://secure.gaug.es/clients/42")

    hook(httpx.Response(404, request=request))

    logger.debug.assert_called_once_with("DELETE /clients/42 -> 404 Not Found")


# ---------------- Depuis l'environnement ----------------

def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("GAUGES_API_TOKEN", "env_token")
    monkeypatch.setenv("GAUGES_HTTP_TIMEOUT", "12")
    monkeypatch.delenv("GAUGES_HTTP_PROXY", raising=False)

    client = create_client_from_env()

    assert client.request.token == "env_token"
    assert client.http.http_defaults == {"timeout": 12.0}
    client.close()


def test_create_client_from_env_without_token(monkeypatch):
    monkeypatch.delenv("GAUGES_API_TOKEN", raising=False)
    with pytest.raises(ConfigurationError):
        create_client_from_env()
