"""Unit tests for the Cohere transport client.

Covers URL joining, bearer credential handling, environment construction and
HTTP failure mapping. All traffic goes through ``httpx.MockTransport``.
"""
from __future__ import annotations

import httpx
import pytest

from cohere_adapter.base.errors import ErrorCode, HttpError, PreconditionViolation, ProviderError
from cohere_adapter.cohere import Client
from cohere_adapter.cohere.client import _join_url
from cohere_adapter.config.defaults import COHERE_API_BASE_URL

from .utils import TEST_API_KEY, RecordingTransport, json_response


@pytest.mark.parametrize(
    "base,path,expected",
    [
        ("https://api.cohere.ai", "/v1/chat", "https://api.cohere.ai/v1/chat"),
        ("https://api.cohere.ai/", "/v1/chat", "https://api.cohere.ai/v1/chat"),
        ("https://api.cohere.ai", "v1/embed", "https://api.cohere.ai/v1/embed"),
        ("http://localhost:8080/proxy/", "//v1/embed", "http://localhost:8080/proxy/v1/embed"),
    ],
)
def test_join_url_collapses_separators(base, path, expected):
    assert _join_url(base, path) == expected  # nosec B101


def test_default_base_url_is_production():
    client = Client(TEST_API_KEY, http_client=httpx.Client(transport=RecordingTransport(json_response({}))))
    assert client.base_url == COHERE_API_BASE_URL == "https://api.cohere.ai"  # nosec B101


def test_post_builds_authorized_request(make_client):
    client, transport = make_client(json_response({"ok": True}))

    request = client.post("/v1/chat", json={"message": "hi"})
    assert transport.requests == []  # nosec B101 - nothing sent yet

    response = client.send(request)

    assert response.json() == {"ok": True}  # nosec B101
    sent = transport.requests[0]
    assert sent.method == "POST"  # nosec B101
    assert sent.url == httpx.URL("https://api.cohere.test/v1/chat")  # nosec B101
    assert sent.headers["Authorization"] == f"Bearer {TEST_API_KEY}"  # nosec B101
    assert transport.bodies[0] == {"message": "hi"}  # nosec B101


@pytest.mark.parametrize(
    "bad_key",
    ["line\nbreak", "carriage\rreturn", "nul\0", "ctl\x01", "esc\x1b", "del\x7f", "clé-non-ascii", None, 123],
)
def test_unencodable_key_is_precondition_violation(bad_key):
    with pytest.raises(PreconditionViolation):
        Client(bad_key, "https://api.cohere.test")  # type: ignore[arg-type]


def test_tab_in_key_is_a_legal_header_value():
    transport = RecordingTransport(json_response({}))
    client = Client("tab\tkey", "https://api.cohere.test", http_client=httpx.Client(transport=transport))
    client.send(client.post("/v1/chat", json={}))
    assert transport.requests[0].headers["Authorization"] == "Bearer tab\tkey"  # nosec B101


def test_client_is_immutable_and_repr_hides_key(make_client):
    client, _ = make_client(json_response({}))
    with pytest.raises(AttributeError):
        client.base_url_override = "x"  # type: ignore[attr-defined]
    assert TEST_API_KEY not in repr(client)  # nosec B101
    assert "api.cohere.test" in repr(client)  # nosec B101


def test_clients_sharing_transport_keep_their_own_credentials():
    transport = RecordingTransport(json_response({}))
    http = httpx.Client(transport=transport)
    a = Client.from_url("key-a", "https://api.cohere.test", http_client=http)
    b = Client.from_url("key-b", "https://api.cohere.test", http_client=http)

    a.send(a.post("/v1/chat", json={}))
    b.send(b.post("/v1/chat", json={}))

    assert [r.headers["Authorization"] for r in transport.requests] == ["Bearer key-a", "Bearer key-b"]  # nosec B101
    http.close()


def test_from_env_reads_canonical_key(monkeypatch):
    monkeypatch.setenv("COHERE_API_KEY", "live-key")
    monkeypatch.setenv("COHERE_BASE_URL", "https://proxy.internal")
    transport = RecordingTransport(json_response({}))

    client = Client.from_env(http_client=httpx.Client(transport=transport))
    client.send(client.post("/v1/chat", json={}))

    assert client.base_url == "https://proxy.internal"  # nosec B101
    assert transport.requests[0].headers["Authorization"] == "Bearer live-key"  # nosec B101


def test_from_env_accepts_legacy_alias(monkeypatch):
    monkeypatch.setenv("CO_API_KEY", "legacy-key")
    client = Client.from_env(http_client=httpx.Client(transport=RecordingTransport(json_response({}))))
    assert client.base_url == COHERE_API_BASE_URL  # nosec B101


def test_from_env_without_key_is_auth_error():
    with pytest.raises(ProviderError) as exc_info:
        Client.from_env()
    assert exc_info.value.code is ErrorCode.AUTH  # nosec B101


def test_send_maps_status_error(make_client):
    client, _ = make_client(json_response({"message": "model not found"}, status=404))

    with pytest.raises(HttpError) as exc_info:
        client.send(client.post("/v1/chat", json={}), model="command-r")

    err = exc_info.value
    assert err.status == 404  # nosec B101
    assert err.code is ErrorCode.NOT_FOUND  # nosec B101
    assert err.retryable is False  # nosec B101
    assert err.model == "command-r"  # nosec B101
    assert "model not found" in err.message  # nosec B101


def test_send_maps_rate_limit_as_retryable(make_client):
    client, _ = make_client(json_response({"message": "slow down"}, status=429))
    with pytest.raises(HttpError) as exc_info:
        client.send(client.post("/v1/embed", json={}))
    assert exc_info.value.code is ErrorCode.RATE_LIMIT  # nosec B101
    assert exc_info.value.retryable is True  # nosec B101


def test_send_maps_connect_error_without_status(make_client):
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(_refuse)
    with pytest.raises(HttpError) as exc_info:
        client.send(client.post("/v1/embed", json={}))

    assert exc_info.value.status is None  # nosec B101
    assert exc_info.value.code is ErrorCode.TRANSIENT  # nosec B101
    assert isinstance(exc_info.value.raw, httpx.ConnectError)  # nosec B101


def test_send_maps_timeout(make_client):
    def _slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    client, _ = make_client(_slow)
    with pytest.raises(HttpError) as exc_info:
        client.send(client.post("/v1/chat", json={}))
    assert exc_info.value.code is ErrorCode.TIMEOUT  # nosec B101


def test_model_factories(make_client):
    client, _ = make_client(json_response({}))
    assert client.completion_model("command-nightly").model == "command-nightly"  # nosec B101
    assert client.embedding_model("embed-english-light-v3.0", "clustering").input_type == "clustering"  # nosec B101


def test_model_factories_fall_back_to_config(make_client, monkeypatch):
    client, _ = make_client(json_response({}))
    assert client.completion_model().model == "command-r"  # nosec B101
    embedder = client.embedding_model()
    assert str(embedder.model) == "embed-english-v3.0"  # nosec B101
    assert embedder.input_type == "search_document"  # nosec B101

    monkeypatch.setenv("COHERE_MODEL", "command-light")
    monkeypatch.setenv("COHERE_EMBEDDING_MODEL", "embed-multilingual-light-v3.0")
    assert client.completion_model().model == "command-light"  # nosec B101
    assert client.embedding_model(input_type="search_query").ndims() == 384  # nosec B101
