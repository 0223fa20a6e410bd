"""Unit tests for the shared default httpx clients.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose or base_url yields different instances.
- Closed clients are replaced transparently.
- Shared clients use the configured timeout and carry no credentials.
- An explicit ``http_client`` is used as given.
"""
from __future__ import annotations

import httpx

from cohere_adapter.base.http import close_all_clients, get_httpx_client
from cohere_adapter.cohere import Client


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://api.cohere.ai", purpose="cohere")
    c2 = get_httpx_client("https://api.cohere.ai", purpose="cohere")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"  # nosec B101


def test_different_purpose_or_base_url_returns_different_instances():
    base = get_httpx_client("https://api.cohere.ai", purpose="cohere")
    assert base is not get_httpx_client("https://api.cohere.ai", purpose="other")  # nosec B101
    assert base is not get_httpx_client("https://proxy.internal", purpose="cohere")  # nosec B101


def test_closed_client_is_recreated():
    c1 = get_httpx_client("https://api.cohere.ai", purpose="cohere")
    c1.close()
    c2 = get_httpx_client("https://api.cohere.ai", purpose="cohere")
    assert c2 is not c1 and not c2.is_closed  # nosec B101


def test_pooled_client_uses_timeout_env(monkeypatch):
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "7.5")
    client = get_httpx_client("https://api.cohere.ai", purpose="timeouts")
    assert client.timeout.read == 7.5  # nosec B101
    assert client.timeout.connect == 7.5  # nosec B101


def test_clients_with_different_keys_share_the_default_client():
    a = Client("key-a")
    b = Client("key-b")
    assert a.http_client is b.http_client  # nosec B101
    assert "Authorization" not in a.http_client.headers  # nosec B101


def test_explicit_http_client_bypasses_shared_default():
    own = httpx.Client()
    client = Client("key-a", http_client=own)
    assert client.http_client is own  # nosec B101
    assert own is not get_httpx_client("https://api.cohere.ai", purpose="cohere")  # nosec B101
    own.close()
