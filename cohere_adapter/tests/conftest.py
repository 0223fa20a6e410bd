"""Pytest configuration for the adapter test suite.

Provides a factory fixture building a :class:`Client` whose HTTP traffic is
served by ``httpx.MockTransport`` and an autouse fixture isolating tests from
the developer's environment. All tests are offline.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

import httpx
import pytest

from cohere_adapter.cohere import Client
from cohere_adapter.config import reset_config_cache

from .utils import TEST_API_KEY, TEST_BASE_URL, Handler, RecordingTransport


@pytest.fixture()
def make_client() -> Iterator[Callable[[Handler], Tuple[Client, RecordingTransport]]]:
    """Yield a factory ``handler -> (client, transport)``."""
    opened: List[httpx.Client] = []

    def _make(handler: Handler) -> Tuple[Client, RecordingTransport]:
        transport = RecordingTransport(handler)
        http = httpx.Client(transport=transport)
        opened.append(http)
        return Client.from_url(TEST_API_KEY, TEST_BASE_URL, http_client=http), transport

    yield _make
    for http in opened:
        http.close()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep tests independent of the developer's env, dotenv and config file."""
    for name in (
        "COHERE_API_KEY",
        "CO_API_KEY",
        "COHERE_BASE_URL",
        "COHERE_MODEL",
        "COHERE_EMBEDDING_MODEL",
        "COHERE_INPUT_TYPE",
        "PROVIDERS_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
