"""Shared helpers for offline HTTP tests."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Union

import httpx

TEST_BASE_URL = "https://api.cohere.test"
TEST_API_KEY = "co-unit-key"  # pragma: allowlist secret - test-only fake key

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that records every request and its decoded JSON body."""

    def __init__(self, handler: Handler) -> None:
        self.requests: List[httpx.Request] = []
        self.bodies: List[Any] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            self.bodies.append(json.loads(request.content) if request.content else None)
            return handler(request)

        super().__init__(_record)


def json_response(payload: Union[Dict[str, Any], List[Any]], status: int = 200) -> Handler:
    """Return a handler answering every request with ``payload``."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload)

    return _handler


def text_response(body: str, status: int = 200) -> Handler:
    """Return a handler answering every request with a raw text body."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=body)

    return _handler


def embed_payload(embeddings: List[List[float]], texts: List[str]) -> Dict[str, Any]:
    """Build a ``/v1/embed`` success body."""
    return {
        "response_type": "embeddings_floats",
        "id": "emb-1",
        "embeddings": embeddings,
        "texts": texts,
        "meta": {
            "api_version": {"version": "1"},
            "billed_units": {"input_tokens": 3},
        },
    }


def chat_payload(text: str = "hello", tool_calls: List[Dict[str, Any]] | None = None, **extra: Any) -> Dict[str, Any]:
    """Build a ``/v1/chat`` success body."""
    payload: Dict[str, Any] = {
        "text": text,
        "generation_id": "gen-1",
        "finish_reason": "COMPLETE",
        "tool_calls": tool_calls or [],
    }
    payload.update(extra)
    return payload
