"""Cohere transport client.

Purpose:
    Hold the API base URL and the bearer credential, build POST requests
    addressed at ``base_url + path`` and send them. Model adapters
    (:class:`EmbeddingModel`, :class:`CompletionModel`) are created from a
    client and share it.

External dependencies:
    - ``httpx`` for HTTP. Without an explicit ``http_client`` the shared default
      client from :func:`get_httpx_client` is used; pass your own client (for
      example one wrapping ``httpx.MockTransport``) to override transport.

Timeout strategy:
    - Whatever the ``httpx.Client`` is configured with; the shared default client
      reads :func:`get_timeout_config`. No per-call deadline is added.

Retries and error handling:
    - None. Transport failures and non-2xx statuses raise :class:`HttpError`
      classified through :func:`classify_exception`; ``retryable`` is a hint
      for callers.
    - A credential that cannot be sent as a header value raises
      :class:`PreconditionViolation` at construction.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Union

import httpx

from ..base.errors import (
    RETRYABLE_CODES,
    ErrorCode,
    HttpError,
    PreconditionViolation,
    ProviderError,
    classify_exception,
)
from ..config import get_provider_config
from ..config.defaults import COHERE_API_BASE_URL, COHERE_HTTP_PURPOSE
from ..base.http import get_httpx_client
from .completion import CompletionModel
from .embeddings import CohereEmbeddingModel, EmbeddingModel
from .envelope import PROVIDER_NAME

_REPEATED_SLASHES = re.compile(r"/{2,}")
_DEL = "\x7f"


def _join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` collapsing duplicate separators.

    The ``scheme://`` separator is left untouched.
    """
    url = f"{base_url}/{path}"
    scheme, sep, rest = url.partition("://")
    if not sep:
        return _REPEATED_SLASHES.sub("/", url)
    return f"{scheme}://{_REPEATED_SLASHES.sub('/', rest)}"


def _bearer_headers(api_key: str) -> Dict[str, str]:
    """Return default headers for ``api_key`` or raise PreconditionViolation."""
    if not isinstance(api_key, str):
        raise PreconditionViolation("Cohere API key must be a string")
    value = f"Bearer {api_key}"
    # HTAB is the only control character allowed in a header value
    if any((ord(ch) < 0x20 and ch != "\t") or ch == _DEL for ch in value):
        raise PreconditionViolation("Cohere API key contains control characters and cannot be sent as a header")
    try:
        value.encode("ascii")
    except UnicodeEncodeError as e:
        raise PreconditionViolation("Cohere API key is not ASCII and cannot be sent as a header") from e
    return {"Authorization": value}


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Best-effort vendor ``message`` from an error response body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


class Client:
    """Immutable handle on the Cohere API.

    Parameters:
        api_key: Bearer credential sent with every request.
        base_url: API root; defaults to the production endpoint.
        http_client: Optional ``httpx.Client`` to send requests with.

    Raises:
        PreconditionViolation: When ``api_key`` cannot be encoded as an HTTP
            header value.
    """

    __slots__ = ("_base_url", "_headers", "_http")

    def __init__(
        self,
        api_key: str,
        base_url: str = COHERE_API_BASE_URL,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        object.__setattr__(self, "_headers", _bearer_headers(api_key))
        object.__setattr__(self, "_base_url", base_url)
        object.__setattr__(
            self,
            "_http",
            http_client if http_client is not None else get_httpx_client(base_url, purpose=COHERE_HTTP_PURPOSE),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    # ---- Construction ----
    @classmethod
    def from_url(cls, api_key: str, base_url: str, *, http_client: Optional[httpx.Client] = None) -> "Client":
        """Build a client against a non-default ``base_url`` (proxies, mocks)."""
        return cls(api_key, base_url, http_client=http_client)

    @classmethod
    def from_env(
        cls,
        overrides: Optional[Dict[str, Any]] = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> "Client":
        """Build a client from the layered configuration.

        ``api_key`` and ``base_url`` are resolved by
        :func:`get_provider_config` (defaults, config file, ``COHERE_*`` env
        vars, then ``overrides``).

        Raises:
            ProviderError: With ``ErrorCode.AUTH`` when no API key is configured.
        """
        cfg = get_provider_config(PROVIDER_NAME, overrides=overrides)
        api_key = cfg.get("api_key")
        if not api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="no Cohere API key configured (set COHERE_API_KEY)",
                provider=PROVIDER_NAME,
            )
        return cls(api_key, cfg.get("base_url") or COHERE_API_BASE_URL, http_client=http_client)

    # ---- Properties ----
    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    # ---- Transport ----
    def post(self, path: str, *, json: Any = None) -> httpx.Request:
        """Build a POST request addressed at ``base_url + path``.

        The bearer header is attached; nothing is sent until :meth:`send`.
        """
        return self._http.build_request("POST", _join_url(self._base_url, path), json=json, headers=self._headers)

    def send(self, request: httpx.Request, *, model: Optional[str] = None) -> httpx.Response:
        """Send ``request`` and return the successful response.

        Raises:
            HttpError: On transport failure or a non-2xx status. ``status``
                holds the HTTP status when a response was received.
        """
        try:
            response = self._http.send(request)
            response.raise_for_status()
        except httpx.HTTPError as e:
            code = classify_exception(e)
            status = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            message = str(e)
            if isinstance(e, httpx.HTTPStatusError):
                detail = _error_detail(e.response)
                if detail:
                    message = f"{message}: {detail}"
            raise HttpError(
                code,
                message,
                PROVIDER_NAME,
                model,
                status=status,
                retryable=code in RETRYABLE_CODES,
                raw=e,
            ) from e
        return response

    # ---- Model factories ----
    def embedding_model(
        self,
        model: Optional[Union[CohereEmbeddingModel, str]] = None,
        input_type: Optional[str] = None,
    ) -> EmbeddingModel:
        """Return an embedding adapter for ``model`` using ``input_type``.

        Omitted arguments fall back to the configured ``embedding_model`` and
        ``input_type`` (``COHERE_EMBEDDING_MODEL`` / ``COHERE_INPUT_TYPE``).

        Raises:
            BadModelError: When ``model`` is a string naming no known model.
        """
        if model is None or input_type is None:
            cfg = get_provider_config(PROVIDER_NAME)
            model = model if model is not None else cfg["embedding_model"]
            input_type = input_type if input_type is not None else cfg["input_type"]
        return EmbeddingModel(self, model, input_type)

    def completion_model(self, model: Optional[str] = None) -> CompletionModel:
        """Return a completion adapter for the chat ``model`` (default: ``COHERE_MODEL``)."""
        if model is None:
            model = get_provider_config(PROVIDER_NAME)["model"]
        return CompletionModel(self, model)


__all__ = ["Client"]
