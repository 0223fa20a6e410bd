"""Cohere embedding adapter.

Purpose:
    Implement the :class:`~cohere_adapter.base.interfaces.EmbeddingModel`
    capability against ``POST /v1/embed``.

Model selection:
    Embedding models form a closed set (:class:`CohereEmbeddingModel`). Each
    has a fixed vector dimensionality; strings outside the set raise
    :class:`BadModelError`.

Batch size:
    ``MAX_DOCUMENTS`` (96) is the vendor limit per call. The adapter does not
    split or reject larger batches; callers and batch builders own that.

Failure semantics:
    - transport / non-2xx        -> :class:`HttpError`
    - error envelope             -> :class:`VendorError` (vendor message verbatim)
    - body fits neither schema   -> :class:`ResponseParseError`
    - embedding count mismatch   -> :class:`DocumentCountError`
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Dict, List, Union

from ..base.errors import BadModelError, DocumentCountError, ProviderError, VendorError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Embedding
from ..config.defaults import COHERE_MAX_EMBED_DOCUMENTS
from .envelope import PROVIDER_NAME, decode_json, parse_api_response
from .schemas import ApiErrorResponse, EmbeddingResponse

if TYPE_CHECKING:
    from .client import Client

EMBED_PATH = "/v1/embed"

# Input types accepted by v3 models.
SEARCH_DOCUMENT = "search_document"
SEARCH_QUERY = "search_query"
CLASSIFICATION = "classification"
CLUSTERING = "clustering"


class CohereEmbeddingModel(str, Enum):
    """Known Cohere embedding models; values are the vendor model names."""

    EMBED_ENGLISH_V3 = "embed-english-v3.0"
    EMBED_ENGLISH_LIGHT_V3 = "embed-english-light-v3.0"
    EMBED_MULTILINGUAL_V3 = "embed-multilingual-v3.0"
    EMBED_MULTILINGUAL_LIGHT_V3 = "embed-multilingual-light-v3.0"
    EMBED_ENGLISH_V2 = "embed-english-v2.0"
    EMBED_ENGLISH_LIGHT_V2 = "embed-english-light-v2.0"
    EMBED_MULTILINGUAL_V2 = "embed-multilingual-v2.0"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "CohereEmbeddingModel":
        """Return the member whose vendor name is ``name``.

        Raises:
            BadModelError: When ``name`` is not a known model.
        """
        try:
            return cls(name)
        except ValueError:
            raise BadModelError(name, PROVIDER_NAME) from None

    @property
    def ndims(self) -> int:
        return _NDIMS[self]


_NDIMS: Dict[CohereEmbeddingModel, int] = {
    CohereEmbeddingModel.EMBED_ENGLISH_V3: 1024,
    CohereEmbeddingModel.EMBED_ENGLISH_LIGHT_V3: 384,
    CohereEmbeddingModel.EMBED_MULTILINGUAL_V3: 1024,
    CohereEmbeddingModel.EMBED_MULTILINGUAL_LIGHT_V3: 384,
    CohereEmbeddingModel.EMBED_ENGLISH_V2: 4096,
    CohereEmbeddingModel.EMBED_ENGLISH_LIGHT_V2: 1024,
    CohereEmbeddingModel.EMBED_MULTILINGUAL_V2: 768,
}


class EmbeddingModel:
    """Embedding adapter bound to a client, a model and an input type.

    Parameters:
        client: Transport client.
        model: A :class:`CohereEmbeddingModel` or its vendor name.
        input_type: Vendor ``input_type`` tag (e.g. :data:`SEARCH_DOCUMENT`).

    Raises:
        BadModelError: When ``model`` is an unknown name.
    """

    MAX_DOCUMENTS: ClassVar[int] = COHERE_MAX_EMBED_DOCUMENTS

    def __init__(self, client: "Client", model: Union[CohereEmbeddingModel, str], input_type: str) -> None:
        self._client = client
        self.model = model if isinstance(model, CohereEmbeddingModel) else CohereEmbeddingModel.parse(model)
        self.input_type = input_type
        self._logger = get_logger("providers.cohere")

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    def ndims(self) -> int:
        """Return the vector dimensionality of the bound model."""
        return self.model.ndims

    def build_request_body(self, documents: List[str]) -> Dict[str, object]:
        """Return the ``/v1/embed`` JSON body for ``documents``."""
        return {
            "model": str(self.model),
            "texts": list(documents),
            "input_type": self.input_type,
        }

    def embed_documents(self, documents: List[str]) -> List[Embedding]:
        """Embed ``documents`` in a single request.

        Returns:
            One :class:`Embedding` per document, in input order.

        Raises:
            HttpError, VendorError, ResponseParseError, DocumentCountError.
        """
        documents = list(documents)
        model_name = str(self.model)
        ctx = LogContext(provider=PROVIDER_NAME, model=model_name, operation="embed")
        normalized_log_event(
            self._logger,
            "embed.start",
            ctx,
            phase="start",
            documents=len(documents),
            input_type=self.input_type,
        )

        t0 = time.perf_counter()
        try:
            request = self._client.post(EMBED_PATH, json=self.build_request_body(documents))
            response = self._client.send(request, model=model_name)
            parsed = parse_api_response(decode_json(response, model=model_name), EmbeddingResponse, model=model_name)
            if isinstance(parsed, ApiErrorResponse):
                raise VendorError(parsed.message, PROVIDER_NAME, model_name)
            if len(parsed.embeddings) != len(documents):
                raise DocumentCountError(len(documents), len(parsed.embeddings), PROVIDER_NAME, model_name)
        except ProviderError as e:
            normalized_log_event(
                self._logger,
                "embed.error",
                ctx,
                phase="finalize",
                emitted=False,
                error_code=e.code.value,
                error=e.message,
                level=logging.WARNING,
            )
            raise

        latency_ms = (time.perf_counter() - t0) * 1000.0
        ctx.response_id = parsed.id
        normalized_log_event(
            self._logger,
            "embed.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=parsed.meta.token_usage() if parsed.meta else None,
            latency_ms=latency_ms,
            warnings=(parsed.meta.warnings or None) if parsed.meta else None,
        )
        return [Embedding(document=document, vec=vec) for vec, document in zip(parsed.embeddings, documents)]


__all__ = [
    "CohereEmbeddingModel",
    "EmbeddingModel",
    "EMBED_PATH",
    "SEARCH_DOCUMENT",
    "SEARCH_QUERY",
    "CLASSIFICATION",
    "CLUSTERING",
]
