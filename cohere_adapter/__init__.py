"""cohere_adapter package

Cohere provider adapter: maps the generic completion and embedding
abstractions onto the Cohere HTTP API and back.

Public API (re-exported):
    - Version: ``__version__``
    - Client and adapters: :class:`Client`, :class:`CompletionModel`,
      :class:`EmbeddingModel`, :class:`CohereEmbeddingModel`
    - Generic DTOs: :class:`CompletionRequest`, :class:`CompletionResponse`,
      :class:`Message`, :class:`ToolDefinition`, :class:`Document`,
      :class:`Embedding`, :class:`MessageChoice`, :class:`ToolCallChoice`
    - Errors: :class:`ProviderError` and its kinds, :class:`ErrorCode`,
      :class:`PreconditionViolation`
"""

from .base.errors import (
    BadModelError,
    DocumentCountError,
    ErrorCode,
    HttpError,
    PreconditionViolation,
    ProviderError,
    ResponseParseError,
    VendorError,
)
from .base.models import (
    CompletionRequest,
    CompletionResponse,
    Document,
    Embedding,
    Message,
    MessageChoice,
    ToolCallChoice,
    ToolDefinition,
)
from .cohere import Client, CohereEmbeddingModel, CompletionModel, EmbeddingModel

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client and adapters
    "Client",
    "CompletionModel",
    "EmbeddingModel",
    "CohereEmbeddingModel",
    # DTOs
    "CompletionRequest",
    "CompletionResponse",
    "Document",
    "Embedding",
    "Message",
    "MessageChoice",
    "ToolCallChoice",
    "ToolDefinition",
    # Errors
    "ErrorCode",
    "ProviderError",
    "BadModelError",
    "HttpError",
    "DocumentCountError",
    "VendorError",
    "ResponseParseError",
    "PreconditionViolation",
]
