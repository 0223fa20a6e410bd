"""
Adapter Base Package

Provider-agnostic contracts, DTOs and infrastructure shared by vendor
adapters:
- Interfaces: embedding and completion capabilities
- Models (DTOs): serialization-friendly request/response objects
- Errors: normalized taxonomy and classification
- HTTP / timeouts / logging: shared plumbing
"""

from .errors import (
    BadModelError,
    DocumentCountError,
    ErrorCode,
    HttpError,
    PreconditionViolation,
    ProviderError,
    ResponseParseError,
    VendorError,
    classify_exception,
)
from .interfaces import CompletionModel, EmbeddingModel
from .models import (
    CompletionRequest,
    CompletionResponse,
    Document,
    Embedding,
    Message,
    MessageChoice,
    ModelChoice,
    Role,
    ToolCallChoice,
    ToolDefinition,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "Role",
    "Message",
    "ToolDefinition",
    "Document",
    "Embedding",
    "MessageChoice",
    "ToolCallChoice",
    "ModelChoice",
    "CompletionRequest",
    "CompletionResponse",
    # Interfaces
    "EmbeddingModel",
    "CompletionModel",
    # Errors
    "ErrorCode",
    "ProviderError",
    "BadModelError",
    "HttpError",
    "DocumentCountError",
    "VendorError",
    "ResponseParseError",
    "PreconditionViolation",
    "classify_exception",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
