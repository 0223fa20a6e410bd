"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``cohere_adapter.base.models_parts``.
"""

from .models_parts.message import Message, Role
from .models_parts.tool_definition import ToolDefinition
from .models_parts.document import Document
from .models_parts.embedding import Embedding
from .models_parts.model_choice import MessageChoice, ModelChoice, ToolCallChoice
from .models_parts.completion_request import CompletionRequest
from .models_parts.completion_response import CompletionResponse

__all__ = [
    "Message",
    "Role",
    "ToolDefinition",
    "Document",
    "Embedding",
    "MessageChoice",
    "ToolCallChoice",
    "ModelChoice",
    "CompletionRequest",
    "CompletionResponse",
]
