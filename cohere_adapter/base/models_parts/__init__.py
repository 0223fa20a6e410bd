"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`cohere_adapter.base.models_parts` if needed, while `cohere_adapter.base.models`
remains the primary stable import path.
"""

from .message import Message, Role
from .tool_definition import ToolDefinition
from .document import Document
from .embedding import Embedding
from .model_choice import MessageChoice, ModelChoice, ToolCallChoice
from .completion_request import CompletionRequest
from .completion_response import CompletionResponse

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
