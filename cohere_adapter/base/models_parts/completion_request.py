"""
CompletionRequest DTO for provider-agnostic completion invocations.

Adapters map this normalized request shape onto their wire format. The
``additional_params`` escape hatch is merged on top of the adapter-built body
so callers can set, or override, any vendor field.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .document import Document
from .message import Message
from .tool_definition import ToolDefinition


@dataclass
class CompletionRequest:
    """Normalized completion request sent to completion adapters.

    Attributes:
        prompt: The user turn being completed.
        preamble: Optional system framing text.
        chat_history: Prior turns, oldest first.
        documents: Grounding documents.
        tools: Tools the model may call.
        temperature: Sampling temperature when set.
        additional_params: Arbitrary vendor JSON merged onto the request body.

    Methods:
        to_dict: Return a JSON-serializable dictionary of the request.
    """

    prompt: str
    preamble: Optional[str] = None
    chat_history: List[Message] = field(default_factory=list)
    documents: List[Document] = field(default_factory=list)
    tools: List[ToolDefinition] = field(default_factory=list)
    temperature: Optional[float] = None
    additional_params: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "prompt": self.prompt,
            "preamble": self.preamble,
            "chat_history": [m.to_dict() for m in self.chat_history],
            "documents": [d.to_dict() for d in self.documents],
            "tools": [t.to_dict() for t in self.tools],
            "temperature": self.temperature,
            "additional_params": self.additional_params,
        }


__all__ = ["CompletionRequest"]
