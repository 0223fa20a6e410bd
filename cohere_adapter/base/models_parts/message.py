"""
Generic chat message DTO.

A provider-agnostic ``{role, content}`` pair. ``role`` is a free string;
adapters map the recognized values (``"system"``, ``"user"``,
``"assistant"``) to their own tokens and decide how to treat anything else.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal

# Roles understood by adapters; other strings are accepted and coerced.
Role = Literal["system", "user", "assistant"]


@dataclass
class Message:
    """A single chat history entry.

    Attributes:
        role: Author role, normally one of :data:`Role`.
        content: Plain text content.
    """

    role: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the message."""
        return asdict(self)


__all__ = ["Message", "Role"]
