"""
Normalized model choice returned by completion adapters.

A completion either produces a plain message or asks for exactly one tool
invocation. The two variants are separate dataclasses joined by the
:data:`ModelChoice` union; callers dispatch with ``isinstance``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class MessageChoice:
    """The model answered with text."""

    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "message", "text": self.text}


@dataclass(frozen=True)
class ToolCallChoice:
    """The model asked to call ``name`` with ``parameters``."""

    name: str
    parameters: Any = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "tool_call", "name": self.name, "parameters": self.parameters}


ModelChoice = Union[MessageChoice, ToolCallChoice]


__all__ = ["MessageChoice", "ToolCallChoice", "ModelChoice"]
