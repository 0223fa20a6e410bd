"""
Generic tool definition DTO.

``parameters`` is a JSON-schema-like object: an ``object`` schema carrying a
``properties`` map and an optional ``required`` list. Adapters convert it to
their own parameter format and may reject shapes they cannot express.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict


@dataclass
class ToolDefinition:
    """Tool the model may choose to call.

    Attributes:
        name: Tool name echoed back in tool-call choices.
        description: Human-readable purpose of the tool.
        parameters: JSON-schema-like parameter description.
    """

    name: str
    description: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the tool."""
        return asdict(self)


__all__ = ["ToolDefinition"]
