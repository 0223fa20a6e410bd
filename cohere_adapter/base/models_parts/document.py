"""
Context document DTO attached to completion requests.

Serialized flat: ``additional_props`` keys sit next to ``id`` and ``text``
so vendors that accept free-form document fields (titles, URLs, snippets)
receive them unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class Document:
    """A retrieval document supplied as grounding context.

    Attributes:
        id: Stable document identifier (referenced by citations).
        text: Document body.
        additional_props: Extra string fields merged into the serialized form.
    """

    id: str
    text: str
    additional_props: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the flat JSON-serializable form."""
        data: Dict[str, Any] = dict(self.additional_props)
        data["id"] = self.id
        data["text"] = self.text
        return data


__all__ = ["Document"]
