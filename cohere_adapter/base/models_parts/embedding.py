"""
Embedding result DTO.

One ``Embedding`` is produced per input document, pairing the original text
with its vector.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List


@dataclass
class Embedding:
    """A document and its embedding vector."""

    document: str
    vec: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the embedding."""
        return asdict(self)


__all__ = ["Embedding"]
