"""EmbeddingModel Protocol (single-class module).

Defines the capability batch builders and vector stores depend on to turn
documents into vectors.
"""

from __future__ import annotations

from typing import ClassVar, List, Protocol, runtime_checkable

from ..models import Embedding


@runtime_checkable
class EmbeddingModel(Protocol):
    """Minimal interface for embedding adapters.

    ``MAX_DOCUMENTS`` is the largest batch the vendor accepts in one call.
    Adapters do not split or enforce it; batch builders must respect it.
    """

    MAX_DOCUMENTS: ClassVar[int]

    def ndims(self) -> int:
        """Dimensionality of the vectors this model produces."""
        ...

    def embed_documents(self, documents: List[str]) -> List[Embedding]:
        """Embed ``documents`` and return one :class:`Embedding` per input, in order.

        Raises:
            ProviderError: On transport, vendor or response failures.
        """
        ...


__all__ = ["EmbeddingModel"]
