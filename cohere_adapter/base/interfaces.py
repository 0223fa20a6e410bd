"""
Provider-agnostic interfaces (Protocols) for the adapter layer.

Re-exports the single-class modules under
``cohere_adapter.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import CompletionModel, EmbeddingModel

__all__ = ["CompletionModel", "EmbeddingModel"]
