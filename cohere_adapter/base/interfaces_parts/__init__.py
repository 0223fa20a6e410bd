"""Interface parts package (one Protocol per module)."""

from .completion_model import CompletionModel
from .embedding_model import EmbeddingModel

__all__ = ["CompletionModel", "EmbeddingModel"]
