"""Cohere provider adapter.

Example::

    from cohere_adapter.cohere import Client, COMMAND_R, CohereEmbeddingModel

    client = Client("YOUR_API_KEY")
    command_r = client.completion_model(COMMAND_R)
    embedder = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, "search_document")
"""

from .client import Client
from .completion import (
    COMMAND,
    COMMAND_LIGHT,
    COMMAND_LIGHT_NIGHTLY,
    COMMAND_NIGHTLY,
    COMMAND_R,
    COMMAND_R_PLUS,
    CompletionModel,
)
from .conversion import convert_message, convert_tool_definition, convert_type
from .embeddings import (
    CLASSIFICATION,
    CLUSTERING,
    SEARCH_DOCUMENT,
    SEARCH_QUERY,
    CohereEmbeddingModel,
    EmbeddingModel,
)
from .envelope import parse_api_response

__all__ = [
    "Client",
    "CompletionModel",
    "EmbeddingModel",
    "CohereEmbeddingModel",
    "COMMAND_R_PLUS",
    "COMMAND_R",
    "COMMAND",
    "COMMAND_NIGHTLY",
    "COMMAND_LIGHT",
    "COMMAND_LIGHT_NIGHTLY",
    "SEARCH_DOCUMENT",
    "SEARCH_QUERY",
    "CLASSIFICATION",
    "CLUSTERING",
    "convert_message",
    "convert_tool_definition",
    "convert_type",
    "parse_api_response",
]
