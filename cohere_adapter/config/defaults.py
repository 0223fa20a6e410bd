"""cohere_adapter.config.defaults
=============================

Central place for small, stable default values. These can be overridden via
environment variables or an external configuration file, but provide sane
fallbacks for local development and tests.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# Production API endpoint.
COHERE_API_BASE_URL = "https://api.cohere.ai"

# Default chat model when neither config nor caller selects one.
COHERE_DEFAULT_MODEL = "command-r"

# Default embedding model and input type used by config-driven construction.
COHERE_DEFAULT_EMBEDDING_MODEL = "embed-english-v3.0"
COHERE_DEFAULT_INPUT_TYPE = "search_document"

# Largest batch accepted by /v1/embed in one call.
COHERE_MAX_EMBED_DOCUMENTS = 96

# Pool key for the shared httpx client.
COHERE_HTTP_PURPOSE = "cohere"

__all__ = [
    "COHERE_API_BASE_URL",
    "COHERE_DEFAULT_MODEL",
    "COHERE_DEFAULT_EMBEDDING_MODEL",
    "COHERE_DEFAULT_INPUT_TYPE",
    "COHERE_MAX_EMBED_DOCUMENTS",
    "COHERE_HTTP_PURPOSE",
]
