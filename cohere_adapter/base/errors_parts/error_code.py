"""
Normalized adapter error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the Cohere adapter and the error
classification helpers. Values are lowercase snake_case and are considered a
stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    # Transport / HTTP status derived
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    # Adapter specific
    BAD_MODEL = "bad_model"
    DOCUMENT_MISMATCH = "document_mismatch"
    PROVIDER = "provider"
    PARSE = "parse"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
