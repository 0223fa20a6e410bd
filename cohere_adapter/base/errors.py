"""Unified adapter error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``cohere_adapter.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.error_kinds import (
    BadModelError,
    DocumentCountError,
    HttpError,
    ResponseParseError,
    VendorError,
)
from .errors_parts.precondition_violation import PreconditionViolation
from .errors_parts.classification import RETRYABLE_CODES, classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "BadModelError",
    "DocumentCountError",
    "HttpError",
    "ResponseParseError",
    "VendorError",
    "PreconditionViolation",
    "RETRYABLE_CODES",
    "classify_exception",
]
