"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `cohere_adapter.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .error_kinds import (
    BadModelError,
    DocumentCountError,
    HttpError,
    ResponseParseError,
    VendorError,
)
from .precondition_violation import PreconditionViolation
from .classification import RETRYABLE_CODES, classify_exception

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
