"""
Kind-specific :class:`ProviderError` subclasses.

Each subclass pins the failure kind so callers can branch with ``except``
clauses instead of inspecting ``code``. Constructors fill in the matching
:class:`ErrorCode` where the kind implies one, so call sites only supply the
message and context.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class BadModelError(ProviderError):
    """An embedding model string did not match any known vendor model."""

    def __init__(self, name: str, provider: str) -> None:
        super().__init__(
            code=ErrorCode.BAD_MODEL,
            message=f"unknown embedding model '{name}'",
            provider=provider,
            model=name,
        )


class HttpError(ProviderError):
    """Network failure or non-2xx HTTP status returned by the vendor.

    ``status`` is ``None`` when no response was received (connect errors,
    timeouts, protocol errors). ``code`` comes from ``classify_exception``.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        provider: str,
        model: Optional[str] = None,
        *,
        status: Optional[int] = None,
        retryable: bool = False,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=retryable,
            raw=raw,
        )
        self.status = status


class DocumentCountError(ProviderError):
    """The vendor returned a different number of embeddings than submitted."""

    def __init__(self, expected: int, received: int, provider: str, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.DOCUMENT_MISMATCH,
            message=f"Expected {expected} embeddings, got {received}",
            provider=provider,
            model=model,
        )
        self.expected = expected
        self.received = received


class VendorError(ProviderError):
    """The vendor answered with an error envelope; ``message`` is verbatim."""

    def __init__(self, message: str, provider: str, model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.PROVIDER, message=message, provider=provider, model=model)


class ResponseParseError(ProviderError):
    """The response matched neither the success schema nor the error schema."""

    def __init__(
        self,
        message: str,
        provider: str,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(code=ErrorCode.PARSE, message=message, provider=provider, model=model, raw=raw)


__all__ = [
    "BadModelError",
    "HttpError",
    "DocumentCountError",
    "VendorError",
    "ResponseParseError",
]
