"""CompletionModel Protocol (single-class module).

Defines the chat completion capability agents and extractors call into.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..models import CompletionRequest, CompletionResponse


@runtime_checkable
class CompletionModel(Protocol):
    """Minimal interface for completion adapters.

    Implementations map :class:`CompletionRequest` onto their wire format and
    return a :class:`CompletionResponse` whose ``choice`` is normalized and
    whose ``raw_response`` keeps the vendor payload.
    """

    def completion(self, request: CompletionRequest) -> CompletionResponse[Any]:
        """Execute a single completion request.

        Raises:
            ProviderError: On transport, vendor or response failures.
            PreconditionViolation: When the request itself is malformed.
        """
        ...


__all__ = ["CompletionModel"]
