"""
CompletionResponse DTO pairing the normalized choice with the raw response.

``raw_response`` is the adapter's typed vendor response so callers needing
full fidelity (citations, search results, finish reason) can reach it
without a second request.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .model_choice import ModelChoice

RawT = TypeVar("RawT")


@dataclass
class CompletionResponse(Generic[RawT]):
    """Provider-agnostic result of a completion call.

    Attributes:
        choice: Normalized :data:`ModelChoice`.
        raw_response: Vendor response object.
    """

    choice: ModelChoice
    raw_response: RawT


__all__ = ["CompletionResponse"]
