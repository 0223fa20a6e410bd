"""Cohere completion adapter.

Purpose:
    Implement the :class:`~cohere_adapter.base.interfaces.CompletionModel`
    capability against ``POST /v1/chat``.

Request mapping:
    ``CompletionRequest`` -> ``{model, preamble, message, documents,
    chat_history, temperature, tools}``. Chat history roles go through
    :func:`convert_message` and tools through
    :func:`convert_tool_definition`. ``additional_params`` is merged on top
    with :func:`merge`, so callers can set or override any field.

Response mapping:
    When the vendor returns tool calls, the first one becomes a
    :class:`ToolCallChoice` and any others are dropped from the choice (they
    stay available on ``raw_response.tool_calls``). Otherwise the text
    becomes a :class:`MessageChoice`.

Failure semantics:
    - transport / non-2xx        -> :class:`HttpError`
    - error envelope             -> :class:`VendorError`
    - body fits neither schema   -> :class:`ResponseParseError`
    - malformed tool definition  -> :class:`PreconditionViolation` (before any I/O)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Dict

from ..base.errors import ProviderError, VendorError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    CompletionRequest,
    CompletionResponse,
    MessageChoice,
    ModelChoice,
    ToolCallChoice,
)
from ..base.utils.json_utils import merge
from . import schemas
from .conversion import convert_message, convert_tool_definition
from .envelope import PROVIDER_NAME, decode_json, parse_api_response

if TYPE_CHECKING:
    from .client import Client

CHAT_PATH = "/v1/chat"

# Completion model names. "comman-r-plus" (a misspelling seen in older
# clients) is rejected by the API.
COMMAND_R_PLUS = "command-r-plus"
COMMAND_R = "command-r"
COMMAND = "command"
COMMAND_NIGHTLY = "command-nightly"
COMMAND_LIGHT = "command-light"
COMMAND_LIGHT_NIGHTLY = "command-light-nightly"


def choice_from_response(response: schemas.CompletionResponse) -> ModelChoice:
    """Return the normalized choice for a vendor chat response."""
    if response.tool_calls:
        first = response.tool_calls[0]
        return ToolCallChoice(name=first.name, parameters=first.parameters)
    return MessageChoice(text=response.text)


class CompletionModel:
    """Completion adapter bound to a client and a chat model name.

    The model name is an open string: any value the vendor accepts works,
    the ``COMMAND_*`` constants are conveniences.
    """

    def __init__(self, client: "Client", model: str) -> None:
        self._client = client
        self.model = model
        self._logger = get_logger("providers.cohere")

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    def build_request_body(self, request: CompletionRequest) -> Dict[str, Any]:
        """Return the ``/v1/chat`` JSON body for ``request``.

        Raises:
            PreconditionViolation: When a tool definition is malformed.
        """
        body: Dict[str, Any] = {
            "model": self.model,
            "preamble": request.preamble,
            "message": request.prompt,
            "documents": [d.to_dict() for d in request.documents],
            "chat_history": [convert_message(m).model_dump() for m in request.chat_history],
            "temperature": request.temperature,
            "tools": [convert_tool_definition(t).model_dump() for t in request.tools],
        }
        if request.additional_params is not None:
            body = merge(body, request.additional_params)
        return body

    def completion(self, request: CompletionRequest) -> CompletionResponse[schemas.CompletionResponse]:
        """Execute one chat request and normalize the answer.

        Returns:
            :class:`CompletionResponse` with the normalized ``choice`` and the
            typed vendor response as ``raw_response``.

        Raises:
            HttpError, VendorError, ResponseParseError, PreconditionViolation.
        """
        body = self.build_request_body(request)
        ctx = LogContext(provider=PROVIDER_NAME, model=self.model, operation="chat")
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            has_tools=bool(request.tools),
            documents=len(request.documents),
            history=len(request.chat_history),
            temperature=request.temperature,
            has_additional_params=request.additional_params is not None,
        )

        t0 = time.perf_counter()
        try:
            response = self._client.send(self._client.post(CHAT_PATH, json=body), model=self.model)
            parsed = parse_api_response(
                decode_json(response, model=self.model),
                schemas.CompletionResponse,
                model=self.model,
            )
            if isinstance(parsed, schemas.ApiErrorResponse):
                raise VendorError(parsed.message, PROVIDER_NAME, self.model)
        except ProviderError as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                emitted=False,
                error_code=e.code.value,
                error=e.message,
                level=logging.WARNING,
            )
            raise

        choice = choice_from_response(parsed)
        ctx.response_id = parsed.generation_id
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=parsed.meta.token_usage() if parsed.meta else None,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            finish_reason=parsed.finish_reason,
            choice=type(choice).__name__,
            tool_calls=len(parsed.tool_calls),
        )
        return CompletionResponse(choice=choice, raw_response=parsed)


__all__ = [
    "CompletionModel",
    "choice_from_response",
    "CHAT_PATH",
    "COMMAND_R_PLUS",
    "COMMAND_R",
    "COMMAND",
    "COMMAND_NIGHTLY",
    "COMMAND_LIGHT",
    "COMMAND_LIGHT_NIGHTLY",
]
