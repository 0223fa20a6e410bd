"""Response envelope discrimination for Cohere payloads.

Cohere answers a 2xx request with either the expected payload or an error
object carrying a ``message``. Discrimination is an explicit two-phase parse:

1. validate against the success schema;
2. on failure, validate against :class:`ApiErrorResponse`;
3. when both fail, raise :class:`ResponseParseError`.

A payload that parses as an error is returned, not raised, so the caller can
turn it into a :class:`VendorError` with its own model context.
"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from ..base.errors import ResponseParseError
from .schemas import ApiErrorResponse

ModelT = TypeVar("ModelT", bound=BaseModel)

PROVIDER_NAME = "cohere"


def decode_json(response: httpx.Response, *, model: Optional[str] = None) -> Any:
    """Return the decoded JSON body of ``response``.

    Raises:
        ResponseParseError: When the body is not valid JSON.
    """
    try:
        return response.json()
    except ValueError as e:
        raise ResponseParseError(
            message=f"response body is not valid JSON: {e}",
            provider=PROVIDER_NAME,
            model=model,
            raw=e,
        ) from e


def parse_api_response(
    payload: Any,
    schema: Type[ModelT],
    *,
    model: Optional[str] = None,
) -> Union[ModelT, ApiErrorResponse]:
    """Classify ``payload`` as a success ``schema`` instance or an error envelope.

    Parameters:
        payload: Decoded JSON value.
        schema: Pydantic model describing the success payload.
        model: Model name for error context.

    Returns:
        The validated success model, or an :class:`ApiErrorResponse`.

    Raises:
        ResponseParseError: When ``payload`` fits neither shape. The error
            carries the success-schema validation failure as ``raw``.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as success_error:
        try:
            return ApiErrorResponse.model_validate(payload)
        except ValidationError:
            raise ResponseParseError(
                message=(
                    f"response matched neither {schema.__name__} nor the error envelope: "
                    f"{success_error.error_count()} validation error(s)"
                ),
                provider=PROVIDER_NAME,
                model=model,
                raw=success_error,
            ) from success_error


__all__ = ["decode_json", "parse_api_response", "PROVIDER_NAME"]
