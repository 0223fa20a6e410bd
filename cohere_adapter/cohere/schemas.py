"""
Pydantic models for the Cohere v1 wire format.

Response models describe the success payloads of ``/v1/embed`` and
``/v1/chat``; validating against them is the first phase of envelope parsing
(see :mod:`cohere_adapter.cohere.envelope`). Required fields are exactly the
ones the vendor always sends, so an error body such as ``{"message": ...}``
fails validation and falls through to the error schema. Unknown fields are
ignored so new vendor additions do not break parsing.

Request-side models (:class:`Parameter`, :class:`ToolDefinition`,
:class:`Message`) are produced by :mod:`cohere_adapter.cohere.conversion`.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------- shared meta


class ApiVersion(BaseModel):
    version: str
    is_deprecated: Optional[bool] = None
    is_experimental: Optional[bool] = None


class BilledUnits(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0
    search_units: int = 0
    classifications: int = 0


class Meta(BaseModel):
    """Response metadata: API version, billing and vendor warnings."""

    api_version: ApiVersion
    billed_units: BilledUnits
    warnings: List[str] = Field(default_factory=list)

    def token_usage(self) -> Dict[str, Optional[int]]:
        """Return billed tokens in the canonical ``prompt/completion/total`` shape."""
        prompt = self.billed_units.input_tokens
        completion = self.billed_units.output_tokens
        return {"prompt": prompt, "completion": completion, "total": prompt + completion}


class ApiErrorResponse(BaseModel):
    """Error envelope returned instead of a success payload."""

    message: str


# ------------------------------------------------------------------ embedding


class EmbeddingResponse(BaseModel):
    """Success payload of ``POST /v1/embed``."""

    response_type: Optional[str] = None
    id: str
    embeddings: List[List[float]]
    texts: List[str]
    meta: Optional[Meta] = None


# ----------------------------------------------------------------------- chat


class Citation(BaseModel):
    start: int
    end: int
    text: str
    document_ids: List[str]


class Document(BaseModel):
    """A grounding document echoed by the vendor; extra keys are preserved."""

    model_config = ConfigDict(extra="allow")

    id: str

    @property
    def additional_prop(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class SearchQuery(BaseModel):
    text: str
    generation_id: str


class Connector(BaseModel):
    id: str


class SearchResult(BaseModel):
    search_query: SearchQuery
    connector: Connector
    document_ids: List[str]
    error_message: Optional[str] = None
    continue_on_failure: bool = False


class ToolCall(BaseModel):
    name: str
    parameters: Any


class ChatHistory(BaseModel):
    role: str
    message: str


class CompletionResponse(BaseModel):
    """Success payload of ``POST /v1/chat``."""

    text: str
    generation_id: str
    citations: List[Citation] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)
    is_search_required: Optional[bool] = None
    search_queries: List[SearchQuery] = Field(default_factory=list)
    search_results: List[SearchResult] = Field(default_factory=list)
    finish_reason: str
    tool_calls: List[ToolCall] = Field(default_factory=list)
    chat_history: List[ChatHistory] = Field(default_factory=list)
    meta: Optional[Meta] = None


# -------------------------------------------------------------- request side


ParameterType = Literal["string", "number", "integer", "boolean", "array", "object"]


class Parameter(BaseModel):
    """Vendor tool parameter definition."""

    description: str
    type: ParameterType
    required: bool


class ToolDefinition(BaseModel):
    """Vendor tool definition: a flat map of parameter definitions."""

    name: str
    description: str
    parameter_definitions: Dict[str, Parameter] = Field(default_factory=dict)


VendorRole = Literal["SYSTEM", "USER", "CHATBOT"]


class Message(BaseModel):
    """Vendor chat history entry."""

    role: VendorRole
    message: str


__all__ = [
    "ApiVersion",
    "BilledUnits",
    "Meta",
    "ApiErrorResponse",
    "EmbeddingResponse",
    "Citation",
    "Document",
    "SearchQuery",
    "Connector",
    "SearchResult",
    "ToolCall",
    "ChatHistory",
    "CompletionResponse",
    "ParameterType",
    "Parameter",
    "ToolDefinition",
    "VendorRole",
    "Message",
]
