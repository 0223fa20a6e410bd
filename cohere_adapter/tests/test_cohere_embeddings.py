"""Unit tests for the Cohere embedding adapter.

Covers the model enumeration (string bijection, dimensionality, bad names)
and ``embed_documents`` against a mocked ``/v1/embed``: request body, order
preservation, count mismatch, vendor error envelope and unparsable bodies.
"""
from __future__ import annotations

import httpx
import pytest

from cohere_adapter.base.errors import (
    BadModelError,
    DocumentCountError,
    ErrorCode,
    HttpError,
    ResponseParseError,
    VendorError,
)
from cohere_adapter.base.interfaces import EmbeddingModel as EmbeddingModelProtocol
from cohere_adapter.cohere import SEARCH_DOCUMENT, CohereEmbeddingModel, EmbeddingModel

from .utils import embed_payload, json_response, text_response


EXPECTED_NDIMS = {
    "embed-english-v3.0": 1024,
    "embed-english-light-v3.0": 384,
    "embed-multilingual-v3.0": 1024,
    "embed-multilingual-light-v3.0": 384,
    "embed-english-v2.0": 4096,
    "embed-english-light-v2.0": 1024,
    "embed-multilingual-v2.0": 768,
}


@pytest.mark.parametrize("model", list(CohereEmbeddingModel))
def test_model_name_round_trip(model: CohereEmbeddingModel) -> None:
    assert CohereEmbeddingModel.parse(str(model)) is model


def test_enumeration_is_closed_over_seven_models() -> None:
    assert {str(m) for m in CohereEmbeddingModel} == set(EXPECTED_NDIMS)


def test_parse_unknown_model_raises_bad_model() -> None:
    with pytest.raises(BadModelError) as exc_info:
        CohereEmbeddingModel.parse("embed-klingon-v9")
    assert exc_info.value.code is ErrorCode.BAD_MODEL
    assert exc_info.value.model == "embed-klingon-v9"


def test_adapter_rejects_unknown_model_string(make_client) -> None:
    client, _ = make_client(json_response({}))
    with pytest.raises(BadModelError):
        client.embedding_model("text-embedding-3-small", SEARCH_DOCUMENT)


@pytest.mark.parametrize("name,dims", sorted(EXPECTED_NDIMS.items()))
def test_ndims_per_model(make_client, name: str, dims: int) -> None:
    client, _ = make_client(json_response({}))
    assert client.embedding_model(name, SEARCH_DOCUMENT).ndims() == dims


def test_max_documents_and_protocol_conformance(make_client) -> None:
    client, _ = make_client(json_response({}))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, SEARCH_DOCUMENT)
    assert EmbeddingModel.MAX_DOCUMENTS == 96
    assert isinstance(model, EmbeddingModelProtocol)


def test_embed_documents_sends_expected_body(make_client) -> None:
    client, transport = make_client(json_response(embed_payload([[0.1], [0.2]], ["a", "b"])))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_MULTILINGUAL_V3, "search_query")

    model.embed_documents(["a", "b"])

    assert len(transport.requests) == 1
    req = transport.requests[0]
    assert req.method == "POST"
    assert str(req.url) == "https://api.cohere.test/v1/embed"
    assert req.headers["Authorization"] == "Bearer co-unit-key"
    assert transport.bodies[0] == {
        "model": "embed-multilingual-v3.0",
        "texts": ["a", "b"],
        "input_type": "search_query",
    }


def test_embed_documents_preserves_order(make_client) -> None:
    vectors = [[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]]
    client, _ = make_client(json_response(embed_payload(vectors, ["a", "b"])))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, SEARCH_DOCUMENT)

    result = model.embed_documents(["a", "b"])

    assert [e.document for e in result] == ["a", "b"]
    assert [e.vec for e in result] == vectors


@pytest.mark.parametrize("returned", [1, 3])
def test_embed_documents_count_mismatch_is_an_error(make_client, returned: int) -> None:
    vectors = [[float(i)] for i in range(returned)]
    client, _ = make_client(json_response(embed_payload(vectors, ["x"] * returned)))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, SEARCH_DOCUMENT)

    with pytest.raises(DocumentCountError) as exc_info:
        model.embed_documents(["a", "b"])

    err = exc_info.value
    assert err.expected == 2
    assert err.received == returned
    assert "Expected 2 embeddings" in err.message


def test_embed_documents_vendor_error_message_verbatim(make_client) -> None:
    client, _ = make_client(json_response({"message": "invalid input_type: 'nope'"}))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, "nope")

    with pytest.raises(VendorError) as exc_info:
        model.embed_documents(["a"])

    assert exc_info.value.message == "invalid input_type: 'nope'"
    assert exc_info.value.code is ErrorCode.PROVIDER


def test_embed_documents_unrecognized_payload_is_parse_error(make_client) -> None:
    client, _ = make_client(json_response({"unexpected": True}))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, SEARCH_DOCUMENT)

    with pytest.raises(ResponseParseError) as exc_info:
        model.embed_documents(["a"])
    assert not isinstance(exc_info.value, VendorError)


def test_embed_documents_non_json_body_is_parse_error(make_client) -> None:
    client, _ = make_client(text_response("<html>gateway</html>"))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, SEARCH_DOCUMENT)

    with pytest.raises(ResponseParseError):
        model.embed_documents(["a"])


def test_embed_documents_http_status_error(make_client) -> None:
    client, _ = make_client(json_response({"message": "invalid api token"}, status=401))
    model = client.embedding_model(CohereEmbeddingModel.EMBED_ENGLISH_V3, SEARCH_DOCUMENT)

    with pytest.raises(HttpError) as exc_info:
        model.embed_documents(["a"])

    assert exc_info.value.status == 401
    assert exc_info.value.code is ErrorCode.AUTH
    assert isinstance(exc_info.value.raw, httpx.HTTPStatusError)
