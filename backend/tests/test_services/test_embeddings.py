"""Tests for the Gemini embedding service."""

import pytest

from studio.services.ai.embeddings import EmbeddingError, EmbeddingService


@pytest.fixture
def mock_genai(mocker):
    """Mock the google.generativeai module used by the embedding service."""
    genai = mocker.patch("studio.services.ai.embeddings.genai")
    genai.embed_content.return_value = {"embedding": [0.1, 0.2, 0.3]}
    return genai


@pytest.fixture
def embedding_service(mock_genai) -> EmbeddingService:
    return EmbeddingService(api_key="test-key", model_name="models/test-embedding")


@pytest.mark.asyncio
async def test_embed_text_uses_document_task(embedding_service, mock_genai):
    embedding = await embedding_service.embed_text("clinical AI")

    assert embedding == [0.1, 0.2, 0.3]
    mock_genai.embed_content.assert_called_once_with(
        model="models/test-embedding",
        content="clinical AI",
        task_type="retrieval_document",
    )


@pytest.mark.asyncio
async def test_embed_query_uses_query_task(embedding_service, mock_genai):
    await embedding_service.embed_query("what about cardiology?")

    assert mock_genai.embed_content.call_args.kwargs["task_type"] == "retrieval_query"


def test_configures_api_key(embedding_service, mock_genai):
    mock_genai.configure.assert_called_once_with(api_key="test-key")


@pytest.mark.asyncio
async def test_provider_error_becomes_embedding_error(embedding_service, mock_genai):
    mock_genai.embed_content.side_effect = Exception("403 API key not valid")

    with pytest.raises(EmbeddingError, match="API key not valid"):
        await embedding_service.embed_text("clinical AI")


@pytest.mark.asyncio
async def test_empty_embedding_is_an_error(embedding_service, mock_genai):
    mock_genai.embed_content.return_value = {"embedding": []}

    with pytest.raises(EmbeddingError):
        await embedding_service.embed_text("clinical AI")


@pytest.mark.asyncio
async def test_missing_api_key(mock_genai):
    service = EmbeddingService(api_key="")

    with pytest.raises(EmbeddingError, match="GEMINI_API_KEY"):
        await service.embed_text("clinical AI")

    mock_genai.embed_content.assert_not_called()
    mock_genai.configure.assert_not_called()
