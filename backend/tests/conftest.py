"""Pytest fixtures for testing."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from studio.core.config import settings
from studio.main import app
from studio.services.ai.embeddings import EmbeddingError
from studio.services.ai.gemini import GeminiService, GenerationResult
from studio.services.content import ContentService
from studio.services.rag.vector_store import VectorStore


# Each topic is one axis of the fake embedding space
TOPIC_KEYWORDS = {
    "health": {"ai", "cardiology", "diagnostics", "clinical", "patients", "healthcare"},
    "logistics": {"supply", "chain", "logistics", "warehouse", "shipping", "inventory"},
    "finance": {"budget", "revenue", "quarterly", "earnings", "finance"},
}


def keyword_vector(text: str) -> list[float]:
    """Embed text by counting topic keywords, plus a small bias axis."""
    words = [word.strip(".,!?:;").lower() for word in text.split()]
    vector = [float(sum(word in keywords for word in words)) for keywords in TOPIC_KEYWORDS.values()]
    vector.append(0.1)
    return vector


async def keyword_embed(text: str) -> list[float]:
    return keyword_vector(text)


class FakeEmbeddingService:
    """Stand-in for EmbeddingService that never touches the network."""

    def __init__(self) -> None:
        self.fail_queries = False
        self.calls: list[str] = []
        self.queries: list[str] = []

    async def embed_text(self, text: str) -> list[float]:
        self.calls.append(text)
        return keyword_vector(text)

    async def embed_query(self, query: str) -> list[float]:
        self.queries.append(query)
        if self.fail_queries:
            raise EmbeddingError("429 quota exceeded")
        return keyword_vector(query)


@pytest.fixture
def embedder():
    """Synchronous keyword embedding, for computing expected scores."""
    return keyword_vector


@pytest.fixture
def cardiology_document() -> str:
    """About 150 words on AI in cardiology."""
    return "AI improves diagnostics in cardiology. " * 30


@pytest.fixture
def logistics_document() -> str:
    return "Supply chain logistics depend on warehouse shipping schedules."


@pytest.fixture
def vector_store() -> VectorStore:
    """Empty context store with the keyword embedding."""
    return VectorStore(embed=keyword_embed)


@pytest.fixture
def fake_embeddings() -> FakeEmbeddingService:
    return FakeEmbeddingService()


@pytest.fixture
def mock_generator(mocker):
    """Mock Gemini generation service."""
    generator = mocker.AsyncMock(spec=GeminiService)
    generator.generate.return_value = GenerationResult(
        text="Mock generated post about healthcare AI and clinical diagnostics.",
    )
    return generator


@pytest.fixture
def content_service(mock_generator, fake_embeddings) -> ContentService:
    store = VectorStore(embed=fake_embeddings.embed_text)
    return ContentService(
        generator=mock_generator,
        embeddings=fake_embeddings,
        store=store,
        top_k=3,
    )


@pytest.fixture
def debug_mode(monkeypatch):
    """Skip API key verification."""
    monkeypatch.setattr(settings, "DEBUG", True)


@pytest_asyncio.fixture
async def client(content_service: ContentService, debug_mode) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with fake services on app.state."""
    app.state.vector_store = content_service.store
    app.state.content_service = content_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
