"""Embedding service for vector operations."""

import asyncio

import google.generativeai as genai
import structlog

from studio.core.config import settings

logger = structlog.get_logger()


class EmbeddingError(Exception):
    """Exception raised when the provider cannot embed a text."""

    pass


class EmbeddingService:
    """Service for generating text embeddings with Gemini."""

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_EMBEDDING_MODEL
        if self.api_key:
            genai.configure(api_key=self.api_key)

    async def embed_text(self, text: str) -> list[float]:
        """
        Generate embedding for a document chunk.

        Args:
            text: Text to embed.

        Returns:
            Embedding vector as list of floats.

        Raises:
            EmbeddingError: If the provider rejects the request.
        """
        return await self._embed(text, task_type="retrieval_document")

    async def embed_query(self, query: str) -> list[float]:
        """
        Generate embedding for a search query.

        Uses a different task type optimized for queries.

        Args:
            query: Search query text.

        Returns:
            Query embedding vector.

        Raises:
            EmbeddingError: If the provider rejects the request.
        """
        return await self._embed(query, task_type="retrieval_query")

    async def _embed(self, text: str, task_type: str) -> list[float]:
        if not self.api_key:
            raise EmbeddingError("GEMINI_API_KEY is not set")

        # Run in thread pool since the Gemini SDK is sync
        try:
            result = await asyncio.to_thread(
                genai.embed_content,
                model=self.model_name,
                content=text,
                task_type=task_type,
            )
        except Exception as e:
            logger.error("Gemini embedding error", task_type=task_type, error=str(e))
            raise EmbeddingError(str(e)) from e

        embedding = result.get("embedding") if result else None
        if not embedding:
            raise EmbeddingError("Provider returned an empty embedding")

        return list(embedding)
