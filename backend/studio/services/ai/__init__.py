"""AI services for LLM and embedding operations."""

from studio.services.ai.embeddings import EmbeddingError, EmbeddingService
from studio.services.ai.gemini import (
    GeminiService,
    GenerationError,
    GenerationResult,
    Source,
    parse_json_response,
)

__all__ = [
    "EmbeddingError",
    "EmbeddingService",
    "GeminiService",
    "GenerationError",
    "GenerationResult",
    "Source",
    "parse_json_response",
]
