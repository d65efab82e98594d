"""Content generation with retrieval of previously generated context."""

from dataclasses import dataclass, field

import structlog

from studio.services.ai.embeddings import EmbeddingError, EmbeddingService
from studio.services.ai.gemini import (
    GeminiService,
    GenerationError,
    GenerationResult,
    parse_json_response,
)
from studio.services.personas import Persona
from studio.services.prompts import (
    CompanySuggestion,
    GenerationOptions,
    GenerationType,
    build_company_suggestions_prompt,
    build_humanify_prompt,
    build_prompt,
    build_topic_suggestions_prompt,
    with_prior_context,
)
from studio.services.rag.vector_store import VectorStore

logger = structlog.get_logger()


@dataclass
class ContentResult:
    """Generated content and the prior context injected into its prompt."""

    result: GenerationResult
    context_chunks: list[str] = field(default_factory=list)


@dataclass
class RememberResult:
    """Outcome of adding documents to the context store."""

    accepted: bool
    chunks_stored: int


def _invalid_response(context: str, detail: str) -> GenerationError:
    logger.warning("Unusable model response", context=context, detail=detail)
    return GenerationError(f"Failed to {context}. An unexpected error occurred: {detail}")


class ContentService:
    """
    Generates persona content and remembers it for later prompts.

    Each generation retrieves related earlier output from the context store,
    injects it into the prompt, and stores the new output afterwards.
    """

    def __init__(
        self,
        generator: GeminiService,
        embeddings: EmbeddingService,
        store: VectorStore,
        top_k: int = 3,
    ) -> None:
        self.generator = generator
        self.embeddings = embeddings
        self.store = store
        self.top_k = top_k

    async def generate(self, options: GenerationOptions) -> ContentResult:
        """
        Generate content for the given options.

        Raises:
            GenerationError: If the model call fails or times out.
            ValueError: If the generation type is not supported or a field it
                needs is missing.
        """
        built = build_prompt(options)
        context_chunks = await self.recall(options.topic, self.top_k)
        prompt = with_prior_context(built.text, context_chunks)

        result = await self.generator.generate(
            prompt,
            context=built.context,
            grounded=built.grounded,
        )

        await self.remember([result.text])

        return ContentResult(result=result, context_chunks=context_chunks)

    async def humanify(self, text: str, persona: Persona) -> str:
        """Rewrite text in the persona's voice."""
        built = build_humanify_prompt(text, persona)
        result = await self.generator.generate(
            built.text,
            context=built.context,
            grounded=built.grounded,
        )
        return result.text

    async def suggest_topics(
        self,
        generation_type: GenerationType,
        persona: Persona,
        existing: list[str],
        current_topic: str = "",
    ) -> list[str]:
        """
        Ask the model for five new topic ideas.

        Raises:
            GenerationError: If the call fails or the answer is not a JSON
                array of strings.
        """
        built = build_topic_suggestions_prompt(generation_type, persona, existing, current_topic)
        result = await self.generator.generate(
            built.text,
            context=built.context,
            grounded=False,
            json_output=True,
        )

        try:
            suggestions = parse_json_response(result.text)
        except ValueError as e:
            raise _invalid_response(built.context, "Response was not valid JSON.") from e

        if not isinstance(suggestions, list) or not all(
            isinstance(item, str) for item in suggestions
        ):
            raise _invalid_response(
                built.context, "Response was not a valid JSON array of strings."
            )
        return suggestions

    async def suggest_companies(
        self,
        role: str,
        existing: list[CompanySuggestion],
    ) -> list[CompanySuggestion]:
        """
        Ask the model for five new companies hiring for a role.

        Raises:
            GenerationError: If the call fails or the answer is not a JSON
                array of ``{"name", "industry"}`` objects.
        """
        built = build_company_suggestions_prompt(role, existing)
        result = await self.generator.generate(
            built.text,
            context=built.context,
            grounded=False,
            json_output=True,
        )

        try:
            companies = parse_json_response(result.text)
        except ValueError as e:
            raise _invalid_response(built.context, "Response was not valid JSON.") from e

        if not isinstance(companies, list) or not all(
            isinstance(item, dict) and "name" in item and "industry" in item
            for item in companies
        ):
            raise _invalid_response(
                built.context, "Response was not a valid JSON array of company objects."
            )
        return [
            CompanySuggestion(name=str(item["name"]), industry=str(item["industry"]))
            for item in companies
        ]

    async def remember(self, texts: list[str]) -> RememberResult:
        """
        Add documents to the context store.

        The batch is dropped when another add is in flight.
        """
        if self.store.is_busy:
            logger.warning("Context store busy, documents not remembered", documents=len(texts))
            return RememberResult(accepted=False, chunks_stored=0)

        before = len(self.store)
        await self.store.add_documents(texts)
        return RememberResult(accepted=True, chunks_stored=len(self.store) - before)

    async def recall(self, query: str, k: int | None = None) -> list[str]:
        """
        Find stored chunks related to a query.

        Nothing is embedded while the store is empty or busy. Embedding
        failures yield no context rather than an error.
        """
        if not len(self.store) or self.store.is_busy:
            return []

        try:
            query_embedding = await self.embeddings.embed_query(query)
        except EmbeddingError as e:
            logger.warning("Query embedding failed, continuing without context", error=str(e))
            return []

        limit = self.top_k if k is None else k
        chunks = self.store.similarity_search(query_embedding, limit)
        logger.debug("Context retrieved", query_preview=query[:80], chunks=len(chunks))
        return chunks
