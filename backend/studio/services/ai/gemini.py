"""Gemini AI service for text generation."""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

import google.generativeai as genai
import structlog

from studio.core.config import settings

logger = structlog.get_logger()


class GenerationError(Exception):
    """Exception raised when content generation fails.

    The message is safe to show to end users.
    """

    pass


@dataclass
class Source:
    """A web page used to ground a generated answer."""

    uri: str
    title: str


@dataclass
class GenerationResult:
    """Generated text and the sources it was grounded on."""

    text: str
    sources: list[Source] = field(default_factory=list)


def describe_api_error(error: BaseException, context: str) -> GenerationError:
    """
    Translate a provider error into a user-facing GenerationError.

    Args:
        error: Exception raised by the SDK.
        context: What was being attempted, e.g. "generate LinkedIn post".

    Returns:
        GenerationError with a friendly message.
    """
    message = str(error).lower()

    if "api key not valid" in message or "permission denied" in message or "403" in message:
        return GenerationError(
            "Invalid API Key. Please ensure it is set correctly in your environment variables."
        )
    if "rate limit" in message or "429" in message:
        return GenerationError(
            "You've exceeded the API request limit. Please wait a moment and try again."
        )
    if "candidate was blocked" in message or "safety policy" in message:
        return GenerationError(
            "The request was blocked due to safety policies. Please try a different topic."
        )
    if "400" in message:
        return GenerationError(
            "The request was malformed or invalid. This can happen with unusual topics."
        )
    if "500" in message or "internal error" in message:
        return GenerationError(
            "The AI service is currently experiencing issues. Please try again later."
        )
    if not message:
        return GenerationError(f"An unknown error occurred while trying to {context}.")
    return GenerationError(f"Failed to {context}. An unexpected error occurred: {error}")


def parse_json_response(response_text: str) -> Any:
    """
    Parse JSON from model output, tolerating Markdown code fences.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    json_str = response_text
    if "```json" in response_text:
        json_str = response_text.split("```json")[1].split("```")[0]
    elif "```" in response_text:
        json_str = response_text.split("```")[1].split("```")[0]

    return json.loads(json_str.strip())


class GeminiService:
    """Service for Gemini text generation."""

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.GENERATION_TIMEOUT_SECONDS
        )
        if self.api_key:
            genai.configure(api_key=self.api_key)
        self._model = None
        self._grounded_model = None

    @property
    def model(self):
        """Get text generation model."""
        if self._model is None:
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    @property
    def grounded_model(self):
        """Get model with Google Search retrieval attached."""
        if self._grounded_model is None:
            self._grounded_model = genai.GenerativeModel(
                self.model_name,
                tools="google_search_retrieval",
            )
        return self._grounded_model

    async def generate(
        self,
        prompt: str,
        context: str,
        grounded: bool = False,
        temperature: float = 0.7,
        json_output: bool = False,
    ) -> GenerationResult:
        """
        Generate text for a prompt.

        The call is raced against ``timeout_seconds``; expiry counts as a
        failure.

        Args:
            prompt: Full prompt text.
            context: Short description of the task, used in error messages.
            grounded: Ask for Google Search grounding when enabled in settings.
            temperature: Sampling temperature.
            json_output: Ask the model to answer with JSON only.

        Returns:
            GenerationResult with text and grounding sources.

        Raises:
            GenerationError: On configuration, provider or timeout failure.
        """
        if not self.api_key:
            raise GenerationError(
                "Configuration error: The GEMINI_API_KEY is missing. "
                "Please set it up to use the application."
            )

        use_grounding = grounded and settings.GEMINI_SEARCH_GROUNDING
        model = self.grounded_model if use_grounding else self.model
        generation_config = genai.GenerationConfig(
            temperature=temperature,
            response_mime_type="application/json" if json_output else None,
        )

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    model.generate_content,
                    prompt,
                    generation_config=generation_config,
                ),
                timeout=self.timeout_seconds,
            )
            text = response.text
        except asyncio.TimeoutError as e:
            logger.error("Gemini generation timed out", context=context, timeout=self.timeout_seconds)
            raise GenerationError(
                f"The request to {context} timed out. Please try again."
            ) from e
        except Exception as e:
            logger.error("Gemini generation error", context=context, error=str(e))
            raise describe_api_error(e, context) from e

        sources = self._extract_sources(response) if use_grounding else []
        logger.info(
            "Content generated",
            context=context,
            grounded=use_grounding,
            length=len(text),
            sources=len(sources),
        )
        return GenerationResult(text=text, sources=sources)

    @staticmethod
    def _extract_sources(response: Any) -> list[Source]:
        """Collect web sources from the first candidate's grounding metadata."""
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return []

        metadata = getattr(candidates[0], "grounding_metadata", None)
        chunks = getattr(metadata, "grounding_chunks", None) or []

        sources = []
        for chunk in chunks:
            web = getattr(chunk, "web", None)
            uri = getattr(web, "uri", None)
            title = getattr(web, "title", None)
            if uri and title:
                sources.append(Source(uri=uri, title=title))
        return sources
