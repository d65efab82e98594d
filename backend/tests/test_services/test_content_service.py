"""Tests for content generation with retrieved context."""

import asyncio

import pytest

from studio.services.ai.gemini import GenerationError, GenerationResult
from studio.services.personas import Persona
from studio.services.prompts import (
    CompanySuggestion,
    GenerationOptions,
    GenerationType,
)


def post_options(topic: str) -> GenerationOptions:
    return GenerationOptions(type=GenerationType.POST, topic=topic)


@pytest.mark.asyncio
async def test_first_generation_has_no_context(content_service, mock_generator):
    generated = await content_service.generate(post_options("clinical AI"))

    assert generated.context_chunks == []
    prompt = mock_generator.generate.call_args.args[0]
    assert "Previously generated content" not in prompt
    assert mock_generator.generate.call_args.kwargs["grounded"] is True


@pytest.mark.asyncio
async def test_output_is_remembered(content_service, mock_generator):
    await content_service.generate(post_options("clinical AI"))

    assert content_service.store.texts() == [mock_generator.generate.return_value.text]


@pytest.mark.asyncio
async def test_related_output_is_injected(content_service, mock_generator, cardiology_document):
    await content_service.remember([cardiology_document, "Supply chain logistics update."])

    generated = await content_service.generate(post_options("cardiology AI diagnostics"))

    assert generated.context_chunks
    assert all("cardiology" in chunk for chunk in generated.context_chunks)
    prompt = mock_generator.generate.call_args.args[0]
    assert "Previously generated content" in prompt
    assert generated.context_chunks[0] in prompt
    assert "Supply chain logistics update." not in prompt


@pytest.mark.asyncio
async def test_query_embedding_failure_generates_without_context(
    content_service, fake_embeddings, mock_generator, cardiology_document
):
    await content_service.remember([cardiology_document])
    fake_embeddings.fail_queries = True

    generated = await content_service.generate(post_options("cardiology AI"))

    assert generated.context_chunks == []
    assert generated.result.text == mock_generator.generate.return_value.text


@pytest.mark.asyncio
async def test_generation_error_propagates(content_service, mock_generator):
    mock_generator.generate.side_effect = GenerationError("The AI service is currently experiencing issues.")

    with pytest.raises(GenerationError):
        await content_service.generate(post_options("clinical AI"))

    assert len(content_service.store) == 0


@pytest.mark.asyncio
async def test_humanify(content_service, mock_generator):
    mock_generator.generate.return_value = GenerationResult(text="Rewritten text")

    text = await content_service.humanify("Leverage synergies.", Persona.AI_TUTOR)

    assert text == "Rewritten text"
    assert mock_generator.generate.call_args.kwargs["grounded"] is False
    assert len(content_service.store) == 0


@pytest.mark.asyncio
async def test_remember_reports_new_chunks(content_service, cardiology_document):
    first = await content_service.remember([cardiology_document])
    second = await content_service.remember([cardiology_document])

    assert first.accepted is True
    assert first.chunks_stored == 2
    assert second.accepted is True
    assert second.chunks_stored == 0


@pytest.mark.asyncio
async def test_remember_while_busy_is_dropped(content_service, fake_embeddings):
    started = asyncio.Event()
    release = asyncio.Event()
    original_embed = fake_embeddings.embed_text

    async def slow_embed(text):
        started.set()
        await release.wait()
        return await original_embed(text)

    content_service.store._embed = slow_embed
    first = asyncio.create_task(content_service.remember(["clinical AI"]))
    await started.wait()

    outcome = await content_service.remember(["supply chain"])

    assert outcome.accepted is False
    assert outcome.chunks_stored == 0

    release.set()
    await first
    assert content_service.store.texts() == ["clinical AI"]


@pytest.mark.asyncio
async def test_recall_on_empty_store_skips_embedding(content_service, fake_embeddings):
    fake_embeddings.fail_queries = True

    assert await content_service.recall("anything") == []
    assert fake_embeddings.queries == []


@pytest.mark.asyncio
async def test_recall_with_zero_k_returns_nothing(content_service, cardiology_document):
    await content_service.remember([cardiology_document])

    assert await content_service.recall("cardiology AI diagnostics", k=0) == []
    assert await content_service.recall("cardiology AI diagnostics")


@pytest.mark.asyncio
async def test_recall_while_busy_skips_embedding(
    content_service, fake_embeddings, cardiology_document
):
    await content_service.remember([cardiology_document])
    started = asyncio.Event()
    release = asyncio.Event()
    original_embed = fake_embeddings.embed_text

    async def slow_embed(text):
        started.set()
        await release.wait()
        return await original_embed(text)

    content_service.store._embed = slow_embed
    adding = asyncio.create_task(content_service.remember(["supply chain"]))
    await started.wait()

    assert await content_service.recall("cardiology AI diagnostics") == []
    assert fake_embeddings.queries == []

    release.set()
    await adding


@pytest.mark.asyncio
async def test_missing_day_number_fails_before_generation(content_service, mock_generator):
    options = GenerationOptions(type=GenerationType.DAY_WISE_CONTENT_PLAN, topic="clinical AI")

    with pytest.raises(ValueError, match="day number"):
        await content_service.generate(options)

    mock_generator.generate.assert_not_called()


@pytest.mark.asyncio
async def test_ungrounded_type_is_sent_without_grounding(content_service, mock_generator):
    options = GenerationOptions(type=GenerationType.QUICK_WINS, topic="clinical AI")

    await content_service.generate(options)

    assert mock_generator.generate.call_args.kwargs["grounded"] is False
    assert mock_generator.generate.call_args.kwargs["context"] == "generate quick wins content"


class TestSuggestTopics:
    @pytest.mark.asyncio
    async def test_parses_json_array(self, content_service, mock_generator):
        mock_generator.generate.return_value = GenerationResult(
            text='["AI triage in ERs", "Wearables and arrhythmia", "LLMs for discharge notes"]'
        )

        topics = await content_service.suggest_topics(
            GenerationType.POST, Persona.MEDICAL_DOCTOR, ["Sepsis prediction"], "cardiology"
        )

        assert topics == ["AI triage in ERs", "Wearables and arrhythmia", "LLMs for discharge notes"]
        kwargs = mock_generator.generate.call_args.kwargs
        assert kwargs["json_output"] is True
        assert kwargs["grounded"] is False
        assert "- Sepsis prediction" in mock_generator.generate.call_args.args[0]
        assert len(content_service.store) == 0

    @pytest.mark.asyncio
    async def test_accepts_fenced_json(self, content_service, mock_generator):
        mock_generator.generate.return_value = GenerationResult(text='```json\n["One", "Two"]\n```')

        topics = await content_service.suggest_topics(GenerationType.POST, Persona.AI_TUTOR, [])

        assert topics == ["One", "Two"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text, detail",
        [
            ("Here are some ideas!", "not valid JSON"),
            ('{"topics": ["One"]}', "array of strings"),
            ('["One", 2]', "array of strings"),
        ],
    )
    async def test_rejects_unusable_answer(self, content_service, mock_generator, text, detail):
        mock_generator.generate.return_value = GenerationResult(text=text)

        with pytest.raises(GenerationError, match=detail) as exc_info:
            await content_service.suggest_topics(GenerationType.POST, Persona.AI_TUTOR, [])

        assert str(exc_info.value).startswith("Failed to get topic suggestions.")


class TestSuggestCompanies:
    @pytest.mark.asyncio
    async def test_parses_company_objects(self, content_service, mock_generator):
        mock_generator.generate.return_value = GenerationResult(
            text='[{"name": "Philips", "industry": "Healthcare"}, {"name": "Google", "industry": "Big Tech"}]'
        )

        companies = await content_service.suggest_companies(
            "clinical data scientist",
            [CompanySuggestion(name="Siemens Healthineers", industry="Healthcare")],
        )

        assert companies == [
            CompanySuggestion(name="Philips", industry="Healthcare"),
            CompanySuggestion(name="Google", industry="Big Tech"),
        ]
        assert "- Siemens Healthineers (Healthcare)" in mock_generator.generate.call_args.args[0]
        assert mock_generator.generate.call_args.kwargs["json_output"] is True

    @pytest.mark.asyncio
    async def test_rejects_objects_without_industry(self, content_service, mock_generator):
        mock_generator.generate.return_value = GenerationResult(text='[{"name": "Philips"}]')

        with pytest.raises(GenerationError, match="company objects"):
            await content_service.suggest_companies("data engineer", [])
