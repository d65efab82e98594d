"""Tests for content generation API endpoints."""

import pytest
from httpx import AsyncClient

from studio.core.config import settings
from studio.services.ai.gemini import GenerationError, GenerationResult, Source


@pytest.mark.asyncio
async def test_generate_post(client: AsyncClient, mock_generator):
    mock_generator.generate.return_value = GenerationResult(
        text="Healthcare AI post",
        sources=[Source(uri="https://example.org", title="Example")],
    )

    response = await client.post(
        "/api/v1/content/generate",
        json={"type": "post", "topic": "AI in cardiology", "tone": "casual"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "post"
    assert data["topic"] == "AI in cardiology"
    assert data["text"] == "Healthcare AI post"
    assert data["sources"] == [{"uri": "https://example.org", "title": "Example"}]
    assert data["context_used"] == 0


@pytest.mark.asyncio
async def test_generate_uses_earlier_output(client: AsyncClient, cardiology_document):
    await client.post("/api/v1/context/documents", json={"texts": [cardiology_document]})

    response = await client.post(
        "/api/v1/content/generate",
        json={"type": "document", "topic": "cardiology AI diagnostics", "page_count": 2},
    )

    assert response.status_code == 200
    assert response.json()["context_used"] == 2


@pytest.mark.asyncio
async def test_generate_provider_failure(client: AsyncClient, mock_generator):
    mock_generator.generate.side_effect = GenerationError(
        "You've exceeded the API request limit. Please wait a moment and try again."
    )

    response = await client.post(
        "/api/v1/content/generate",
        json={"topic": "AI in cardiology"},
    )

    assert response.status_code == 502
    assert "request limit" in response.json()["detail"]


@pytest.mark.asyncio
async def test_generate_rejects_unknown_type(client: AsyncClient):
    response = await client.post(
        "/api/v1/content/generate",
        json={"type": "video", "topic": "AI in cardiology"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_generate_requires_topic(client: AsyncClient):
    response = await client.post("/api/v1/content/generate", json={"type": "post"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_humanify(client: AsyncClient, mock_generator):
    mock_generator.generate.return_value = GenerationResult(text="Friendlier text")

    response = await client.post(
        "/api/v1/content/humanify",
        json={"text": "Leverage synergies.", "persona": "aiTutor"},
    )

    assert response.status_code == 200
    assert response.json() == {"text": "Friendlier text"}


@pytest.mark.asyncio
async def test_api_key_required(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)

    missing = await client.post("/api/v1/content/generate", json={"topic": "AI"})
    wrong = await client.post(
        "/api/v1/content/generate",
        json={"topic": "AI"},
        headers={"X-API-Key": "wrong"},
    )
    right = await client.post(
        "/api/v1/content/generate",
        json={"topic": "AI"},
        headers={"X-API-Key": settings.SECRET_KEY},
    )

    assert missing.status_code == 401
    assert wrong.status_code == 403
    assert right.status_code == 200


@pytest.mark.asyncio
async def test_generate_day_wise_plan(client: AsyncClient, mock_generator):
    response = await client.post(
        "/api/v1/content/generate",
        json={"type": "dayWiseContentPlan", "topic": "AI in cardiology", "day_number": 3},
    )

    assert response.status_code == 200
    assert response.json()["type"] == "dayWiseContentPlan"
    assert "ONLY for Day 3" in mock_generator.generate.call_args.args[0]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "detail"),
    [
        ({"type": "dayWiseContentPlan", "topic": "AI in cardiology"}, "day number is required"),
        ({"type": "resumeTailoring", "topic": "Clinical Data Scientist"}, "company name is required"),
    ],
)
async def test_generate_missing_required_field(client: AsyncClient, mock_generator, payload, detail):
    response = await client.post("/api/v1/content/generate", json=payload)

    assert response.status_code == 422
    assert detail in response.json()["detail"]
    mock_generator.generate.assert_not_called()


@pytest.mark.asyncio
async def test_generate_resume_tailoring(client: AsyncClient, mock_generator):
    response = await client.post(
        "/api/v1/content/generate",
        json={
            "type": "resumeTailoring",
            "topic": "Clinical Data Scientist",
            "company": "Mayo Clinic",
            "persona": "clinicalDataScientist",
        },
    )

    assert response.status_code == 200
    assert "The target company is 'Mayo Clinic'." in mock_generator.generate.call_args.args[0]


@pytest.mark.asyncio
async def test_suggest_topics(client: AsyncClient, mock_generator):
    mock_generator.generate.return_value = GenerationResult(text='["Sepsis alerts", "ECG wearables"]')

    response = await client.post(
        "/api/v1/content/suggestions/topics",
        json={"type": "mythBusting", "persona": "medicalDoctor", "existing": ["AI triage"]},
    )

    assert response.status_code == 200
    assert response.json() == {"suggestions": ["Sepsis alerts", "ECG wearables"]}


@pytest.mark.asyncio
async def test_suggest_topics_bad_answer(client: AsyncClient, mock_generator):
    mock_generator.generate.return_value = GenerationResult(text="I cannot help with that.")

    response = await client.post("/api/v1/content/suggestions/topics", json={})

    assert response.status_code == 502
    assert response.json()["detail"].startswith("Failed to get topic suggestions.")


@pytest.mark.asyncio
async def test_suggest_companies(client: AsyncClient, mock_generator):
    mock_generator.generate.return_value = GenerationResult(
        text='[{"name": "Philips", "industry": "Healthcare"}]'
    )

    response = await client.post(
        "/api/v1/content/suggestions/companies",
        json={
            "role": "Clinical Data Scientist",
            "existing": [{"name": "Google", "industry": "Big Tech"}],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"suggestions": [{"name": "Philips", "industry": "Healthcare"}]}
    assert "- Google (Big Tech)" in mock_generator.generate.call_args.args[0]


@pytest.mark.asyncio
async def test_suggest_companies_requires_role(client: AsyncClient):
    response = await client.post("/api/v1/content/suggestions/companies", json={"existing": []})

    assert response.status_code == 422
