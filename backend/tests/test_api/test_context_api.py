"""Tests for context store API endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_add_documents(client: AsyncClient, cardiology_document):
    response = await client.post(
        "/api/v1/context/documents",
        json={"texts": [cardiology_document]},
    )

    assert response.status_code == 202
    assert response.json() == {"accepted": True, "chunks_stored": 2, "total_chunks": 2}


@pytest.mark.asyncio
async def test_add_same_documents_twice(client: AsyncClient, cardiology_document):
    await client.post("/api/v1/context/documents", json={"texts": [cardiology_document]})

    response = await client.post(
        "/api/v1/context/documents",
        json={"texts": [cardiology_document]},
    )

    assert response.json() == {"accepted": True, "chunks_stored": 0, "total_chunks": 2}


@pytest.mark.asyncio
async def test_add_documents_requires_texts(client: AsyncClient):
    response = await client.post("/api/v1/context/documents", json={"texts": []})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_search(client: AsyncClient, cardiology_document, logistics_document):
    await client.post(
        "/api/v1/context/documents",
        json={"texts": [logistics_document, cardiology_document]},
    )

    response = await client.post(
        "/api/v1/context/search",
        json={"query": "cardiology AI diagnostics", "k": 1},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "cardiology AI diagnostics"
    assert len(data["results"]) == 1
    assert "cardiology" in data["results"][0]


@pytest.mark.asyncio
async def test_search_empty_store(client: AsyncClient):
    response = await client.post(
        "/api/v1/context/search",
        json={"query": "anything"},
    )

    assert response.status_code == 200
    assert response.json()["results"] == []
