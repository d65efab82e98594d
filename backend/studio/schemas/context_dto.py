"""Schemas for the context store API."""

from pydantic import BaseModel, Field


class AddDocumentsRequest(BaseModel):
    """Request schema for adding documents to the context store."""

    texts: list[str] = Field(
        ...,
        min_length=1,
        description="Documents to chunk, embed and store",
    )


class AddDocumentsResponse(BaseModel):
    """Response schema for adding documents."""

    accepted: bool = Field(
        ...,
        description="False when the store was busy and the batch was dropped",
    )
    chunks_stored: int = Field(..., description="Number of new chunks stored")
    total_chunks: int = Field(..., description="Chunks in the store after the call")


class ContextSearchRequest(BaseModel):
    """Request schema for context search."""

    query: str = Field(..., min_length=1, max_length=2000)
    k: int = Field(default=3, ge=1, le=20, description="Maximum number of results")


class ContextSearchResponse(BaseModel):
    """Response schema for context search."""

    query: str
    results: list[str]
