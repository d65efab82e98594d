"""Pydantic schemas for request/response validation."""

from studio.schemas.content_dto import (
    CompanySchema,
    CompanySuggestionsRequest,
    CompanySuggestionsResponse,
    GenerateRequest,
    GenerateResponse,
    HumanifyRequest,
    HumanifyResponse,
    SourceReference,
    TopicSuggestionsRequest,
    TopicSuggestionsResponse,
)
from studio.schemas.context_dto import (
    AddDocumentsRequest,
    AddDocumentsResponse,
    ContextSearchRequest,
    ContextSearchResponse,
)

__all__ = [
    # Content
    "GenerateRequest",
    "GenerateResponse",
    "HumanifyRequest",
    "HumanifyResponse",
    "SourceReference",
    # Suggestions
    "CompanySchema",
    "CompanySuggestionsRequest",
    "CompanySuggestionsResponse",
    "TopicSuggestionsRequest",
    "TopicSuggestionsResponse",
    # Context
    "AddDocumentsRequest",
    "AddDocumentsResponse",
    "ContextSearchRequest",
    "ContextSearchResponse",
]
