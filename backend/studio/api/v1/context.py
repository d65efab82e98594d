"""Context store API endpoints."""

from fastapi import APIRouter, status

from studio.api.deps import ApiKey, Content, ContextStore
from studio.schemas.context_dto import (
    AddDocumentsRequest,
    AddDocumentsResponse,
    ContextSearchRequest,
    ContextSearchResponse,
)

router = APIRouter()


@router.post(
    "/documents",
    response_model=AddDocumentsResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Add documents",
    description="Chunk, embed and store documents for later retrieval.",
)
async def add_documents(
    request: AddDocumentsRequest,
    content: Content,
    store: ContextStore,
    api_key: ApiKey,
) -> AddDocumentsResponse:
    """
    Add documents to the context store.

    When another add is still running the batch is dropped and
    ``accepted`` is false.
    """
    outcome = await content.remember(request.texts)

    return AddDocumentsResponse(
        accepted=outcome.accepted,
        chunks_stored=outcome.chunks_stored,
        total_chunks=len(store),
    )


@router.post(
    "/search",
    response_model=ContextSearchResponse,
    summary="Search context",
    description="Find stored chunks similar to a query.",
)
async def search_context(
    request: ContextSearchRequest,
    content: Content,
    api_key: ApiKey,
) -> ContextSearchResponse:
    results = await content.recall(request.query, request.k)

    return ContextSearchResponse(query=request.query, results=results)
