"""API v1 router that combines all endpoint routers."""

from fastapi import APIRouter

from studio.api.v1.content import router as content_router
from studio.api.v1.context import router as context_router

api_router = APIRouter()

# Content generation
api_router.include_router(
    content_router,
    prefix="/content",
    tags=["content"],
)

# Context store (RAG)
api_router.include_router(
    context_router,
    prefix="/context",
    tags=["context"],
)
