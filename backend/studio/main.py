"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studio.api.v1.router import api_router
from studio.core.config import settings
from studio.services.ai.embeddings import EmbeddingService
from studio.services.ai.gemini import GeminiService
from studio.services.content import ContentService
from studio.services.rag.chunker import TextChunker
from studio.services.rag.vector_store import VectorStore

logger = structlog.get_logger()


def init_services(app: FastAPI) -> None:
    """
    Create the per-process services and attach them to ``app.state``.

    The context store lives for the lifetime of the process.
    """
    embeddings = EmbeddingService()
    store = VectorStore(
        embed=embeddings.embed_text,
        chunker=TextChunker(),
        similarity_threshold=settings.RAG_SIMILARITY_THRESHOLD,
    )

    app.state.vector_store = store
    app.state.content_service = ContentService(
        generator=GeminiService(),
        embeddings=embeddings,
        store=store,
        top_k=settings.RAG_TOP_K,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan events.

    Startup:
    - Create Gemini services and the in-memory context store
    """
    logger.info("Starting Persona-Studio application...")

    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set - generation and embedding will fail")

    init_services(app)
    logger.info("Services initialized")

    yield

    logger.info(
        "Shutdown complete",
        context_chunks=len(app.state.vector_store),
    )


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Persona-driven professional content generation",
    version="0.1.0",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/health")
async def health_check() -> dict[str, str | dict]:
    """
    Health check endpoint.

    Returns application and context store status.
    """
    store = app.state.vector_store

    return {
        "status": "healthy",
        "context": {
            "chunks": len(store),
            "busy": store.is_busy,
        },
    }


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "message": "Persona-Studio API",
        "docs": "/docs",
        "health": "/health",
    }
