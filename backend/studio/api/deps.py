"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from studio.core.config import settings
from studio.services.content import ContentService
from studio.services.rag.vector_store import VectorStore

# API Key header
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(
    api_key: Annotated[str | None, Depends(api_key_header)]
) -> str:
    """
    Verify API key from request header.

    Args:
        api_key: API key from X-API-Key header.

    Returns:
        The validated API key.

    Raises:
        HTTPException: If API key is missing or invalid.
    """
    if settings.DEBUG:
        # Skip API key verification in debug mode
        return api_key or "debug"

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
        )

    if api_key != settings.SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key",
        )

    return api_key


ApiKey = Annotated[str, Depends(verify_api_key)]


def get_content_service(request: Request) -> ContentService:
    """Get the content service created in the application lifespan."""
    return request.app.state.content_service


def get_vector_store(request: Request) -> VectorStore:
    """Get the process-wide context store."""
    return request.app.state.vector_store


Content = Annotated[ContentService, Depends(get_content_service)]
ContextStore = Annotated[VectorStore, Depends(get_vector_store)]
