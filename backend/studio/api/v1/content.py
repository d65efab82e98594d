"""Content generation API endpoints."""

from fastapi import APIRouter, HTTPException, status

from studio.api.deps import ApiKey, Content
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
from studio.services.ai.gemini import GenerationError

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate content",
    description="Generate persona-driven content, using earlier output as context.",
)
async def generate_content(
    request: GenerateRequest,
    content: Content,
    api_key: ApiKey,
) -> GenerateResponse:
    """
    Generate content for a topic.

    - **type**: Kind of content (post, document, weeklyContentPlan, ...)
    - **topic**: What the content is about
    - **persona** / **tone**: Voice and style
    - **company** / **day_number**: Needed by resumeTailoring and dayWiseContentPlan
    """
    try:
        generated = await content.generate(request.to_options())
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return GenerateResponse(
        type=request.type,
        topic=request.topic,
        text=generated.result.text,
        sources=[
            SourceReference(uri=source.uri, title=source.title)
            for source in generated.result.sources
        ],
        context_used=len(generated.context_chunks),
    )


@router.post(
    "/humanify",
    response_model=HumanifyResponse,
    summary="Humanify text",
    description="Rewrite text so it reads less like machine output.",
)
async def humanify_text(
    request: HumanifyRequest,
    content: Content,
    api_key: ApiKey,
) -> HumanifyResponse:
    try:
        text = await content.humanify(request.text, request.persona)
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return HumanifyResponse(text=text)


@router.post(
    "/suggestions/topics",
    response_model=TopicSuggestionsResponse,
    summary="Suggest topics",
    description="Brainstorm five new topics for a content type and persona.",
)
async def suggest_topics(
    request: TopicSuggestionsRequest,
    content: Content,
    api_key: ApiKey,
) -> TopicSuggestionsResponse:
    try:
        suggestions = await content.suggest_topics(
            request.type,
            request.persona,
            request.existing,
            request.current_topic,
        )
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return TopicSuggestionsResponse(suggestions=suggestions)


@router.post(
    "/suggestions/companies",
    response_model=CompanySuggestionsResponse,
    summary="Suggest companies",
    description="Brainstorm five new companies likely to hire for a role.",
)
async def suggest_companies(
    request: CompanySuggestionsRequest,
    content: Content,
    api_key: ApiKey,
) -> CompanySuggestionsResponse:
    try:
        companies = await content.suggest_companies(
            request.role,
            [company.to_suggestion() for company in request.existing],
        )
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return CompanySuggestionsResponse(
        suggestions=[
            CompanySchema(name=company.name, industry=company.industry)
            for company in companies
        ]
    )
