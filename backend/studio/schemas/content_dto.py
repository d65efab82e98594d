"""Schemas for the content generation API."""

from pydantic import BaseModel, Field

from studio.services.personas import DEFAULT_PERSONA, Persona
from studio.services.prompts import (
    CompanySuggestion,
    DifficultyLevel,
    GenerationOptions,
    GenerationType,
    PostLength,
    Tone,
)


class GenerateRequest(BaseModel):
    """Request schema for content generation."""

    type: GenerationType = Field(
        default=GenerationType.POST,
        description="Kind of content to generate",
    )
    topic: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Topic of the content, or the target role for career content",
        examples=["AI in cardiology diagnostics"],
    )
    persona: Persona = Field(default=DEFAULT_PERSONA)
    tone: Tone = Field(default=Tone.FORMAL)
    post_length: PostLength = Field(default=PostLength.MEDIUM)
    difficulty_level: DifficultyLevel = Field(default=DifficultyLevel.INTERMEDIATE)
    page_count: int = Field(
        default=1,
        ge=1,
        le=20,
        description="Approximate page count for documents",
    )
    company: str | None = Field(
        default=None,
        max_length=200,
        description="Target company (required for resumeTailoring)",
        examples=["Mayo Clinic"],
    )
    day_number: int | None = Field(
        default=None,
        ge=1,
        le=10,
        description="Day of the 10-day plan (required for dayWiseContentPlan)",
    )

    def to_options(self) -> GenerationOptions:
        return GenerationOptions(
            type=self.type,
            topic=self.topic,
            persona=self.persona,
            tone=self.tone,
            post_length=self.post_length,
            difficulty_level=self.difficulty_level,
            page_count=self.page_count,
            company=self.company,
            day_number=self.day_number,
        )


class SourceReference(BaseModel):
    """Web page used to ground the content."""

    uri: str
    title: str


class GenerateResponse(BaseModel):
    """Response schema for content generation."""

    type: GenerationType
    topic: str
    text: str = Field(..., description="Generated content (Markdown)")
    sources: list[SourceReference] = Field(default_factory=list)
    context_used: int = Field(
        default=0,
        description="Number of earlier chunks injected into the prompt",
    )


class HumanifyRequest(BaseModel):
    """Request schema for rewriting generated text."""

    text: str = Field(..., min_length=1, description="Text to rewrite")
    persona: Persona = Field(default=DEFAULT_PERSONA)


class HumanifyResponse(BaseModel):
    """Response schema for rewritten text."""

    text: str


class TopicSuggestionsRequest(BaseModel):
    """Request schema for topic ideas."""

    type: GenerationType = Field(default=GenerationType.POST)
    persona: Persona = Field(default=DEFAULT_PERSONA)
    existing: list[str] = Field(
        default_factory=list,
        description="Suggestions already shown, to avoid repeats",
    )
    current_topic: str = Field(default="", max_length=2000)


class TopicSuggestionsResponse(BaseModel):
    """Response schema for topic ideas."""

    suggestions: list[str]


class CompanySchema(BaseModel):
    """A company and its broad industry."""

    name: str = Field(..., min_length=1)
    industry: str = Field(..., examples=["Healthcare"])

    def to_suggestion(self) -> CompanySuggestion:
        return CompanySuggestion(name=self.name, industry=self.industry)


class CompanySuggestionsRequest(BaseModel):
    """Request schema for companies hiring for a role."""

    role: str = Field(
        ...,
        min_length=1,
        max_length=500,
        examples=["Clinical Data Scientist"],
    )
    existing: list[CompanySchema] = Field(default_factory=list)


class CompanySuggestionsResponse(BaseModel):
    """Response schema for companies hiring for a role."""

    suggestions: list[CompanySchema]
