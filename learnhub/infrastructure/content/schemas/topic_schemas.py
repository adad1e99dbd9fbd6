"""Pydantic schemas for Topic API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from learnhub.domain.content.value_objects import TopicDifficulty


class TopicCreateRequest(BaseModel):
    """Schema for creating a topic."""

    title: str = Field(..., min_length=1, max_length=200, description="Topic title")
    slug: str = Field(
        ...,
        min_length=1,
        max_length=200,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description="Unique URL slug, lowercase words joined by hyphens",
    )
    description: str | None = Field(None, description="Optional summary")
    order: int = Field(0, ge=0, description="Position among topics")
    difficulty: TopicDifficulty = Field(TopicDifficulty.BEGINNER, description="Target level")


class TopicResponse(BaseModel):
    """Schema for Topic response."""

    id: int
    title: str
    slug: str
    description: str | None
    order: int
    difficulty: TopicDifficulty
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class TopicListResponse(BaseModel):
    """Schema for the list of topics."""

    topics: list[TopicResponse] = Field(..., description="Topics ordered by position, then title")
