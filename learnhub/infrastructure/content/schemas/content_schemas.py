"""Pydantic schemas for Content API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from learnhub.domain.content.value_objects import ContentStatus


class CodeExampleSchema(BaseModel):
    """Schema for a code example attached to content."""

    language: str = Field(..., min_length=1, description="Language used for highlighting")
    code: str = Field(..., description="Source code of the example")
    description: str | None = Field(None, description="Optional caption")

    model_config = {"from_attributes": True}


class ContentCreateRequest(BaseModel):
    """Schema for creating new content."""

    topic_id: int = Field(..., gt=0, description="Owning topic ID")
    title: str = Field(..., min_length=1, max_length=200, description="Content title")
    body: str = Field(..., min_length=1, description="Content body (markdown)")
    code_examples: list[CodeExampleSchema] = Field(
        default_factory=list, description="Code examples in display order"
    )
    order: int = Field(0, ge=0, description="Position among sibling content")
    status: ContentStatus = Field(ContentStatus.DRAFT, description="Initial workflow status")


class ContentUpdateRequest(BaseModel):
    """Schema for editing content. Omitted fields are left unchanged."""

    topic_id: int | None = Field(None, gt=0, description="Move to another topic")
    title: str | None = Field(None, min_length=1, max_length=200, description="New title")
    body: str | None = Field(None, min_length=1, description="New body")
    code_examples: list[CodeExampleSchema] | None = Field(
        None, description="Replacement code examples"
    )
    order: int | None = Field(None, ge=0, description="New position among sibling content")


class TopicReferenceSchema(BaseModel):
    """Schema for the topic embedded in a content response."""

    id: int
    title: str
    slug: str

    model_config = {"from_attributes": True}


class ContentResponse(BaseModel):
    """Schema for Content response."""

    id: int
    topic_id: int
    title: str
    body: str
    code_examples: list[CodeExampleSchema]
    order: int
    status: ContentStatus
    published_at: datetime | None
    version: int
    created_at: datetime | None
    updated_at: datetime | None
    topic: TopicReferenceSchema | None = None

    model_config = {"from_attributes": True}


class ContentListResponse(BaseModel):
    """Schema for a list of content items."""

    contents: list[ContentResponse] = Field(..., description="Content items in display order")
