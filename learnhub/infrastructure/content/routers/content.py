"""API routes for content publishing."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from learnhub.application.common.dispatch import CommandBus, QueryBus
from learnhub.application.content.commands import (
    ArchiveContentCommand,
    CreateContentCommand,
    PublishContentCommand,
    UnpublishContentCommand,
    UpdateContentCommand,
)
from learnhub.application.content.dtos import ContentDTO
from learnhub.application.content.queries import (
    GetContentByStatusQuery,
    GetContentQuery,
    GetPublishedContentQuery,
)
from learnhub.core import container
from learnhub.domain.common.exceptions import DomainError
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import ContentStatus
from learnhub.exceptions import LearnhubError
from learnhub.infrastructure.common.di import inject_provider
from learnhub.infrastructure.content.schemas import (
    ContentCreateRequest,
    ContentListResponse,
    ContentResponse,
    ContentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


def _to_response(content: Content) -> ContentResponse:
    return ContentResponse.model_validate(ContentDTO.from_entity(content))


def _unexpected_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
def create_content(
    request: ContentCreateRequest,
    command_bus: CommandBus = Depends(inject_provider(container.command_bus)),
) -> ContentResponse:
    """
    Create a content item under an existing topic.

    Args:
        request: Topic ID and content fields
        command_bus: Command bus injected via dependency container

    Returns:
        Created content

    Raises:
        HTTPException: If the topic is not found or creation fails
    """
    try:
        content = command_bus.dispatch(
            CreateContentCommand(
                topic_id=request.topic_id,
                title=request.title,
                body=request.body,
                code_examples=[e.model_dump() for e in request.code_examples],
                order=request.order,
                status=request.status,
            )
        )
        return _to_response(content)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create content: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.get("/published", response_model=ContentListResponse, status_code=status.HTTP_200_OK)
def get_published_content(
    topic_id: int | None = Query(None, gt=0, description="Limit to one topic"),
    query_bus: QueryBus = Depends(inject_provider(container.query_bus)),
) -> ContentListResponse:
    """
    List published content, ordered by position then title.

    Served from the published-content cache when possible.
    """
    try:
        contents = query_bus.dispatch(GetPublishedContentQuery(topic_id=topic_id))
        return ContentListResponse(
            contents=[ContentResponse.model_validate(c) for c in contents]
        )
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list published content: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.get(
    "/by-topic/{topic_id}", response_model=ContentListResponse, status_code=status.HTTP_200_OK
)
def get_content_by_topic(
    topic_id: int,
    content_status: ContentStatus = Query(
        ContentStatus.PUBLISHED, alias="status", description="Workflow status to list"
    ),
    query_bus: QueryBus = Depends(inject_provider(container.query_bus)),
) -> ContentListResponse:
    """
    List a topic's content in one workflow status.

    Raises:
        HTTPException: If the topic is not found
    """
    try:
        contents = query_bus.dispatch(
            GetContentByStatusQuery(status=content_status, topic_id=topic_id)
        )
        return ContentListResponse(
            contents=[ContentResponse.model_validate(c) for c in contents]
        )
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list content for topic {topic_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.get("/{content_id}", response_model=ContentResponse, status_code=status.HTTP_200_OK)
def get_content(
    content_id: int,
    query_bus: QueryBus = Depends(inject_provider(container.query_bus)),
) -> ContentResponse:
    """
    Get a content item with a reference to its topic.

    Raises:
        HTTPException: If the content is not found
    """
    try:
        content = query_bus.dispatch(GetContentQuery(content_id=content_id))
        return ContentResponse.model_validate(content)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get content {content_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.patch("/{content_id}", response_model=ContentResponse, status_code=status.HTTP_200_OK)
def update_content(
    content_id: int,
    request: ContentUpdateRequest,
    command_bus: CommandBus = Depends(inject_provider(container.command_bus)),
) -> ContentResponse:
    """
    Edit a content item's title, body, code examples, order or topic.

    Args:
        content_id: ID of the content to update
        request: Fields to change
        command_bus: Command bus injected via dependency container

    Returns:
        Updated content
    """
    try:
        content = command_bus.dispatch(
            UpdateContentCommand(
                content_id=content_id,
                topic_id=request.topic_id,
                title=request.title,
                body=request.body,
                code_examples=(
                    [e.model_dump() for e in request.code_examples]
                    if request.code_examples is not None
                    else None
                ),
                order=request.order,
            )
        )
        return _to_response(content)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update content {content_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.post(
    "/{content_id}/publish", response_model=ContentResponse, status_code=status.HTTP_200_OK
)
def publish_content(
    content_id: int,
    command_bus: CommandBus = Depends(inject_provider(container.command_bus)),
) -> ContentResponse:
    """
    Publish a content item.

    Raises:
        HTTPException: If the content is not found or is already published
    """
    try:
        content = command_bus.dispatch(PublishContentCommand(content_id=content_id))
        return _to_response(content)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to publish content {content_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.post(
    "/{content_id}/unpublish", response_model=ContentResponse, status_code=status.HTTP_200_OK
)
def unpublish_content(
    content_id: int,
    command_bus: CommandBus = Depends(inject_provider(container.command_bus)),
) -> ContentResponse:
    """Revert a published content item to draft."""
    try:
        content = command_bus.dispatch(UnpublishContentCommand(content_id=content_id))
        return _to_response(content)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to unpublish content {content_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.post(
    "/{content_id}/archive", response_model=ContentResponse, status_code=status.HTTP_200_OK
)
def archive_content(
    content_id: int,
    command_bus: CommandBus = Depends(inject_provider(container.command_bus)),
) -> ContentResponse:
    """Archive a content item."""
    try:
        content = command_bus.dispatch(ArchiveContentCommand(content_id=content_id))
        return _to_response(content)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to archive content {content_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e
