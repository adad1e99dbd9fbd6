"""API routes for topics."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from learnhub.application.common.dispatch import CommandBus, QueryBus
from learnhub.application.content.commands import CreateTopicCommand
from learnhub.application.content.dtos import TopicDTO
from learnhub.application.content.queries import GetTopicQuery, ListTopicsQuery
from learnhub.core import container
from learnhub.domain.common.exceptions import DomainError
from learnhub.exceptions import LearnhubError
from learnhub.infrastructure.common.di import inject_provider
from learnhub.infrastructure.content.schemas import (
    TopicCreateRequest,
    TopicListResponse,
    TopicResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/topics", tags=["topics"])


def _unexpected_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
def create_topic(
    request: TopicCreateRequest,
    command_bus: CommandBus = Depends(inject_provider(container.command_bus)),
) -> TopicResponse:
    """
    Create a topic.

    Raises:
        HTTPException: 409 if the slug is already taken, 500 on unexpected failure
    """
    try:
        topic = command_bus.dispatch(
            CreateTopicCommand(
                title=request.title,
                slug=request.slug,
                description=request.description,
                order=request.order,
                difficulty=request.difficulty,
            )
        )
        return TopicResponse.model_validate(TopicDTO.from_entity(topic))
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create topic: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.get("", response_model=TopicListResponse, status_code=status.HTTP_200_OK)
def list_topics(
    query_bus: QueryBus = Depends(inject_provider(container.query_bus)),
) -> TopicListResponse:
    """List all topics ordered by position, then title."""
    try:
        topics = query_bus.dispatch(ListTopicsQuery())
        return TopicListResponse(topics=[TopicResponse.model_validate(t) for t in topics])
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list topics: {e!s}", exc_info=True)
        raise _unexpected_error() from e


@router.get("/{topic_id}", response_model=TopicResponse, status_code=status.HTTP_200_OK)
def get_topic(
    topic_id: int,
    query_bus: QueryBus = Depends(inject_provider(container.query_bus)),
) -> TopicResponse:
    """
    Get a topic by ID.

    Raises:
        HTTPException: 404 if the topic does not exist
    """
    try:
        topic = query_bus.dispatch(GetTopicQuery(topic_id=topic_id))
        return TopicResponse.model_validate(topic)
    except (LearnhubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get topic {topic_id}: {e!s}", exc_info=True)
        raise _unexpected_error() from e
