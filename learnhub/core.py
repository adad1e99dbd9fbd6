from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from learnhub.application.common.cache import CacheProtocol
from learnhub.application.common.dispatch import CommandBus, EventBus, QueryBus
from learnhub.application.content.commands import (
    ArchiveContentCommand,
    ArchiveContentHandler,
    CreateContentCommand,
    CreateContentHandler,
    CreateTopicCommand,
    CreateTopicHandler,
    PublishContentCommand,
    PublishContentHandler,
    UnpublishContentCommand,
    UnpublishContentHandler,
    UpdateContentCommand,
    UpdateContentHandler,
)
from learnhub.application.content.events import ContentPublishedHandler
from learnhub.application.content.queries import (
    GetContentByStatusHandler,
    GetContentByStatusQuery,
    GetContentHandler,
    GetContentQuery,
    GetPublishedContentHandler,
    GetPublishedContentQuery,
    GetTopicHandler,
    GetTopicQuery,
    ListTopicsHandler,
    ListTopicsQuery,
)
from learnhub.config import Settings, get_settings
from learnhub.domain.content.events import ContentPublished
from learnhub.infrastructure.cache import MemoryCache, NullCache
from learnhub.infrastructure.content.repositories import ContentRepository, TopicRepository


def _build_cache(settings: Settings) -> CacheProtocol:
    if not settings.CACHE_ENABLED:
        return NullCache()
    return MemoryCache(maxsize=settings.CACHE_MAX_ITEMS, ttl=settings.CACHE_TTL)


def _build_event_bus(content_published_handler: ContentPublishedHandler) -> EventBus:
    bus = EventBus()
    bus.subscribe(ContentPublished, content_published_handler)
    return bus


def _build_command_bus(
    create_content: CreateContentHandler,
    publish_content: PublishContentHandler,
    unpublish_content: UnpublishContentHandler,
    archive_content: ArchiveContentHandler,
    update_content: UpdateContentHandler,
    create_topic: CreateTopicHandler,
) -> CommandBus:
    bus = CommandBus()
    bus.register(CreateContentCommand, create_content)
    bus.register(PublishContentCommand, publish_content)
    bus.register(UnpublishContentCommand, unpublish_content)
    bus.register(ArchiveContentCommand, archive_content)
    bus.register(UpdateContentCommand, update_content)
    bus.register(CreateTopicCommand, create_topic)
    return bus


def _build_query_bus(
    get_content: GetContentHandler,
    get_published_content: GetPublishedContentHandler,
    get_content_by_status: GetContentByStatusHandler,
    get_topic: GetTopicHandler,
    list_topics: ListTopicsHandler,
) -> QueryBus:
    bus = QueryBus()
    bus.register(GetContentQuery, get_content)
    bus.register(GetPublishedContentQuery, get_published_content)
    bus.register(GetContentByStatusQuery, get_content_by_status)
    bus.register(GetTopicQuery, get_topic)
    bus.register(ListTopicsQuery, list_topics)
    return bus


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Process-wide collaborators
    cache = providers.Singleton(_build_cache, settings=settings)
    content_published_handler = providers.Singleton(ContentPublishedHandler)
    event_bus = providers.Singleton(
        _build_event_bus, content_published_handler=content_published_handler
    )

    # Repositories
    content_repository = providers.Factory(ContentRepository, db=db)
    topic_repository = providers.Factory(TopicRepository, db=db)

    # Command handlers
    create_content_handler = providers.Factory(
        CreateContentHandler,
        content_repository=content_repository,
        topic_repository=topic_repository,
        cache=cache,
    )
    publish_content_handler = providers.Factory(
        PublishContentHandler,
        content_repository=content_repository,
        event_bus=event_bus,
        cache=cache,
    )
    unpublish_content_handler = providers.Factory(
        UnpublishContentHandler,
        content_repository=content_repository,
        event_bus=event_bus,
        cache=cache,
    )
    archive_content_handler = providers.Factory(
        ArchiveContentHandler,
        content_repository=content_repository,
        event_bus=event_bus,
        cache=cache,
    )
    update_content_handler = providers.Factory(
        UpdateContentHandler,
        content_repository=content_repository,
        topic_repository=topic_repository,
        cache=cache,
    )
    create_topic_handler = providers.Factory(CreateTopicHandler, topic_repository=topic_repository)

    # Query handlers
    get_content_handler = providers.Factory(
        GetContentHandler,
        content_repository=content_repository,
        topic_repository=topic_repository,
    )
    get_published_content_handler = providers.Factory(
        GetPublishedContentHandler,
        content_repository=content_repository,
        topic_repository=topic_repository,
        cache=cache,
    )
    get_content_by_status_handler = providers.Factory(
        GetContentByStatusHandler,
        content_repository=content_repository,
        topic_repository=topic_repository,
    )
    get_topic_handler = providers.Factory(GetTopicHandler, topic_repository=topic_repository)
    list_topics_handler = providers.Factory(ListTopicsHandler, topic_repository=topic_repository)

    # Buses, built per request around that request's repositories
    command_bus = providers.Factory(
        _build_command_bus,
        create_content=create_content_handler,
        publish_content=publish_content_handler,
        unpublish_content=unpublish_content_handler,
        archive_content=archive_content_handler,
        update_content=update_content_handler,
        create_topic=create_topic_handler,
    )
    query_bus = providers.Factory(
        _build_query_bus,
        get_content=get_content_handler,
        get_published_content=get_published_content_handler,
        get_content_by_status=get_content_by_status_handler,
        get_topic=get_topic_handler,
        list_topics=list_topics_handler,
    )


# Initialize container
container = Container()
