import pytest
from content_fakes import InMemoryContentRepository, InMemoryTopicRepository, RecordingCache

from learnhub.application.content.dtos import ContentDTO, TopicReference
from learnhub.application.content.queries import (
    GetContentByStatusHandler,
    GetContentByStatusQuery,
    GetContentHandler,
    GetContentQuery,
    GetPublishedContentHandler,
    GetPublishedContentQuery,
)
from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import ContentStatus
from learnhub.exceptions import ContentNotFoundError, TopicNotFoundError


def _seed(
    repository: InMemoryContentRepository,
    title: str,
    *,
    status: ContentStatus = ContentStatus.PUBLISHED,
    topic_id: int = 1,
    order: int = 0,
) -> Content:
    return repository.add(
        Content.create(
            topic_id=TopicId(topic_id), title=title, body="Body", order=order, status=status
        )
    )


class TestGetContent:
    def test_embeds_topic_reference(
        self,
        content_repository: InMemoryContentRepository,
        topic_repository: InMemoryTopicRepository,
    ) -> None:
        seeded = _seed(content_repository, "Loops", status=ContentStatus.DRAFT)
        handler = GetContentHandler(content_repository, topic_repository)

        dto = handler.handle(GetContentQuery(content_id=seeded.id.value))

        assert isinstance(dto, ContentDTO)
        assert dto.id == seeded.id.value
        assert dto.status == "draft"
        assert dto.topic == TopicReference(id=1, title="Python Basics", slug="python-basics")

    def test_not_found(
        self,
        content_repository: InMemoryContentRepository,
        topic_repository: InMemoryTopicRepository,
    ) -> None:
        handler = GetContentHandler(content_repository, topic_repository)

        with pytest.raises(ContentNotFoundError):
            handler.handle(GetContentQuery(content_id=5))


class TestGetPublishedContent:
    @pytest.fixture
    def handler(
        self,
        content_repository: InMemoryContentRepository,
        topic_repository: InMemoryTopicRepository,
        cache: RecordingCache,
    ) -> GetPublishedContentHandler:
        return GetPublishedContentHandler(content_repository, topic_repository, cache)

    def test_orders_by_order_then_title(
        self,
        handler: GetPublishedContentHandler,
        content_repository: InMemoryContentRepository,
    ) -> None:
        _seed(content_repository, "Zeta", order=1)
        _seed(content_repository, "Alpha", order=2)
        _seed(content_repository, "Beta", order=1)
        _seed(content_repository, "Hidden", status=ContentStatus.DRAFT)
        _seed(content_repository, "Gone", status=ContentStatus.ARCHIVED)

        result = handler.handle(GetPublishedContentQuery())

        assert [c.title for c in result] == ["Beta", "Zeta", "Alpha"]

    def test_filters_by_topic(
        self,
        handler: GetPublishedContentHandler,
        content_repository: InMemoryContentRepository,
    ) -> None:
        _seed(content_repository, "Mine", topic_id=1)
        _seed(content_repository, "Theirs", topic_id=2)

        result = handler.handle(GetPublishedContentQuery(topic_id=2))

        assert [c.title for c in result] == ["Theirs"]

    def test_items_carry_topic_reference(
        self,
        handler: GetPublishedContentHandler,
        content_repository: InMemoryContentRepository,
        topic_repository: InMemoryTopicRepository,
    ) -> None:
        _seed(content_repository, "Loops", topic_id=1, order=0)
        _seed(content_repository, "Tasks", topic_id=2, order=1)
        _seed(content_repository, "Lists", topic_id=1, order=2)

        result = handler.handle(GetPublishedContentQuery())

        assert [c.topic for c in result] == [
            TopicReference(id=1, title="Python Basics", slug="python-basics"),
            TopicReference(id=2, title="Async Python", slug="async-python"),
            TopicReference(id=1, title="Python Basics", slug="python-basics"),
        ]
        assert topic_repository.find_by_id_calls == 2

    def test_miss_populates_cache(
        self,
        handler: GetPublishedContentHandler,
        content_repository: InMemoryContentRepository,
        cache: RecordingCache,
    ) -> None:
        _seed(content_repository, "Loops", topic_id=1)

        result = handler.handle(GetPublishedContentQuery(topic_id=1))

        assert cache.entries["published_content_1"] == result
        assert "published_content_all" not in cache.entries

    def test_hit_skips_store(
        self,
        handler: GetPublishedContentHandler,
        content_repository: InMemoryContentRepository,
        cache: RecordingCache,
    ) -> None:
        cached = ["served from cache"]
        cache.set("published_content_all", cached)

        result = handler.handle(GetPublishedContentQuery())

        assert result is cached
        assert content_repository.find_by_status_calls == 0

    def test_empty_listing_is_cached(
        self,
        handler: GetPublishedContentHandler,
        content_repository: InMemoryContentRepository,
    ) -> None:
        assert handler.handle(GetPublishedContentQuery()) == []
        assert handler.handle(GetPublishedContentQuery()) == []

        assert content_repository.find_by_status_calls == 1


class TestGetContentByStatus:
    @pytest.fixture
    def handler(
        self,
        content_repository: InMemoryContentRepository,
        topic_repository: InMemoryTopicRepository,
    ) -> GetContentByStatusHandler:
        return GetContentByStatusHandler(content_repository, topic_repository)

    def test_returns_requested_status_only(
        self,
        handler: GetContentByStatusHandler,
        content_repository: InMemoryContentRepository,
    ) -> None:
        _seed(content_repository, "Draft b", status=ContentStatus.DRAFT, order=1)
        _seed(content_repository, "Draft a", status=ContentStatus.DRAFT, order=1)
        _seed(content_repository, "Live", status=ContentStatus.PUBLISHED)

        result = handler.handle(GetContentByStatusQuery(status=ContentStatus.DRAFT, topic_id=1))

        assert [c.title for c in result] == ["Draft a", "Draft b"]

    def test_without_topic_filter(
        self,
        handler: GetContentByStatusHandler,
        content_repository: InMemoryContentRepository,
    ) -> None:
        _seed(content_repository, "Old", status=ContentStatus.ARCHIVED, topic_id=1)
        _seed(content_repository, "Older", status=ContentStatus.ARCHIVED, topic_id=2)

        result = handler.handle(GetContentByStatusQuery(status=ContentStatus.ARCHIVED))

        assert {c.title for c in result} == {"Old", "Older"}
        assert {c.topic.slug for c in result if c.topic} == {"python-basics", "async-python"}

    def test_unknown_topic(self, handler: GetContentByStatusHandler) -> None:
        with pytest.raises(TopicNotFoundError):
            handler.handle(GetContentByStatusQuery(status=ContentStatus.DRAFT, topic_id=99))
