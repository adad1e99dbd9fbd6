import pytest
from content_fakes import InMemoryTopicRepository

from learnhub.application.content.commands import CreateTopicCommand, CreateTopicHandler
from learnhub.application.content.dtos import TopicDTO
from learnhub.application.content.queries import (
    GetTopicHandler,
    GetTopicQuery,
    ListTopicsHandler,
    ListTopicsQuery,
)
from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.content.value_objects import TopicDifficulty
from learnhub.exceptions import TopicNotFoundError, TopicSlugConflictError


class TestCreateTopic:
    def test_creates_topic(self, topic_repository: InMemoryTopicRepository) -> None:
        handler = CreateTopicHandler(topic_repository)

        topic = handler.handle(
            CreateTopicCommand(
                title="  Web APIs ",
                slug="web-apis",
                description="HTTP services",
                order=3,
                difficulty=TopicDifficulty.ADVANCED,
            )
        )

        assert topic.id.is_assigned
        assert topic.title == "Web APIs"
        assert topic.difficulty == TopicDifficulty.ADVANCED
        assert topic_repository.find_by_slug("web-apis") == topic

    def test_duplicate_slug_conflicts(self, topic_repository: InMemoryTopicRepository) -> None:
        handler = CreateTopicHandler(topic_repository)

        with pytest.raises(TopicSlugConflictError) as exc_info:
            handler.handle(CreateTopicCommand(title="Another", slug="python-basics"))

        assert exc_info.value.status_code == 409
        assert len(topic_repository.topics) == 2

    @pytest.mark.parametrize("slug", ["", "Web APIs", "web_apis", "-web", "web--apis"])
    def test_rejects_malformed_slug(
        self, topic_repository: InMemoryTopicRepository, slug: str
    ) -> None:
        handler = CreateTopicHandler(topic_repository)

        with pytest.raises(ValidationError):
            handler.handle(CreateTopicCommand(title="Web APIs", slug=slug))

    def test_rejects_negative_order(self, topic_repository: InMemoryTopicRepository) -> None:
        handler = CreateTopicHandler(topic_repository)

        with pytest.raises(ValidationError):
            handler.handle(CreateTopicCommand(title="Web APIs", slug="web-apis", order=-1))


class TestTopicQueries:
    def test_get_topic(self, topic_repository: InMemoryTopicRepository) -> None:
        dto = GetTopicHandler(topic_repository).handle(GetTopicQuery(topic_id=2))

        assert isinstance(dto, TopicDTO)
        assert dto.slug == "async-python"
        assert dto.difficulty == "beginner"

    def test_get_unknown_topic(self, topic_repository: InMemoryTopicRepository) -> None:
        with pytest.raises(TopicNotFoundError):
            GetTopicHandler(topic_repository).handle(GetTopicQuery(topic_id=99))

    def test_list_orders_by_order_then_title(
        self, topic_repository: InMemoryTopicRepository
    ) -> None:
        CreateTopicHandler(topic_repository).handle(
            CreateTopicCommand(title="Intro", slug="intro", order=0)
        )

        result = ListTopicsHandler(topic_repository).handle(ListTopicsQuery())

        assert [t.slug for t in result] == ["intro", "python-basics", "async-python"]
