"""Tests for topic API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learnhub import models


class TestCreateTopic:
    """Test suite for POST /topics endpoint."""

    def test_create_topic(self, client: TestClient, db_session: Session) -> None:
        """Test creating a topic persists it with defaults."""
        response = client.post(
            "/api/v1/topics",
            json={"title": "REST API Principles", "slug": "rest-api-principles"},
        )

        assert response.status_code == status.HTTP_201_CREATED, response.text
        data = response.json()
        assert data["id"] > 0
        assert data["slug"] == "rest-api-principles"
        assert data["order"] == 0
        assert data["difficulty"] == "beginner"
        assert data["description"] is None

        db_topic = db_session.get(models.Topic, data["id"])
        assert db_topic is not None
        assert db_topic.title == "REST API Principles"

    def test_duplicate_slug_conflicts(
        self, client: TestClient, db_session: Session, test_topic: models.Topic
    ) -> None:
        """Test a second topic with the same slug is rejected."""
        response = client.post(
            "/api/v1/topics",
            json={"title": "Python Again", "slug": test_topic.slug},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert "already exists" in response.json()["detail"]
        assert db_session.query(models.Topic).count() == 1

    def test_invalid_slug(self, client: TestClient) -> None:
        """Test slugs must be lowercase words joined by hyphens."""
        response = client.post("/api/v1/topics", json={"title": "Web", "slug": "Web APIs"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_whitespace_title(self, client: TestClient) -> None:
        """Test a blank title is rejected by the domain."""
        response = client.post("/api/v1/topics", json={"title": "   ", "slug": "blank"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestReadTopics:
    """Test suite for GET /topics endpoints."""

    def test_list_topics_ordered(
        self, client: TestClient, test_topic: models.Topic, other_topic: models.Topic
    ) -> None:
        """Test topics are listed by order, then title."""
        client.post("/api/v1/topics", json={"title": "Intro", "slug": "intro", "order": 0})

        response = client.get("/api/v1/topics")

        assert response.status_code == status.HTTP_200_OK
        assert [t["slug"] for t in response.json()["topics"]] == [
            "intro",
            "python-basics",
            "async-python",
        ]

    def test_list_topics_empty(self, client: TestClient) -> None:
        """Test listing with no topics."""
        assert client.get("/api/v1/topics").json() == {"topics": []}

    def test_get_topic(self, client: TestClient, other_topic: models.Topic) -> None:
        """Test fetching a single topic."""
        response = client.get(f"/api/v1/topics/{other_topic.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Async Python"
        assert data["difficulty"] == "advanced"
        assert data["created_at"] is not None

    def test_get_topic_not_found(self, client: TestClient) -> None:
        """Test fetching a missing topic."""
        response = client.get("/api/v1/topics/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Topic with id 99999 not found"
