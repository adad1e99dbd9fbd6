"""
Query and QueryHandler base classes.

Queries represent requests for information without side effects on the
domain. They are named descriptively: GetContent, GetPublishedContent, etc.

Example:
    @dataclass(frozen=True)
    class GetContentQuery(Query):
        content_id: int

    class GetContentHandler(QueryHandler[GetContentQuery, ContentDTO]):
        def handle(self, query: GetContentQuery) -> ContentDTO:
            content = self._repo.find_by_id(ContentId(query.content_id))
            return ContentDTO.from_entity(content)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the query)
TQuery = TypeVar("TQuery", bound="Query")
# Output type (the result of the query)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query:
    """
    Base class for Queries.

    Queries are:
    - Immutable (frozen dataclass)
    - Named descriptively (GetContent, GetPublishedContent)
    - Carry filter parameters
    - Read-only with respect to the domain
    """


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Base class for Query Handlers.

    Query Handlers:
    - Execute a single query type
    - Return DTOs (not domain entities)
    - Never modify domain state; the only thing they may write is the
      read cache

    Each query has exactly one handler.
    """

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        """
        Handle the query and return the result.

        This method should:
        1. Fetch data from repositories (or the cache)
        2. Transform to DTOs
        3. Return the result
        """
        raise NotImplementedError
