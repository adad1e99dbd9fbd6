"""
Application common module.

Contains base classes for the application layer:
- Command / CommandHandler: write operations
- Query / QueryHandler: read operations
- CommandBus / QueryBus: route a request type to its single handler
- EventBus: deliver committed domain events to subscribers
- CacheProtocol: port for the shared read cache
"""

from .cache import CacheProtocol
from .command import Command, CommandHandler
from .dispatch import (
    CommandBus,
    EventBus,
    HandlerAlreadyRegisteredError,
    HandlerNotFoundError,
    QueryBus,
)
from .query import Query, QueryHandler

__all__ = [
    "CacheProtocol",
    "Command",
    "CommandBus",
    "CommandHandler",
    "EventBus",
    "HandlerAlreadyRegisteredError",
    "HandlerNotFoundError",
    "Query",
    "QueryBus",
    "QueryHandler",
]
