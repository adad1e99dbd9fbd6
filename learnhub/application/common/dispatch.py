"""
Message dispatch for commands, queries and domain events.

CommandBus and QueryBus map a request type to exactly one handler.
EventBus fans committed domain events out to any number of subscribers.

Usage:
    bus = CommandBus()
    bus.register(PublishContentCommand, publish_content_handler)
    content = bus.dispatch(PublishContentCommand(content_id=7))
"""

from collections import defaultdict
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

import structlog

from learnhub.application.common.command import Command, CommandHandler
from learnhub.application.common.query import Query, QueryHandler
from learnhub.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)

TMessage = TypeVar("TMessage", Command, Query)
TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandlerFn = Callable[[Any], None]


class HandlerAlreadyRegisteredError(Exception):
    """Raised when a second handler is registered for the same message type."""

    def __init__(self, message_type: type) -> None:
        self.message_type = message_type
        super().__init__(f"A handler is already registered for {message_type.__name__}")


class HandlerNotFoundError(Exception):
    """Raised when a message is dispatched with no registered handler."""

    def __init__(self, message_type: type) -> None:
        self.message_type = message_type
        super().__init__(f"No handler registered for {message_type.__name__}")


class _Registry(Generic[TMessage]):
    """Type-keyed registry enforcing one handler per message type."""

    def __init__(self) -> None:
        self._handlers: dict[type, Any] = {}

    def register(self, message_type: type[TMessage], handler: Any) -> None:  # noqa: ANN401
        if message_type in self._handlers:
            raise HandlerAlreadyRegisteredError(message_type)
        self._handlers[message_type] = handler
        logger.debug(
            "registered_handler",
            message_type=message_type.__name__,
            handler=handler.__class__.__name__,
        )

    def dispatch(self, message: TMessage) -> Any:  # noqa: ANN401
        message_type = type(message)
        handler = self._handlers.get(message_type)
        if handler is None:
            raise HandlerNotFoundError(message_type)
        return handler.handle(message)

    def has_handler(self, message_type: type) -> bool:
        return message_type in self._handlers


class CommandBus(_Registry[Command]):
    """Routes each command to its single CommandHandler."""

    def register(self, message_type: type[Command], handler: CommandHandler[Any, Any]) -> None:
        super().register(message_type, handler)


class QueryBus(_Registry[Query]):
    """Routes each query to its single QueryHandler."""

    def register(self, message_type: type[Query], handler: QueryHandler[Any, Any]) -> None:
        super().register(message_type, handler)


class EventBus:
    """
    Delivers domain events to subscribers of their exact type.

    Command handlers publish here only after the store accepted the
    change. Delivery is synchronous and in order; a subscriber error
    propagates to the publisher.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[DomainEvent], list[EventHandlerFn]] = defaultdict(list)

    def subscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> None:
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> bool:
        """Remove a subscriber. Returns False if it was not subscribed."""
        handlers = self._subscribers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            handlers = list(self._subscribers.get(type(event), []))
            logger.debug(
                "dispatching_event",
                event_type=event.event_type,
                event_id=str(event.event_id),
                subscribers=len(handlers),
            )
            for handler in handlers:
                handler(event)
