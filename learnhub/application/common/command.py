"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: CreateContent, PublishContent, etc.

Example:
    @dataclass(frozen=True)
    class PublishContentCommand(Command):
        content_id: int

    class PublishContentHandler(CommandHandler[PublishContentCommand, Content]):
        def handle(self, command: PublishContentCommand) -> Content:
            content = self._repo.find_by_id(ContentId(command.content_id))
            content.publish()
            saved = self._repo.save(content)
            self._event_bus.publish(content.collect_events())
            return saved
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (PublishContent, not ContentPublication)
    - Carry all data needed to execute the operation
    - Represent intentions, not facts

    Commands should be validated at the API boundary before
    being passed to handlers.
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Execute a single command type
    - Orchestrate domain logic
    - Persist changes through repositories
    - Release domain events only after persistence succeeded
    - Return the result of the operation

    Each command has exactly one handler.
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        This method should:
        1. Validate references (e.g. the owning topic exists)
        2. Execute domain logic on the aggregate
        3. Persist changes (via repositories)
        4. Flush collected domain events
        5. Return the result

        Raises:
            DomainError: When business rules are violated
        """
        raise NotImplementedError
