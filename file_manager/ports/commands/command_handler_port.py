"""
Port and types for shell command handlers.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from file_manager.entities.directory_state import DirectoryState


class CommandSpec(TypedDict):
    """Specification of one command verb."""

    name: str
    usage: str
    min_args: int


class CommandHandlerPort(ABC):
    """
    Port interface for handling shell commands.

    A handler exposes the verbs it understands and dispatches invocations to
    the appropriate use cases.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get the commands handled by this handler.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, args: list[str], state: DirectoryState) -> None:
        """
        Run a command against the session state.

        Args:
            name: Command verb
            args: Command arguments (at least ``min_args`` of them)
            state: Session directory state

        Raises:
            CommandError: If the verb is unknown to this handler or its arguments are invalid
            FileRepositoryError: If the underlying operation fails
        """
        pass
