"""
Command dispatcher: the read-eval-print loop of the file manager.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from rich.console import Console

from file_manager.entities.command import Command, CommandResult
from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import BaseAppError, CommandError, ErrorKind
from file_manager.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec

EXIT_COMMAND = ".exit"

# Kinds shown as "Invalid input"; every other failure is "Operation failed"
_INPUT_ERRORS = {
    ErrorKind.INVALID_COMMAND,
    ErrorKind.INVALID_SUBCOMMAND,
    ErrorKind.MISSING_ARGUMENT,
}


class SessionState(str, Enum):
    RUNNING = "running"
    EXITING = "exiting"


class CommandDispatcher:
    """
    Parse input lines, route them to command handlers and report the cwd.

    Every failure raised by a handler is caught here and turned into a
    CommandResult; the session keeps running with its cwd untouched.
    """

    def __init__(
        self,
        handler: CommandHandlerPort,
        state: DirectoryState,
        username: str = "User",
        console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            handler: Handler (usually a composite) serving every command verb
            state: Session directory state, owned by the dispatcher from now on
            username: Name used in the greeting and farewell
            console: Console for all output
            logger: Logger instance to use for logging
        """
        self._handler = handler
        self._state = state
        self._username = username
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, CommandSpec] = {
            spec["name"]: spec for spec in handler.available_commands()
        }
        self.session = SessionState.RUNNING

    @property
    def state(self) -> DirectoryState:
        return self._state

    def _say(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)

    def greet(self) -> None:
        self._say(f"Welcome to the File Manager, {self._username}!")
        self.report_cwd()

    def report_cwd(self) -> None:
        self._say(f"You are currently in {self._state.cwd}")

    def shutdown(self) -> int:
        """Single exit path for .exit, end of input and interrupts."""
        self.session = SessionState.EXITING
        self._say(f"Thank you for using File Manager, {self._username}, goodbye!")
        return 0

    def execute(self, line: str) -> CommandResult:
        """
        Run one input line.

        Blank lines are a silent no-op. ``.exit`` switches the session to
        EXITING without printing; the caller is expected to call shutdown().
        Every other line ends with the cwd report, success or not.
        """
        command = Command.parse(line)
        if command is None:
            return CommandResult.success()
        if command.name == EXIT_COMMAND:
            self.session = SessionState.EXITING
            return CommandResult.exit()

        snapshot = self._state.cwd
        try:
            self._invoke(command)
            result = CommandResult.success()
        except BaseAppError as e:
            result = self._fail(command, e.kind, e)
        except Exception as e:
            self._logger.warning(f"Unexpected error in command {command.name!r}: {e}")
            result = self._fail(command, ErrorKind.OPERATION_FAILED, e)

        if result.error is not None:
            # A failed command never moves the session
            self._state.restore(snapshot)
        self.report_cwd()
        return result

    def _invoke(self, command: Command) -> None:
        spec = self._commands.get(command.name)
        if spec is None:
            raise CommandError(f"Unknown command: {command.name}", ErrorKind.INVALID_COMMAND)
        if len(command.args) < spec["min_args"]:
            raise CommandError(
                f"Missing argument, usage: {spec['usage']}", ErrorKind.MISSING_ARGUMENT
            )
        self._handler.dispatch(command.name, command.args, self._state)

    def _fail(self, command: Command, kind: ErrorKind, error: Exception) -> CommandResult:
        self._logger.info(f"Command {command.name!r} failed ({kind.value}): {error}")
        self._say("Invalid input" if kind in _INPUT_ERRORS else "Operation failed")
        return CommandResult.failure(kind)

    def run(self, read_line: Optional[Callable[[], str]] = None, prompt: str = ">") -> int:
        """
        Loop until ``.exit``, end of input or an interrupt.

        Args:
            read_line: Callable returning the next line; raises EOFError at end of input
            prompt: Prompt printed before each line

        Returns:
            Process exit status (always 0)
        """
        if read_line is None:
            read_line = input

        self.greet()
        while self.session is SessionState.RUNNING:
            try:
                self._console.print(prompt, end="", markup=False, highlight=False)
                line = read_line()
                self.execute(line)
            except EOFError:
                self._console.print()
                break
            except KeyboardInterrupt:
                # Also aborts an in-flight stream; its files are closed on unwind
                self._console.print()
                break
        return self.shutdown()
