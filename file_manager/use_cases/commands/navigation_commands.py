"""
Commands "up", "cd" and "ls" mapped to the navigation and listing use cases.
"""

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import CommandError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.navigation.navigate import ChangeDirectoryUseCase, GoUpUseCase


class NavigationCommandsHandler(CommandHandlerPort):
    """Handler for the commands that read or change the cwd."""

    def __init__(
        self,
        change_directory_uc: ChangeDirectoryUseCase,
        go_up_uc: GoUpUseCase,
        list_directory_uc: ListDirectoryUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self._change_directory_uc = change_directory_uc
        self._go_up_uc = go_up_uc
        self._list_directory_uc = list_directory_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    def available_commands(self) -> list[CommandSpec]:
        return [
            {"name": "up", "usage": "up", "min_args": 0},
            {"name": "cd", "usage": "cd <path>", "min_args": 1},
            {"name": "ls", "usage": "ls", "min_args": 0},
        ]

    def dispatch(self, name: str, args: list[str], state: DirectoryState) -> None:
        if name == "up":
            self._go_up_uc.execute(state)
        elif name == "cd":
            self._change_directory_uc.execute(state, args[0])
        elif name == "ls":
            self._render(self._list_directory_uc.execute(state.cwd))
        else:
            raise CommandError(f"Unknown navigation command: {name}")

    def _render(self, entries: list[DirectoryEntry]) -> None:
        tbl = Table(box=box.SQUARE)
        tbl.add_column("(index)", justify="right", style="dim")
        tbl.add_column("Name", style="cyan")
        tbl.add_column("Type")
        for index, entry in enumerate(entries):
            # Text, not str: entry names must not be read as markup
            tbl.add_row(str(index), Text(entry.name), entry.kind.value)
        self._console.print(tbl)
