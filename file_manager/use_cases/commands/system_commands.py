"""
Command "os" mapped to the OS facts use case.
"""

import logging
from typing import Optional

from rich.console import Console

from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import CommandError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec
from file_manager.use_cases.system.os_info import OsInfoUseCase


class SystemCommandsHandler(CommandHandlerPort):
    def __init__(
        self,
        os_info_uc: OsInfoUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._os_info_uc = os_info_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    def available_commands(self) -> list[CommandSpec]:
        flags = "|".join(self._os_info_uc.flags())
        return [{"name": "os", "usage": f"os {flags}", "min_args": 1}]

    def dispatch(self, name: str, args: list[str], state: DirectoryState) -> None:
        if name != "os":
            raise CommandError(f"Unknown system command: {name}")
        for line in self._os_info_uc.execute(args[0]):
            self._console.print(line, markup=False, highlight=False)
