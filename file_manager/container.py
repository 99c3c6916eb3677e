"""
Dependency injection container for managing application dependencies.
"""

from typing import Optional

from rich.console import Console

from file_manager.adapters.codec.brotli_codec import BrotliCodec
from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.files.local_stream_adapter import LocalStreamAdapter
from file_manager.adapters.system.local_os_facts import LocalOsFacts
from file_manager.config.settings import Settings, settings
from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import CommandError
from file_manager.ports.codec.codec_port import CodecPort
from file_manager.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.files.stream_port import StreamPort
from file_manager.ports.system.os_facts_port import OsFactsPort
from file_manager.shell.dispatcher import CommandDispatcher
from file_manager.use_cases.commands.files_commands import FilesCommandsHandler
from file_manager.use_cases.commands.navigation_commands import NavigationCommandsHandler
from file_manager.use_cases.commands.system_commands import SystemCommandsHandler
from file_manager.use_cases.files.create_file import CreateFileUseCase
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.files.transfer_file import TransferFileUseCase
from file_manager.use_cases.files.transform_file import TransformFileUseCase
from file_manager.use_cases.navigation.navigate import ChangeDirectoryUseCase, GoUpUseCase
from file_manager.use_cases.system.os_info import OsInfoUseCase


class CompositeCommandHandler(CommandHandlerPort):
    """Combine several command handlers into one exposing all their verbs."""

    def __init__(self, *handlers: CommandHandlerPort) -> None:
        self._handlers = list(handlers)
        self._routes: dict[str, CommandHandlerPort] = {}
        for h in self._handlers:
            for spec in h.available_commands():
                if spec["name"] in self._routes:
                    raise ValueError(f"Command registered twice: {spec['name']}")
                self._routes[spec["name"]] = h

    def available_commands(self) -> list[CommandSpec]:
        commands: list[CommandSpec] = []
        for h in self._handlers:
            commands.extend(h.available_commands())
        return commands

    def dispatch(self, name: str, args: list[str], state: DirectoryState) -> None:
        handler = self._routes.get(name)
        if handler is None:
            raise CommandError(f"No handler found for command: {name}")
        handler.dispatch(name, args, state)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, config: Optional[Settings] = None, console: Optional[Console] = None):
        self._instances = {}
        self._config = config or settings
        self._console = console

    def get_console(self) -> Console:
        if self._console is None:
            self._console = Console(soft_wrap=True, highlight=False)
        return self._console

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter()
        return self._instances["file_repository"]

    def get_stream(self) -> StreamPort:
        """
        Get stream adapter instance.

        Returns:
            StreamPort implementation using the configured chunk size
        """
        if "stream" not in self._instances:
            self._instances["stream"] = LocalStreamAdapter(self._config.chunk_size)
        return self._instances["stream"]

    def get_codec(self) -> CodecPort:
        if "codec" not in self._instances:
            self._instances["codec"] = BrotliCodec(
                self._config.brotli_quality, output_limit=self._config.chunk_size
            )
        return self._instances["codec"]

    def get_os_facts(self) -> OsFactsPort:
        if "os_facts" not in self._instances:
            self._instances["os_facts"] = LocalOsFacts()
        return self._instances["os_facts"]

    def get_navigation_commands_handler(self) -> CommandHandlerPort:
        """
        Handler for 'up', 'cd' and 'ls'.
        """
        if "navigation_commands_handler" not in self._instances:
            repo = self.get_file_repository()
            self._instances["navigation_commands_handler"] = NavigationCommandsHandler(
                ChangeDirectoryUseCase(repo),
                GoUpUseCase(),
                ListDirectoryUseCase(repo),
                self.get_console(),
            )
        return self._instances["navigation_commands_handler"]

    def get_files_commands_handler(self) -> CommandHandlerPort:
        """
        Handler for file and stream commands.
        """
        if "files_commands_handler" not in self._instances:
            repo = self.get_file_repository()
            stream = self.get_stream()
            self._instances["files_commands_handler"] = FilesCommandsHandler(
                ReadFileUseCase(repo, stream),
                CreateFileUseCase(repo),
                RenameFileUseCase(repo),
                DeleteFileUseCase(repo),
                TransferFileUseCase(repo, stream),
                HashFileUseCase(repo, stream),
                TransformFileUseCase(repo, stream, self.get_codec()),
                self.get_console(),
            )
        return self._instances["files_commands_handler"]

    def get_system_commands_handler(self) -> CommandHandlerPort:
        """
        Handler for 'os'.
        """
        if "system_commands_handler" not in self._instances:
            self._instances["system_commands_handler"] = SystemCommandsHandler(
                OsInfoUseCase(self.get_os_facts()),
                self.get_console(),
            )
        return self._instances["system_commands_handler"]

    def get_command_handler(self) -> CommandHandlerPort:
        if "command_handler" not in self._instances:
            self._instances["command_handler"] = CompositeCommandHandler(
                self.get_navigation_commands_handler(),
                self.get_files_commands_handler(),
                self.get_system_commands_handler(),
            )
        return self._instances["command_handler"]

    def create_dispatcher(
        self, username: str = "User", start_dir: Optional[str] = None
    ) -> CommandDispatcher:
        """
        Build a dispatcher for a new session.

        Args:
            username: Name used in greeting and farewell
            start_dir: Initial cwd; defaults to the user's home directory

        Returns:
            CommandDispatcher wired to all command handlers
        """
        state = DirectoryState(start_dir or self.get_os_facts().homedir())
        return CommandDispatcher(
            self.get_command_handler(),
            state,
            username=username,
            console=self.get_console(),
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
