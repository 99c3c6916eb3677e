"""
Commands operating on files, mapped to the Files use cases.
"""

import codecs
import logging
from typing import Optional

from rich.console import Console

from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import CommandError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec
from file_manager.use_cases.files.create_file import CreateFileUseCase
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.files.transfer_file import TransferFileUseCase, TransferMode
from file_manager.use_cases.files.transform_file import (
    TransformDirection,
    TransformFileUseCase,
)
from file_manager.utils.paths import join_name, resolve_path


class FilesCommandsHandler(CommandHandlerPort):
    """Handler for cat/add/rn/rm, the stream commands cp/mv/hash and compress/decompress."""

    def __init__(
        self,
        read_file_uc: ReadFileUseCase,
        create_file_uc: CreateFileUseCase,
        rename_file_uc: RenameFileUseCase,
        delete_file_uc: DeleteFileUseCase,
        transfer_file_uc: TransferFileUseCase,
        hash_file_uc: HashFileUseCase,
        transform_file_uc: TransformFileUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the files commands handler.

        Args:
            read_file_uc: Use case streaming a file to the console
            create_file_uc: Use case creating empty files
            rename_file_uc: Use case renaming entries within the cwd
            delete_file_uc: Use case unlinking files
            transfer_file_uc: Use case for copy and move
            hash_file_uc: Use case for SHA-256 digests
            transform_file_uc: Use case for compress and decompress
            console: Console receiving command output
            logger: Logger instance to use for logging
        """
        self._read_file_uc = read_file_uc
        self._create_file_uc = create_file_uc
        self._rename_file_uc = rename_file_uc
        self._delete_file_uc = delete_file_uc
        self._transfer_file_uc = transfer_file_uc
        self._hash_file_uc = hash_file_uc
        self._transform_file_uc = transform_file_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    def available_commands(self) -> list[CommandSpec]:
        return [
            {"name": "cat", "usage": "cat <path>", "min_args": 1},
            {"name": "add", "usage": "add <path>", "min_args": 1},
            {"name": "rn", "usage": "rn <oldName> <newName>", "min_args": 2},
            {"name": "cp", "usage": "cp <src> <destDir>", "min_args": 2},
            {"name": "mv", "usage": "mv <src> <destDir>", "min_args": 2},
            {"name": "rm", "usage": "rm <path>", "min_args": 1},
            {"name": "hash", "usage": "hash <path>", "min_args": 1},
            {"name": "compress", "usage": "compress <src> <dest>", "min_args": 2},
            {"name": "decompress", "usage": "decompress <src> <dest>", "min_args": 2},
        ]

    def dispatch(self, name: str, args: list[str], state: DirectoryState) -> None:
        cwd = state.cwd
        if name == "cat":
            self._handle_cat(resolve_path(cwd, args[0]))
        elif name == "add":
            self._create_file_uc.execute(resolve_path(cwd, args[0]))
        elif name == "rn":
            # New name always lands in the cwd, whatever the old path was
            self._rename_file_uc.execute(resolve_path(cwd, args[0]), join_name(cwd, args[1]))
        elif name in ("cp", "mv"):
            mode = TransferMode.COPY if name == "cp" else TransferMode.MOVE
            self._transfer_file_uc.execute(
                resolve_path(cwd, args[0]), resolve_path(cwd, args[1]), mode
            )
        elif name == "rm":
            self._delete_file_uc.execute(resolve_path(cwd, args[0]))
        elif name == "hash":
            digest = self._hash_file_uc.execute(resolve_path(cwd, args[0]))
            self._console.print(digest, markup=False, highlight=False)
        elif name in ("compress", "decompress"):
            direction = TransformDirection(name)
            self._transform_file_uc.execute(
                resolve_path(cwd, args[0]), resolve_path(cwd, args[1]), direction
            )
        else:
            raise CommandError(f"Unknown files command: {name}")

    def _handle_cat(self, path: str) -> None:
        out = self._console.file
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        last = ""

        def _write(chunk: bytes) -> None:
            nonlocal last
            text = decoder.decode(chunk)
            if text:
                out.write(text)
                out.flush()
                last = text

        try:
            self._read_file_uc.execute(path, _write)
            tail = decoder.decode(b"", final=True)
            if tail:
                out.write(tail)
                last = tail
        finally:
            # Keep the cwd report on its own line
            if last and not last.endswith("\n"):
                out.write("\n")
            out.flush()
