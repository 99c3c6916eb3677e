"""
Tests for the DependencyContainer and the composite command handler.
"""

from unittest.mock import MagicMock

import pytest

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.container import CompositeCommandHandler
from file_manager.exceptions import CommandError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort

ALL_COMMANDS = {
    "up", "cd", "ls", "cat", "add", "rn", "cp", "mv", "rm",
    "os", "hash", "compress", "decompress",
}


class TestDependencyContainer:
    """Test cases for the DependencyContainer."""

    def test_instances_are_cached(self, dependency_container):
        repo = dependency_container.get_file_repository()

        assert isinstance(repo, LocalFileSystemAdapter)
        assert dependency_container.get_file_repository() is repo

    def test_reset(self, dependency_container):
        repo = dependency_container.get_file_repository()
        dependency_container.reset()

        assert dependency_container.get_file_repository() is not repo

    def test_command_handler_serves_every_verb(self, dependency_container):
        handler = dependency_container.get_command_handler()

        assert {spec["name"] for spec in handler.available_commands()} == ALL_COMMANDS

    def test_components_log_under_their_own_module(self, dependency_container):
        """Test that records are attributed to the component that emits them."""
        repo = dependency_container.get_file_repository()
        stream = dependency_container.get_stream()

        assert repo._logger.name == "file_manager.adapters.files.local_fs_adapter"
        assert stream._logger.name == "file_manager.adapters.files.local_stream_adapter"

    def test_dispatcher_starts_in_home(self, dependency_container, temp_directory):
        """Test that a dispatcher without a start directory uses the home directory."""
        os_facts = MagicMock()
        os_facts.homedir.return_value = temp_directory
        dependency_container._instances["os_facts"] = os_facts

        dispatcher = dependency_container.create_dispatcher()

        assert dispatcher.state.cwd == temp_directory


class TestCompositeCommandHandler:
    def _handler(self, *names):
        h = MagicMock(spec=CommandHandlerPort)
        h.available_commands.return_value = [
            {"name": n, "usage": n, "min_args": 0} for n in names
        ]
        return h

    def test_routes_to_owner(self):
        first, second = self._handler("a"), self._handler("b")
        composite = CompositeCommandHandler(first, second)

        composite.dispatch("b", ["x"], "state")

        second.dispatch.assert_called_once_with("b", ["x"], "state")
        first.dispatch.assert_not_called()

    def test_unknown_command(self):
        with pytest.raises(CommandError):
            CompositeCommandHandler(self._handler("a")).dispatch("z", [], "state")

    def test_duplicate_verbs_are_rejected(self):
        with pytest.raises(ValueError, match="registered twice"):
            CompositeCommandHandler(self._handler("a"), self._handler("a"))
