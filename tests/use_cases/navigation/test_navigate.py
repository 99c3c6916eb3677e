"""
Tests for the navigation use cases.
"""

import os
from unittest.mock import MagicMock

import pytest

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import ErrorKind, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.navigation.navigate import ChangeDirectoryUseCase, GoUpUseCase


class TestChangeDirectoryUseCase:
    """Test cases for the ChangeDirectoryUseCase."""

    def test_relative_target(self, temp_directory, mock_logger):
        """Test moving into a subdirectory given relative to the cwd."""
        state = DirectoryState(temp_directory)
        use_case = ChangeDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        new_cwd = use_case.execute(state, "subdir")

        assert new_cwd == os.path.join(temp_directory, "subdir")
        assert state.cwd == new_cwd

    def test_dot_dot_segments(self, temp_directory, mock_logger):
        """Test that '..' segments are folded."""
        state = DirectoryState(os.path.join(temp_directory, "subdir"))
        use_case = ChangeDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        use_case.execute(state, "../subdir/..")

        assert state.cwd == temp_directory

    def test_nonexistent_target_keeps_cwd(self, temp_directory, mock_logger):
        """Test that cd to a missing path fails with NotFound and leaves the cwd."""
        state = DirectoryState(temp_directory)
        use_case = ChangeDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        with pytest.raises(FileRepositoryError) as exc:
            use_case.execute(state, "/nonexistent")

        assert exc.value.kind is ErrorKind.NOT_FOUND
        assert state.cwd == temp_directory

    def test_file_target_keeps_cwd(self, temp_directory, mock_logger):
        """Test that cd to a file fails with NotADirectory."""
        state = DirectoryState(temp_directory)
        use_case = ChangeDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        with pytest.raises(FileRepositoryError) as exc:
            use_case.execute(state, "test1.txt")

        assert exc.value.kind is ErrorKind.NOT_A_DIRECTORY
        assert state.cwd == temp_directory

    def test_unexpected_error_is_wrapped(self, temp_directory, mock_logger):
        """Test that an unexpected repository error is wrapped and logged."""
        repo = MagicMock(spec=FileRepositoryPort)
        repo.require_directory.side_effect = RuntimeError("stat failed")
        state = DirectoryState(temp_directory)

        with pytest.raises(FileRepositoryError, match="stat failed"):
            ChangeDirectoryUseCase(repo, mock_logger).execute(state, "subdir")

        assert state.cwd == temp_directory
        mock_logger.error.assert_called_once_with("Error changing directory: stat failed")


class TestGoUpUseCase:
    """Test cases for the GoUpUseCase."""

    def test_moves_to_parent(self, temp_directory, mock_logger):
        state = DirectoryState(os.path.join(temp_directory, "subdir"))

        assert GoUpUseCase(mock_logger).execute(state) == temp_directory

    def test_noop_at_root(self, mock_logger):
        """Test that going up from the root leaves the cwd unchanged."""
        root = os.path.abspath(os.sep)
        state = DirectoryState(root)

        GoUpUseCase(mock_logger).execute(state)
        GoUpUseCase(mock_logger).execute(state)

        assert state.cwd == root
