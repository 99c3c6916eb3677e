"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console():
    """
    Console writing to an in-memory buffer; read it back with console.file.getvalue().
    """
    return Console(
        file=io.StringIO(),
        soft_wrap=True,
        highlight=False,
        color_system=None,
        width=200,
    )


@pytest.fixture
def dependency_container(console, monkeypatch):
    """
    Create a dependency container with a small chunk size and captured console.

    Returns:
        DependencyContainer instance
    """
    monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "7")
    return DependencyContainer(config=Settings(), console=console)


@pytest.fixture
def dispatcher(dependency_container, temp_directory):
    """
    Dispatcher whose session starts in the temporary directory.
    """
    return dependency_container.create_dispatcher(username="Tester", start_dir=temp_directory)
