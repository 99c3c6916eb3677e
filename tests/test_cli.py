"""
Tests for the command line entry point.
"""

import io
import logging
from unittest.mock import patch

import pytest

from file_manager import cli
from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (logging.NullHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestCli:
    def test_username_flag(self):
        """Test that --username=<name> reaches the dispatcher."""
        with patch("file_manager.container.container.create_dispatcher") as create:
            create.return_value.run.return_value = 0

            status = cli.main(["--username=Ada", "--ignored"])

        assert status == 0
        create.assert_called_once_with(username="Ada")

    def test_default_username(self):
        with patch("file_manager.container.container.create_dispatcher") as create:
            create.return_value.run.return_value = 0

            cli.main([])

        create.assert_called_once_with(username="User")

    def test_failed_command_keeps_stderr_clean(self, monkeypatch, capsys, temp_directory):
        """Test a whole session: failures are reported on stdout only, with no detail."""
        monkeypatch.setattr(cli.settings, "log_file", None)
        monkeypatch.setattr(cli.settings, "log_stderr", False)
        session = DependencyContainer(config=Settings())
        monkeypatch.setattr(
            session,
            "create_dispatcher",
            lambda username: DependencyContainer.create_dispatcher(
                session, username=username, start_dir=temp_directory
            ),
        )
        monkeypatch.setattr("file_manager.container.container", session)
        monkeypatch.setattr("sys.stdin", io.StringIO("cd /nonexistent\nrm ghost.txt\n.exit\n"))

        status = cli.main(["--username=Ada"])

        captured = capsys.readouterr()
        assert status == 0
        assert captured.err == ""
        assert captured.out.count("Operation failed") == 2
        assert "does not exist" not in captured.out
        assert captured.out.endswith("Thank you for using File Manager, Ada, goodbye!\n")

    def test_log_file_receives_details(self, monkeypatch, tmp_path):
        """Test that a configured log file gets the failure detail."""
        log_file = tmp_path / "fm.log"
        monkeypatch.setattr(cli.settings, "log_file", str(log_file))
        monkeypatch.setattr(cli.settings, "log_level", "INFO")

        cli._configure_logging()
        logging.getLogger("file_manager.shell.dispatcher").info("Command 'cd' failed")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Command 'cd' failed" in log_file.read_text()
