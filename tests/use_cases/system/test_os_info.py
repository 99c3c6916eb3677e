"""
Tests for the OsInfoUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_manager.exceptions import CommandError, ErrorKind
from file_manager.ports.system.os_facts_port import CpuInfo, OsFactsPort
from file_manager.use_cases.system.os_info import OsInfoUseCase


@pytest.fixture
def os_facts():
    facts = MagicMock(spec=OsFactsPort)
    facts.eol.return_value = "\n"
    facts.cpus.return_value = [CpuInfo("Test CPU", 2400.0), CpuInfo("Test CPU", None)]
    facts.homedir.return_value = "/home/u"
    facts.username.return_value = "u"
    facts.architecture.return_value = "x86_64"
    return facts


class TestOsInfoUseCase:
    """Test cases for the OsInfoUseCase."""

    def test_eol_is_quoted(self, os_facts, mock_logger):
        assert OsInfoUseCase(os_facts, mock_logger).execute("--EOL") == ['"\\n"']

    def test_cpus(self, os_facts, mock_logger):
        """Test the CPU count line followed by one line per CPU."""
        lines = OsInfoUseCase(os_facts, mock_logger).execute("--cpus")

        assert lines == [
            "Overall CPUs: 2",
            "CPU 1: Test CPU, 2.40 GHz",
            "CPU 2: Test CPU",
        ]

    @pytest.mark.parametrize(
        "flag, expected",
        [("--homedir", "/home/u"), ("--username", "u"), ("--architecture", "x86_64")],
    )
    def test_single_value_flags(self, os_facts, mock_logger, flag, expected):
        assert OsInfoUseCase(os_facts, mock_logger).execute(flag) == [expected]

    def test_unknown_flag(self, os_facts, mock_logger):
        """Test that an unknown flag is an InvalidSubcommand."""
        with pytest.raises(CommandError) as exc:
            OsInfoUseCase(os_facts, mock_logger).execute("--kernel")
        assert exc.value.kind is ErrorKind.INVALID_SUBCOMMAND
