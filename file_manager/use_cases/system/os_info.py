"""
Use case answering the ``os`` command's sub-commands.
"""

import json
import logging
from typing import Callable, Optional

from file_manager.exceptions import CommandError, ErrorKind
from file_manager.ports.system.os_facts_port import OsFactsPort


class OsInfoUseCase:
    """Turn an ``os`` flag into the lines to print."""

    def __init__(self, os_facts: OsFactsPort, logger: Optional[logging.Logger] = None):
        self._os_facts = os_facts
        self._logger = logger or logging.getLogger(__name__)
        self._queries: dict[str, Callable[[], list[str]]] = {
            "--EOL": self._eol,
            "--cpus": self._cpus,
            "--homedir": lambda: [self._os_facts.homedir()],
            "--username": lambda: [self._os_facts.username()],
            "--architecture": lambda: [self._os_facts.architecture()],
        }

    def flags(self) -> list[str]:
        return list(self._queries)

    def execute(self, flag: str) -> list[str]:
        """
        Args:
            flag: One of --EOL, --cpus, --homedir, --username, --architecture

        Raises:
            CommandError: InvalidSubcommand for any other flag
        """
        query = self._queries.get(flag)
        if query is None:
            raise CommandError(f"Unknown os sub-command: {flag}", ErrorKind.INVALID_SUBCOMMAND)
        self._logger.info(f"Querying OS facts: {flag}")
        return query()

    def _eol(self) -> list[str]:
        # Quoted so that "\n" and "\r\n" are visible
        return [json.dumps(self._os_facts.eol())]

    def _cpus(self) -> list[str]:
        cpus = self._os_facts.cpus()
        lines = [f"Overall CPUs: {len(cpus)}"]
        for index, cpu in enumerate(cpus, start=1):
            if cpu.speed_mhz:
                lines.append(f"CPU {index}: {cpu.model}, {cpu.speed_mhz / 1000:.2f} GHz")
            else:
                lines.append(f"CPU {index}: {cpu.model}")
        return lines
