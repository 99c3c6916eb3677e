"""
Host OS facts read through the standard library.
"""

import getpass
import logging
import os
import platform
from typing import Optional

from typing_extensions import override

from file_manager.ports.system.os_facts_port import CpuInfo, OsFactsPort


class LocalOsFacts(OsFactsPort):
    """OsFactsPort implementation for the machine the shell runs on."""

    def __init__(self, logger: Optional[logging.Logger] = None, cpuinfo_path: str = "/proc/cpuinfo"):
        self._logger = logger or logging.getLogger(__name__)
        self._cpuinfo_path = cpuinfo_path

    @override
    def eol(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuInfo]:
        count = os.cpu_count() or 1
        parsed = self._read_cpuinfo()
        if len(parsed) == count:
            return parsed
        # No per-core details (non-Linux, containers): repeat a generic model
        model = platform.processor() or platform.machine() or "unknown"
        return [CpuInfo(model=model) for _ in range(count)]

    def _read_cpuinfo(self) -> list[CpuInfo]:
        try:
            with open(self._cpuinfo_path, "r", encoding="utf-8", errors="replace") as f:
                text = f.read()
        except OSError:
            return []

        cpus: list[CpuInfo] = []
        for block in text.strip().split("\n\n"):
            fields: dict[str, str] = {}
            for line in block.splitlines():
                key, sep, value = line.partition(":")
                if sep:
                    fields[key.strip()] = value.strip()
            if "processor" not in fields:
                continue
            speed: Optional[float] = None
            try:
                speed = float(fields["cpu MHz"]) if "cpu MHz" in fields else None
            except ValueError:
                self._logger.debug(f"Unparseable cpu MHz: {fields['cpu MHz']!r}")
            model = fields.get("model name") or fields.get("Hardware") or platform.machine()
            cpus.append(CpuInfo(model=model, speed_mhz=speed))
        return cpus

    @override
    def homedir(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()
