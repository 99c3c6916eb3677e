from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CpuInfo:
    model: str
    speed_mhz: Optional[float] = None


class OsFactsPort(ABC):
    """Read-only facts about the host operating system."""

    @abstractmethod
    def eol(self) -> str:
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        pass

    @abstractmethod
    def homedir(self) -> str:
        pass

    @abstractmethod
    def username(self) -> str:
        pass

    @abstractmethod
    def architecture(self) -> str:
        pass
