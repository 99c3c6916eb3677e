from dataclasses import dataclass, field
from typing import Optional

from file_manager.exceptions import ErrorKind


@dataclass(frozen=True)
class Command:
    """Domain-level command typed by the user: a verb and its arguments."""

    name: str
    args: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> Optional["Command"]:
        # whitespace split; blank input carries no command
        parts = line.split()
        if not parts:
            return None
        return cls(parts[0], parts[1:])


@dataclass(frozen=True)
class CommandResult:
    """Outcome of dispatching one input line."""

    ok: bool
    error: Optional[ErrorKind] = None
    exiting: bool = False

    @classmethod
    def success(cls) -> "CommandResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, kind: ErrorKind) -> "CommandResult":
        return cls(ok=False, error=kind)

    @classmethod
    def exit(cls) -> "CommandResult":
        return cls(ok=True, exiting=True)
