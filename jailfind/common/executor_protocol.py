"""Process executor protocol for dependency injection."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ProcessOutcome:
    """Result of running an external command."""

    success: bool
    stdout: str
    stderr: str = ""
    returncode: int | None = None
    timed_out: bool = False


class ProcessExecutor(Protocol):
    """Protocol for running one external command to completion or timeout."""

    def execute(self, argv: list[str], timeout: float) -> ProcessOutcome:
        """Run ``argv`` without a shell and report its outcome.

        Implementations must terminate the process when ``timeout`` elapses.
        """
        ...
