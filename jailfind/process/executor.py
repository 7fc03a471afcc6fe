"""Subprocess-backed process executor."""

import logging
import subprocess

from ..common.errors import CommandFailed
from ..common.executor_protocol import ProcessExecutor, ProcessOutcome

logger = logging.getLogger(__name__)


class SubprocessExecutor:
    """Run commands with ``subprocess``, never through a shell.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, encoding: str = "utf-8"):
        """Initialize the executor."""
        self.encoding = encoding

    def execute(self, argv: list[str], timeout: float) -> ProcessOutcome:
        """Run ``argv`` and wait at most ``timeout`` seconds."""
        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding=self.encoding,
                errors="surrogateescape",
            )
        except OSError as e:
            return ProcessOutcome(success=False, stdout="", stderr=str(e), returncode=None)

        with proc:
            try:
                stdout, stderr = proc.communicate(timeout=timeout)
            except subprocess.TimeoutExpired:
                proc.kill()
                # Reap the child so nothing is left running.
                stdout, stderr = proc.communicate()
                return ProcessOutcome(
                    success=False,
                    stdout=stdout or "",
                    stderr=stderr or "",
                    returncode=proc.returncode,
                    timed_out=True,
                )

        return ProcessOutcome(
            success=proc.returncode == 0,
            stdout=stdout or "",
            stderr=stderr or "",
            returncode=proc.returncode,
        )


def run_command(executor: ProcessExecutor, argv: list[str], timeout: float) -> str:
    """Run a command and return its stdout, raising ``CommandFailed`` otherwise."""
    logger.debug("Running %s (timeout=%ss)", argv, timeout)
    outcome = executor.execute(argv, timeout)
    if outcome.timed_out or not outcome.success:
        logger.error(
            "Command %s failed (returncode=%s, timed_out=%s)", argv, outcome.returncode, outcome.timed_out
        )
        raise CommandFailed(argv, outcome.returncode, timed_out=outcome.timed_out, stderr=outcome.stderr)
    return outcome.stdout
