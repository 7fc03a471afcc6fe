"""Locator errors."""

from pathlib import Path


class LocatorError(Exception):
    """Base class for locator errors."""


class InvalidConfig(LocatorError, ValueError):
    """Invalid locator configuration."""


class InvalidTarget(LocatorError, ValueError):
    """Target name that cannot be searched for."""


class JailEscape(LocatorError, PermissionError):
    """Search path resolved outside of the root directory."""

    def __init__(self, requested: str | Path, resolved: Path, root: Path):
        """Record the offending paths."""
        super().__init__(f"Search path '{requested}' resolves to '{resolved}', outside of '{root}'")
        self.requested = requested
        self.resolved = resolved
        self.root = root


class CommandFailed(LocatorError, RuntimeError):
    """External search command exited non-zero or timed out."""

    def __init__(self, argv: list[str], returncode: int | None, timed_out: bool = False, stderr: str = ""):
        """Record the command outcome."""
        if timed_out:
            reason = "timed out"
        elif returncode is None:
            reason = "could not be started"
        else:
            reason = f"exited with status {returncode}"
        message = f"Command {argv[0] if argv else '?'} {reason}"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)
        self.argv = argv
        self.returncode = returncode
        self.timed_out = timed_out
        self.stderr = stderr
