"""Confined file locator."""

from ..common.errors import CommandFailed, InvalidConfig, InvalidTarget, JailEscape, LocatorError
from ..common.pydantic import FileEntry, LocatorConfig, SearchMode
from .finder import Locator

__all__ = [
    "CommandFailed",
    "FileEntry",
    "InvalidConfig",
    "InvalidTarget",
    "JailEscape",
    "Locator",
    "LocatorConfig",
    "LocatorError",
    "SearchMode",
]
