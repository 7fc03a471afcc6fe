"""Search command construction."""

import os
from pathlib import Path

from ..common.errors import InvalidTarget
from ..common.pydantic import SearchMode

EXECUTABLES: dict[SearchMode, str] = {
    SearchMode.PLAIN_FIND: "find",
    SearchMode.FINDER_ALIAS: "find",
}


def _separators() -> str:
    return os.sep + (os.altsep or "")


def clean_target_name(name: str) -> str:
    """Reduce a target name to its last path component."""
    if "\0" in name:
        raise InvalidTarget(f"Cannot search for {name!r}: contains a NUL byte")
    stripped = name.rstrip(_separators())
    for sep in _separators():
        stripped = stripped.rsplit(sep, 1)[-1]
    if stripped in {"", ".", ".."}:
        raise InvalidTarget(f"Cannot search for {name!r}")
    return stripped


def build_find_command(
    mode: SearchMode, path: Path, name: str, directories_only: bool = False
) -> list[str]:
    """Build the argument vector for a confined name search.

    ``path`` must already be confined; ``name`` is reduced to a basename and
    only ever appears as the operand of ``-name``.
    """
    argv = [EXECUTABLES[SearchMode(mode)], str(path)]
    if directories_only:
        argv += ["-type", "d"]
    argv += ["-name", clean_target_name(name)]
    return argv
