"""Per-path metadata for search results."""

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

import filetype
from charset_normalizer import from_bytes

from ..common.pydantic import FileEntry

logger = logging.getLogger(__name__)

UNKNOWN_MIME = "unknown"

SPECIAL_MIMES = {
    stat.S_IFIFO: "inode/fifo",
    stat.S_IFCHR: "inode/chardevice",
    stat.S_IFBLK: "inode/blockdevice",
    stat.S_IFSOCK: "inode/socket",
}

_OPEN_FLAGS = getattr(os, "O_NONBLOCK", 0) | getattr(os, "O_BINARY", 0)


class MimeSniffer:
    """Content-based MIME type detection.

    Binary formats are recognized by their magic numbers. Files without a
    known signature are reported as ``text/plain`` when their leading bytes
    decode as text, ``application/octet-stream`` otherwise.
    """

    def __init__(self, sample_size: int = 8192):
        """Initialize the sniffer."""
        self.sample_size = sample_size

    def sniff(self, path: Path) -> str:
        """Guess the MIME type of ``path``, or ``"unknown"`` if it cannot be read.

        Only regular files are opened; opening a FIFO would block until a
        writer appears.
        """
        try:
            mode = path.stat().st_mode
            if stat.S_ISDIR(mode):
                return "directory"
            if not stat.S_ISREG(mode):
                return SPECIAL_MIMES.get(stat.S_IFMT(mode), UNKNOWN_MIME)
            fd = os.open(path, os.O_RDONLY | _OPEN_FLAGS)
            with os.fdopen(fd, "rb") as f:
                # Swapped for a special file after the stat.
                if not stat.S_ISREG(os.fstat(f.fileno()).st_mode):
                    return UNKNOWN_MIME
                head = f.read(self.sample_size)
        except OSError as e:
            logger.debug("Could not sniff %s: %s", path, e)
            return UNKNOWN_MIME

        if not head:
            return "application/x-empty"
        kind = filetype.guess(head)
        if kind is not None:
            return kind.mime
        if b"\x00" not in head and from_bytes(head).best() is not None:
            return "text/plain"
        return "application/octet-stream"


def _entry_type(mode: int) -> str:
    if stat.S_ISLNK(mode):
        return "link"
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISCHR(mode):
        return "char"
    if stat.S_ISBLK(mode):
        return "block"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "unknown"


def describe(path: str | Path, sniffer: MimeSniffer) -> FileEntry | None:
    """Build the metadata record for ``path``, or ``None`` if it is gone."""
    path = Path(path)
    try:
        lst = path.lstat()
        st = path.stat()
        realpath = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug("Skipping %s: %s", path, e)
        return None

    return FileEntry(
        path=str(path.parent),
        filename=path.name,
        realpath=str(realpath),
        extension=path.suffix.lstrip("."),
        type=_entry_type(lst.st_mode),
        mime_type=sniffer.sniff(path),
        size=st.st_size,
        is_file=stat.S_ISREG(st.st_mode),
        is_dir=stat.S_ISDIR(st.st_mode),
        is_link=stat.S_ISLNK(lst.st_mode),
        writable=os.access(path, os.W_OK),
        readable=os.access(path, os.R_OK),
        executable=os.access(path, os.X_OK),
    )


def enrich(paths: Iterable[str | Path], sniffer: MimeSniffer) -> list[FileEntry]:
    """Describe every path that still exists, preserving order."""
    entries = (describe(p, sniffer) for p in paths)
    return [entry for entry in entries if entry is not None]
