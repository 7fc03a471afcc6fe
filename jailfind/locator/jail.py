"""Search path confinement."""

import errno
import logging
import os
from pathlib import Path

from ..common.errors import JailEscape

logger = logging.getLogger(__name__)


class JailResolver:
    """Resolve caller-supplied paths and confine them to a root directory.

    Relative paths are interpreted against the root. Containment is decided on
    the canonical path, so ``..`` segments and symlinks cannot be used to leave
    the root. The comparison is separator-aware: a root of ``/var/www`` does
    not contain ``/var/www-secret``.
    """

    def __init__(self, root: Path):
        """Initialize the resolver with an already canonical root."""
        self.root = root
        self._prefix = str(root) if str(root).endswith(os.sep) else str(root) + os.sep

    def contains(self, path: Path) -> bool:
        """Return whether a canonical ``path`` is the root or lies beneath it."""
        candidate = str(path)
        return candidate == str(self.root) or candidate.startswith(self._prefix)

    def resolve(self, search_path: str | Path) -> Path | None:
        """Canonicalize ``search_path`` inside the root.

        Returns ``None`` when the path does not exist. Raises ``JailEscape``
        when it exists outside of the root.
        """
        requested = Path(search_path)
        if not requested.is_absolute():
            requested = self.root / requested
        try:
            resolved = requested.resolve(strict=True)
        except FileNotFoundError:
            logger.debug("Search path %s does not exist", search_path)
            return None
        except (NotADirectoryError, RuntimeError, ValueError):
            # A file used as a directory component, a symlink loop, or a NUL byte.
            logger.debug("Search path %s cannot be resolved", search_path)
            return None
        except OSError as e:
            if e.errno != errno.ELOOP:
                raise
            logger.debug("Search path %s is a symlink loop", search_path)
            return None

        if not self.contains(resolved):
            logger.warning("Rejected search path %s: resolves to %s outside of %s", search_path, resolved, self.root)
            raise JailEscape(search_path, resolved, self.root)
        return resolved
