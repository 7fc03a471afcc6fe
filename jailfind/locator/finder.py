"""Confined file locator."""

import logging
from functools import cached_property
from pathlib import Path, PurePath

from ..common.executor_protocol import ProcessExecutor
from ..common.pydantic import FileEntry, LocatorConfig, SearchMode
from ..process.executor import SubprocessExecutor, run_command
from .command import build_find_command, clean_target_name
from .jail import JailResolver
from .metadata import MimeSniffer, enrich
from .parsing import filter_directory_matches, parse_output

logger = logging.getLogger(__name__)


class Locator:
    """Find files and directories by name without leaving a root directory.

    Every search path is canonicalized and checked against the root before a
    command is spawned. Search paths that do not exist produce no results;
    search paths outside of the root raise ``JailEscape``.

    Example:
        >>> locator = Locator.configure("/srv/site")
        >>> locator.find_file("index.html", "public", with_metadata=False)
        ['/srv/site/public/index.html']
    """

    def __init__(self, config: LocatorConfig, executor: ProcessExecutor | None = None):
        """Initialize the locator from a validated configuration."""
        self._config = config
        self._executor: ProcessExecutor = executor if executor is not None else SubprocessExecutor()

    @classmethod
    def configure(
        cls,
        root_directory: str | Path,
        search_mode: SearchMode | str = SearchMode.PLAIN_FIND,
        timeout_seconds: int = 60,
        executor: ProcessExecutor | None = None,
    ) -> "Locator":
        """Validate the arguments and build a locator, raising ``InvalidConfig`` on failure."""
        config = LocatorConfig.create(
            root_directory=root_directory, search_mode=search_mode, timeout_seconds=timeout_seconds
        )
        return cls(config, executor=executor)

    @property
    def config(self) -> LocatorConfig:
        """Current configuration."""
        return self._config

    @property
    def root_directory(self) -> Path:
        """Canonical root directory."""
        return self._config.root_directory

    @cached_property
    def sniffer(self) -> MimeSniffer:
        """MIME sniffer shared by all metadata lookups."""
        return MimeSniffer()

    def set_root_directory(self, root_directory: str | Path) -> "Locator":
        """Replace the root directory."""
        self._config = self._config.updated(root_directory=root_directory)
        return self

    def set_search_mode(self, search_mode: SearchMode | str) -> "Locator":
        """Replace the search mode."""
        self._config = self._config.updated(search_mode=search_mode)
        return self

    def set_timeout(self, timeout_seconds: int) -> "Locator":
        """Replace the command timeout."""
        self._config = self._config.updated(timeout_seconds=timeout_seconds)
        return self

    def find_file(
        self, name: str, search_path: str | Path = ".", with_metadata: bool = True
    ) -> list[str] | list[FileEntry]:
        """Find entries called ``name`` beneath ``search_path``.

        In finder mode a name with directory components, such as
        ``conf/app.ini``, first locates the ``conf`` directory and searches
        inside the first match.
        """
        config = self._config
        clean_target_name(name)
        jail = JailResolver(config.root_directory)
        start = jail.resolve(search_path)
        if start is None:
            return []

        parent = PurePath(name).parent
        if config.search_mode is SearchMode.FINDER_ALIAS and str(parent) != ".":
            directories = self._find_directories(config, start, str(parent))
            if directories:
                start = jail.resolve(directories[0]) or start
                logger.debug("Narrowed search for %s to %s", name, start)

        argv = build_find_command(config.search_mode, start, name)
        files = parse_output(run_command(self._executor, argv, config.timeout_seconds))
        logger.debug("Found %d entries named %s under %s", len(files), argv[-1], start)

        if with_metadata:
            return enrich(files, self.sniffer)
        return files

    def find_directory(self, relative_path: str, search_path: str | Path = ".") -> list[str]:
        """Find directories whose path ends with ``relative_path`` beneath ``search_path``."""
        config = self._config
        clean_target_name(relative_path)
        start = JailResolver(config.root_directory).resolve(search_path)
        if start is None:
            return []
        return self._find_directories(config, start, relative_path)

    def _find_directories(self, config: LocatorConfig, start: Path, relative_path: str) -> list[str]:
        """Run a directory search from an already confined ``start``."""
        argv = build_find_command(config.search_mode, start, relative_path, directories_only=True)
        results = parse_output(run_command(self._executor, argv, config.timeout_seconds))
        matches = filter_directory_matches(results, relative_path)
        logger.debug(
            "Found %d of %d directories matching %s under %s", len(matches), len(results), relative_path, start
        )
        return matches
