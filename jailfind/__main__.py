"""Command line entry point."""

import argparse
import logging
import sys
from pathlib import Path

from .common.app import app_dirs
from .common.errors import CommandFailed, InvalidConfig, InvalidTarget, JailEscape
from .common.pydantic import FileEntry, LocatorConfig, SearchMode
from .locator.finder import Locator

EXIT_INVALID = 2
EXIT_JAIL_ESCAPE = 3
EXIT_COMMAND_FAILED = 4


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="jailfind", description="Find files without leaving a root directory")
    parser.add_argument("--root", help="Root directory no search may escape")
    parser.add_argument("name", help="File name, or relative directory path with --dir")
    parser.add_argument("--path", default=".", help="Search path inside the root (default: the root)")
    parser.add_argument("--dir", action="store_true", help="Search for directories")
    parser.add_argument("--mode", choices=[m.value for m in SearchMode], help="Search mode")
    parser.add_argument("--timeout", type=int, help="Command timeout in seconds")
    parser.add_argument("--raw", action="store_true", help="Print paths only, without metadata")
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_config(args: argparse.Namespace) -> LocatorConfig:
    """Merge the configuration file with explicit flags."""
    values: dict[str, object] = {}
    config_path = args.config if args.config is not None else app_dirs.app_config_path
    if config_path.exists():
        values.update(LocatorConfig.from_json(config_path.read_text()).model_dump())
    elif args.config is not None:
        raise InvalidConfig(f"Config file does not exist: {config_path}")

    if args.root is not None:
        values["root_directory"] = args.root
    if args.mode is not None:
        values["search_mode"] = args.mode
    if args.timeout is not None:
        values["timeout_seconds"] = args.timeout
    if "root_directory" not in values:
        raise InvalidConfig("No root directory given")
    return LocatorConfig.create(**values)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        locator = Locator(load_config(args))
        if args.dir:
            results: list[str] | list[FileEntry] = locator.find_directory(args.name, args.path)
        else:
            results = locator.find_file(args.name, args.path, with_metadata=not args.raw)
    except (InvalidConfig, InvalidTarget) as e:
        print(f"jailfind: {e}", file=sys.stderr)
        return EXIT_INVALID
    except JailEscape as e:
        print(f"jailfind: {e}", file=sys.stderr)
        return EXIT_JAIL_ESCAPE
    except CommandFailed as e:
        print(f"jailfind: {e}", file=sys.stderr)
        return EXIT_COMMAND_FAILED

    for result in results:
        print(result.model_dump_json() if isinstance(result, FileEntry) else result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
