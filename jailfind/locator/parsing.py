"""Search output parsing."""

import os

from more_itertools import unique_everseen


def _strip_separators(path: str) -> str:
    return path.rstrip(os.sep + (os.altsep or ""))


def parse_output(output: str) -> list[str]:
    """Split newline-separated command output into unique paths, in order."""
    lines = (line.strip() for line in output.splitlines())
    return list(unique_everseen(line for line in lines if line))


def filter_directory_matches(results: list[str], relative_path: str) -> list[str]:
    """Keep results ending with the segments of ``relative_path``."""
    wanted = _strip_separators(relative_path).lstrip(os.sep + (os.altsep or ""))
    if not wanted:
        return list(results)
    matches = []
    for result in results:
        candidate = _strip_separators(result)
        if candidate == wanted or candidate.endswith(os.sep + wanted):
            matches.append(result)
    return matches
