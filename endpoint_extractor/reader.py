"""Log source access — locate the log directory, enumerate and read files."""

import logging
import os
from typing import Generator, Mapping

from endpoint_extractor.errors import IoFailure, SourceNotFound

logger = logging.getLogger(__name__)

LOGS_SUBPATH = os.path.join("VALORANT", "Saved", "Logs")


def default_log_dir(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the game's log directory under LOCALAPPDATA, or None if unset."""
    env = os.environ if environ is None else environ
    local_app_data = env.get("LOCALAPPDATA")
    if not local_app_data:
        return None
    return os.path.join(local_app_data, LOGS_SUBPATH)


def locate_log_dir(path: str | None) -> str:
    """Validate that the log directory exists. Raises SourceNotFound otherwise."""
    if not path or not os.path.isdir(path):
        raise SourceNotFound(f"Logs directory not found: {path or '<unset>'}")
    logger.info("Logs Path: %s", path)
    return path


def list_log_files(directory: str) -> list[str]:
    """Return every regular file in the directory, sorted by name.

    No extension filter is applied; subdirectories are skipped.
    """
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise IoFailure(f"Failed to read directory {directory}: {e}") from e

    paths = []
    for name in names:
        path = os.path.join(directory, name)
        if not os.path.isfile(path):
            logger.debug("Skipping non-file entry: %s", path)
            continue
        paths.append(path)
    return paths


def read_lines(filepath: str, encoding: str = "utf-8") -> Generator[str, None, None]:
    """Yield each line of a file without its line terminator."""
    try:
        with open(filepath, "r", encoding=encoding, newline="\n") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise IoFailure(f"Failed to read {filepath}: {e}") from e
