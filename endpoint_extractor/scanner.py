"""Per-file scan state machine and the multi-file driver.

Each file is scanned into its own ResultSet; the driver merges those in
path order so the first detected version and the last event per name win,
whether files were scanned sequentially or on a thread pool.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from endpoint_extractor.errors import ParseError
from endpoint_extractor.models import ResultSet, ScanState
from endpoint_extractor.parser import (
    extract_http_event,
    extract_version,
    is_http_event,
    split_line,
    split_message,
)
from endpoint_extractor.reader import read_lines

logger = logging.getLogger(__name__)

STRUCTURED_PREFIX = "["
PREAMBLE_TOKEN = "LogInit"
VERSION_ORIGIN = "LogShooter"


def next_state(state: ScanState, line: str) -> ScanState:
    """AWAITING_PREAMBLE -> IN_LOG on the first unbracketed ``LogInit`` line."""
    if (
        state is ScanState.AWAITING_PREAMBLE
        and not line.startswith(STRUCTURED_PREFIX)
        and line.startswith(PREAMBLE_TOKEN)
    ):
        return ScanState.IN_LOG
    return state


class FileScanner:
    """Feeds the lines of one file through the parsing pipeline."""

    def __init__(self, source: str = "", strict: bool = True):
        self.source = source
        self.strict = strict
        self.state = ScanState.AWAITING_PREAMBLE
        self.result = ResultSet()
        self.lines_read = 0
        self.events_seen = 0
        self.skipped = 0

    def feed(self, line: str):
        """Process one raw line, advancing the preamble state or routing the payload."""
        self.lines_read += 1

        if not line.startswith(STRUCTURED_PREFIX):
            self.state = next_state(self.state, line)
            return
        if self.state is ScanState.AWAITING_PREAMBLE:
            return

        try:
            self._process(line)
        except ParseError as e:
            e.source = self.source
            e.line_number = self.lines_read
            if self.strict:
                raise
            self.skipped += 1
            logger.warning("Skipping record: %s", e)

    def _process(self, line: str):
        message = split_message(split_line(line).message)

        if not self.result.has_version and message.origin == VERSION_ORIGIN:
            version = extract_version(message.data)
            if version is not None:
                self.result.set_version(version)

        if is_http_event(message.data):
            event = extract_http_event(message.data)
            self.events_seen += 1
            logger.debug("Request: %s", event)
            self.result.add_event(event)

    def scan(self, lines: Iterable[str]) -> ResultSet:
        """Feed every line and return this file's ResultSet."""
        for line in lines:
            self.feed(line)
        return self.result


def scan_file(filepath: str, strict: bool = True, encoding: str = "utf-8") -> ResultSet:
    """Scan one file with a fresh FileScanner."""
    logger.info("Reading file: %s", os.path.basename(filepath))
    scanner = FileScanner(source=filepath, strict=strict)
    result = scanner.scan(read_lines(filepath, encoding=encoding))
    if scanner.state is ScanState.AWAITING_PREAMBLE:
        logger.debug("No %s preamble in %s, nothing mined", PREAMBLE_TOKEN, filepath)
    if scanner.skipped:
        logger.warning("%s: skipped %d malformed record(s)", filepath, scanner.skipped)
    return result


def scan_directory(
    paths: list[str],
    strict: bool = True,
    workers: int = 1,
    encoding: str = "utf-8",
) -> ResultSet:
    """Scan every file and merge the per-file results in path order."""
    total = ResultSet()

    def merge(result: ResultSet):
        had_version = total.has_version
        total.merge(result)
        if not had_version and total.has_version:
            logger.info("Game Version: %s", total.version)
        logger.info("Finished reading file, total processed: %d", len(total.endpoints))

    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(scan_file, p, strict, encoding) for p in paths]
            # Results are consumed in submission order; the first failure aborts the run.
            try:
                for future in futures:
                    merge(future.result())
            except Exception:
                pool.shutdown(wait=False, cancel_futures=True)
                raise
    else:
        for path in paths:
            merge(scan_file(path, strict=strict, encoding=encoding))

    return total
