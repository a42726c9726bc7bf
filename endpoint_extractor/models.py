"""Records produced by the extraction pipeline and the run-wide accumulator."""

import json
import re
from dataclasses import dataclass, field
from enum import Enum

UNKNOWN_VERSION = "unknown"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class ScanState(Enum):
    AWAITING_PREAMBLE = "awaiting_preamble"
    IN_LOG = "in_log"


@dataclass(frozen=True)
class LogLine:
    timestamp: str
    thread: str
    message: str


@dataclass(frozen=True)
class Message:
    origin: str
    data: str


@dataclass(frozen=True)
class HttpEvent:
    name: str
    url: str
    method: str
    trace_id: str
    response_code: str   # digits, kept as text
    response_time: str   # seconds, kept as text

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "url": self.url,
            "method": self.method,
            "trace_id": self.trace_id,
            "response_code": self.response_code,
            "response_time": self.response_time,
        }

    def __str__(self) -> str:
        return (
            f"Name: {self.name}, URL: {self.url}, Method: {self.method}, "
            f"TraceID: {self.trace_id}, Response Code: {self.response_code}, "
            f"Response Time: {self.response_time}"
        )


@dataclass
class ResultSet:
    """Endpoints keyed by query name plus the detected version.

    Events overwrite by name; the version is write-once.
    """

    endpoints: dict[str, HttpEvent] = field(default_factory=dict)
    version: str = UNKNOWN_VERSION

    @property
    def has_version(self) -> bool:
        return self.version != UNKNOWN_VERSION

    def add_event(self, event: HttpEvent):
        self.endpoints[event.name] = event

    def set_version(self, version: str) -> bool:
        """Record the version unless one is already known. Returns True if stored."""
        if self.has_version or version == UNKNOWN_VERSION:
            return False
        self.version = version
        return True

    def merge(self, other: "ResultSet"):
        """Fold a later result into this one, preserving first-version / last-event order."""
        if other.has_version:
            self.set_version(other.version)
        for event in other.endpoints.values():
            self.add_event(event)

    def to_dict(self) -> dict:
        return {
            "endpoints": {
                name: self.endpoints[name].to_dict()
                for name in sorted(self.endpoints)
            },
            "version": self.version,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2) + "\n"

    def output_filename(self) -> str:
        return f"output_{_UNSAFE_FILENAME_CHARS.sub('_', self.version)}.json"
