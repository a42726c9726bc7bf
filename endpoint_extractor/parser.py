"""Line, message and HTTP-event parsing — pure functions + compiled regex."""

import re

from endpoint_extractor.errors import MalformedLine, MalformedMessage, UnrecognizedHttpFormat
from endpoint_extractor.models import HttpEvent, LogLine, Message

LINE_DELIMITER = "]"
ORIGIN_DELIMITER = ":"

HTTP_MARKER = "Platform HTTP"
WARNING_PREFIX = "Warning"
VERSION_MARKER = "Display: Branch:"
BRANCH_TOKEN = "Branch:"

HTTP_EVENT_PATTERN = re.compile(
    r"QueryName:\s?\[(\w+)\], "
    r"URL \[(\w+)\s?(.+)\], "
    r"TraceID:\s?\[(\w+)\] "
    r"Response Code:\s?\[(\d+)\], "
    r"Seconds Since Query\s?\[(\d+(?:\.\d+)?)\]"
)


def split_line(line: str) -> LogLine:
    """Split ``[timestamp][thread]message`` on the first two ``]``.

    Any further ``]`` belong to the message and are kept as-is.
    """
    stripped = line.rstrip("\r\n")
    parts = stripped.split(LINE_DELIMITER)
    if len(parts) < 2:
        raise MalformedLine(stripped)

    return LogLine(
        timestamp=parts[0].removeprefix("["),
        thread=parts[1].removeprefix("["),
        message=LINE_DELIMITER.join(parts[2:]),
    )


def split_message(message: str) -> Message:
    """Split ``Origin: data`` on the first colon; data is trimmed."""
    origin, sep, data = message.partition(ORIGIN_DELIMITER)
    if not sep:
        raise MalformedMessage(message)
    return Message(origin=origin, data=data.strip())


def is_http_event(data: str) -> bool:
    """True for HTTP event payloads. Warning lines mention the marker but are noise."""
    return HTTP_MARKER in data and not data.startswith(WARNING_PREFIX)


def extract_http_event(data: str) -> HttpEvent:
    match = HTTP_EVENT_PATTERN.search(data)
    if match is None:
        raise UnrecognizedHttpFormat(data)

    name, method, url, trace_id, response_code, response_time = match.groups()
    return HttpEvent(
        name=name,
        url=url,
        method=method,
        trace_id=trace_id,
        response_code=response_code,
        response_time=response_time,
    )


def extract_version(data: str) -> str | None:
    """Return the branch string from a ``Display: Branch: <version>`` payload."""
    if VERSION_MARKER not in data:
        return None
    _, _, version = data.partition(BRANCH_TOKEN)
    return version.strip()
