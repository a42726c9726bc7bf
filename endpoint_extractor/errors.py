"""Exception hierarchy for the extraction run."""


class ExtractorError(Exception):
    """Base class for every failure that aborts a run."""


class SourceNotFound(ExtractorError):
    """The log directory does not exist."""


class IoFailure(ExtractorError):
    """Reading a log file or writing the output document failed."""


class ParseError(ExtractorError):
    """A structured line could not be decomposed.

    ``source`` and ``line_number`` are filled in by the scanner once the
    failing line's location is known.
    """

    reason = "Failed to parse"

    def __init__(self, text: str, source: str | None = None, line_number: int | None = None):
        super().__init__(text)
        self.text = text
        self.source = source
        self.line_number = line_number

    def __str__(self) -> str:
        location = ""
        if self.source is not None:
            location = f"{self.source}:{self.line_number}: " if self.line_number else f"{self.source}: "
        return f"{location}{self.reason} :: {self.text}"


class MalformedLine(ParseError):
    reason = "Line lacks [timestamp][thread] structure"


class MalformedMessage(ParseError):
    reason = "Message has no origin delimiter"


class UnrecognizedHttpFormat(ParseError):
    reason = "Failed to parse request data"
