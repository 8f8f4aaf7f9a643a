"""Exceptions raised while turning schedule rows into calendar files."""


class Course2IcsError(Exception):
    """Base class for all course2ics errors."""


class ValidationError(Course2IcsError):
    """A row is missing a field required to build an event."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} is missing")
        self.field_name = field_name


class RowProcessingError(Course2IcsError):
    """A validated row could not be turned into an event."""


class InvalidDayCode(RowProcessingError, ValueError):
    """A day string contains a token outside the day-code enumeration."""


class InvalidTimeFormat(RowProcessingError, ValueError):
    """A time range is not in the form HH:MM - HH:MM."""


class MalformedName(RowProcessingError, ValueError):
    """An instructor name is not in the form 'Last, First'."""


class UnresolvableOccurrence(RowProcessingError):
    """No date matching the meeting pattern could be found."""


class IOFault(Course2IcsError):
    """Reading the input table or writing an output file failed."""


class InputReadError(IOFault):
    """The input table could not be read or holds no data rows."""


class OutputWriteError(IOFault):
    """A single calendar file could not be written."""


class IndexWriteError(IOFault):
    """The run index could not be written."""
