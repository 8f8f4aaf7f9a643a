"""Assembly of calendar event records from course rows."""

from reader.errors import MalformedName
from reader.models import (
    Attendee,
    CourseRow,
    EventRecord,
    MeetingPattern,
    Organizer,
    ResolvedOccurrence,
)
from reader.parsing import duration
from .scheduling import RecurrenceRule


def flip_name(name: str) -> str:
    """Turn 'Last, First' into 'First Last'.

    Raises:
        MalformedName: If the name has no comma.
    """
    last, sep, first = name.partition(",")
    if not sep:
        raise MalformedName(f"Name '{name}' is not in the format 'Last, First'")
    return f"{first.strip()} {last.strip()}".strip()


def event_title(row: CourseRow) -> str:
    """Summary shown in calendars, e.g. 'CS 101 001'."""
    return " ".join(part for part in (row.subject, row.course, row.section) if part)


def _attendees(row: CourseRow) -> tuple[Attendee, ...]:
    if not (row.instructor2 and row.email2):
        return ()
    name = row.instructor2
    if "," in name:
        name = flip_name(name)
    return (Attendee(name=name, email=row.email2),)


def assemble(
    row: CourseRow,
    pattern: MeetingPattern,
    occurrence: ResolvedOccurrence,
    recurrence: RecurrenceRule
) -> EventRecord:
    """Combine a row and one of its resolved patterns into an event record.

    Args:
        row: The validated course row.
        pattern: The meeting pattern being built.
        occurrence: First meeting of the pattern.
        recurrence: Weekly rule anchored at the occurrence.

    Returns:
        The event record passed to calendar serializers.

    Raises:
        MalformedName: If the primary instructor is not 'Last, First'.
    """
    start = occurrence.as_datetime()
    return EventRecord(
        start=(start.year, start.month, start.day, start.hour, start.minute),
        duration=duration(pattern.time_range),
        recurrence_rule=recurrence.text,
        title=event_title(row),
        description=row.title,
        organizer=Organizer(name=flip_name(row.instructor1), email=row.email1),
        attendees=_attendees(row),
    )
