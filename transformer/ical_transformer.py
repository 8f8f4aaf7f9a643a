"""iCalendar transformer for event records."""

import hashlib
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union
from zoneinfo import ZoneInfo

from icalendar import Calendar, Event, vRecur

from reader.errors import OutputWriteError
from reader.models import EventRecord
from .base import BaseTransformer


class ICalTransformer(BaseTransformer):
    """Transformer that writes one event record per iCalendar file."""

    extension = ".ics"
    PRODID = "-//course2ics//Course schedule to iCal//EN"

    def __init__(self, tz: Optional[ZoneInfo] = None) -> None:
        """Initialize the iCalendar transformer.

        Args:
            tz: Zone the record's start time is expressed in. Defaults to UTC.
        """
        self._calendar: Optional[Calendar] = None
        self._timezone = tz or ZoneInfo("UTC")

    @property
    def timezone(self) -> ZoneInfo:
        return self._timezone

    def _generate_uid(self, record: EventRecord) -> str:
        """Generate a unique identifier for an event.

        The same record always gets the same UID, so re-importing a
        regenerated file updates the event instead of duplicating it.
        """
        unique_string = f"{record.title}-{record.start}-{record.recurrence_rule}"
        return hashlib.md5(unique_string.encode()).hexdigest() + "@course2ics"

    def _recurrence(self, record: EventRecord) -> vRecur:
        """Parse the record's RRULE and move a local UNTIL to UTC."""
        rule = vRecur.from_ical(record.recurrence_rule)
        if "UNTIL" in rule:
            until = rule["UNTIL"][0]
            if isinstance(until, datetime) and until.tzinfo is None:
                until = until.replace(tzinfo=self._timezone)
                rule["UNTIL"] = [until.astimezone(timezone.utc)]
        return rule

    def transform(self, record: EventRecord) -> Calendar:
        """Transform an event record into a single-event calendar.

        Args:
            record: The assembled event.

        Returns:
            iCalendar Calendar object.
        """
        self._calendar = Calendar()
        self._calendar.add("prodid", self.PRODID)
        self._calendar.add("version", "2.0")
        self._calendar.add("calscale", "GREGORIAN")
        self._calendar.add("method", "PUBLISH")

        event = Event()
        start_datetime = record.start_datetime().replace(tzinfo=self._timezone)

        event.add("uid", self._generate_uid(record))
        event.add("dtstamp", datetime.now(timezone.utc))
        event.add("dtstart", start_datetime)
        event.add("duration", record.duration.as_timedelta())
        event.add("rrule", self._recurrence(record))
        event.add("summary", record.title)

        if record.description:
            event.add("description", record.description)

        event.add("status", record.status)
        event.add(
            "organizer",
            f"mailto:{record.organizer.email}",
            parameters={"cn": record.organizer.name},
        )

        for attendee in record.attendees:
            event.add(
                "attendee",
                f"mailto:{attendee.email}",
                parameters={"cn": attendee.name, "role": "REQ-PARTICIPANT"},
            )

        self._calendar.add_component(event)
        return self._calendar

    def to_ical(self) -> bytes:
        """Serialized form of the last transformed calendar.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")
        return self._calendar.to_ical()

    def save(self, output_path: Union[str, Path]) -> None:
        """Save the calendar to an .ics file.

        Args:
            output_path: Path to the output file.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
            OutputWriteError: If the file cannot be written.
        """
        data = self.to_ical()
        try:
            with open(output_path, "wb") as f:
                f.write(data)
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"Cannot write '{output_path}': {e}") from e
