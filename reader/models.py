"""Data models for course rows, meeting patterns and generated events."""

import json
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any, Optional

from .errors import ValidationError


COLUMNS = (
    "title",
    "subject",
    "course",
    "instructor1",
    "instructor2",
    "email1",
    "email2",
    "days1",
    "days2",
    "time1",
    "time2",
    "section",
)

REQUIRED_COLUMNS = ("title", "email1", "days1", "time1", "section")


@dataclass(frozen=True)
class CourseRow:
    """A single course section as read from the input table."""

    title: str
    subject: str
    course: str
    instructor1: str
    instructor2: str
    email1: str
    email2: str
    days1: str
    days2: str
    time1: str
    time2: str
    section: str
    line_number: int = field(default=0, compare=False)

    @classmethod
    def from_cells(cls, cells: list[str], line_number: int = 0) -> "CourseRow":
        """Build a row from raw cells in the fixed column order.

        Cells are stripped; missing trailing cells are treated as empty
        and cells past the last column are ignored.
        """
        values = [cell.strip() for cell in cells[:len(COLUMNS)]]
        values += [""] * (len(COLUMNS) - len(values))
        return cls(*values, line_number=line_number)

    def validate(self) -> None:
        """Raise ValidationError for the first missing required field."""
        for name in REQUIRED_COLUMNS:
            if not getattr(self, name):
                raise ValidationError(name)

    @property
    def has_second_pattern(self) -> bool:
        return bool(self.days2 and self.time2)


@dataclass(frozen=True)
class TimeRange:
    """Start and end time-of-day of a meeting."""

    start: time
    end: time


@dataclass(frozen=True)
class Duration:
    """Length of a meeting, split the way calendar durations are written."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        total = int(delta.total_seconds())
        minutes, seconds = divmod(total, 60)
        hours, minutes = divmod(minutes, 60)
        days, hours = divmod(hours, 24)
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    def as_timedelta(self) -> timedelta:
        return timedelta(
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )

    @property
    def total_minutes(self) -> int:
        return int(self.as_timedelta().total_seconds()) // 60


@dataclass(frozen=True)
class MeetingPattern:
    """One weekday set and time range on which a section meets."""

    index: int  # 1 or 2: which DAYS/TIME column pair it came from
    days: str
    times: str
    weekdays: tuple[int, ...]  # 0-6: Monday-Sunday, in listed order
    time_range: TimeRange


@dataclass(frozen=True)
class DateRange:
    """First and last day of the term, shared by every row of a run."""

    start: date
    end: date


@dataclass(frozen=True)
class ResolvedOccurrence:
    """The first concrete date and time on which a pattern meets."""

    date: date
    time: time

    def as_datetime(self) -> datetime:
        return datetime.combine(self.date, self.time)


@dataclass(frozen=True)
class Organizer:
    name: str
    email: str


@dataclass(frozen=True)
class Attendee:
    name: str
    email: str


@dataclass(frozen=True)
class EventRecord:
    """Everything a calendar serializer needs to write one event."""

    start: tuple[int, int, int, int, int]  # year, month, day, hour, minute
    duration: Duration
    recurrence_rule: str
    title: str
    description: str
    organizer: Organizer
    attendees: tuple[Attendee, ...] = ()
    status: str = "CONFIRMED"

    @property
    def duration_minutes(self) -> int:
        return self.duration.total_minutes

    def start_datetime(self) -> datetime:
        return datetime(*self.start)


@dataclass(frozen=True)
class GeneratedFile:
    """A calendar file written for one pattern of one row."""

    row: CourseRow
    pattern: MeetingPattern
    file_name: str
    path: Path

    def to_index_entry(self, date_range: DateRange) -> dict[str, Any]:
        return {
            "title": self.row.title,
            "subject": self.row.subject,
            "course": self.row.course,
            "section": self.row.section,
            "instructor": self.row.instructor1,
            "email": self.row.email1,
            "days": self.pattern.days,
            "times": self.pattern.times,
            "fromDate": date_range.start.isoformat(),
            "toDate": date_range.end.isoformat(),
            "filename": self.file_name,
        }


@dataclass
class RunIndex:
    """Append-only list of files written during a run."""

    date_range: DateRange
    files: list[GeneratedFile] = field(default_factory=list)

    def add(self, generated: GeneratedFile) -> None:
        self.files.append(generated)

    def __len__(self) -> int:
        return len(self.files)

    def entries(self) -> list[dict[str, Any]]:
        return [generated.to_index_entry(self.date_range) for generated in self.files]

    def to_json(self) -> str:
        return json.dumps(self.entries(), indent=2, ensure_ascii=False)


ROW_WRITTEN = "written"
ROW_REJECTED = "rejected"
ROW_FAILED = "failed"


@dataclass
class RowResult:
    """Outcome of processing a single row."""

    row_number: int
    status: str
    files: list[GeneratedFile] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == ROW_WRITTEN
