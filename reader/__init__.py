"""Reader module for loading course schedule tables and their fields."""

from .models import CourseRow, DateRange, EventRecord, MeetingPattern
from .reader import CourseTableReader

__all__ = ["CourseRow", "CourseTableReader", "DateRange", "EventRecord", "MeetingPattern"]
