"""File names for generated calendar files."""

import re

from reader.models import CourseRow, MeetingPattern

UNSAFE_TITLE_CHARS = re.compile(r'[/\\?%*:|"<>\s\x00-\x1f\x7f]')
DAY_DELIMITERS = re.compile(r"[,\s]")
TIME_DELIMITERS = re.compile(r"[:\-\s]")
EXTENSION = ".ics"


def safe_title(title: str) -> str:
    return UNSAFE_TITLE_CHARS.sub("-", title)


def file_name(row: CourseRow, pattern: MeetingPattern, extension: str = EXTENSION) -> str:
    """Name of the file holding one pattern of a row.

    Two patterns of the same row differ in their day and time parts, so
    they get different names. The same row read twice maps to one name.

    Example:
        'Intro to CS', section '001', 'M,W', '09:00 - 10:15' gives
        'Intro-to-CS__001_MW__09001015.ics'.
    """
    days = DAY_DELIMITERS.sub("", pattern.days)
    times = TIME_DELIMITERS.sub("", pattern.times)
    return f"{safe_title(row.title)}__{row.section}_{days}__{times}{extension}"
