"""First occurrence and weekly recurrence for meeting patterns."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from dateutil.rrule import WEEKLY, rrule

from reader.errors import UnresolvableOccurrence
from reader.models import MeetingPattern, ResolvedOccurrence

DAYS_IN_WEEK = 7

# UNTIL is placed at the end of the last day so meetings on it are kept
UNTIL_TIME = time(23, 59, 59)


@dataclass(frozen=True)
class RecurrenceRule:
    """Weekly recurrence anchored at a resolved first occurrence."""

    rule: rrule

    @property
    def text(self) -> str:
        """The RRULE value, without the DTSTART line."""
        _, _, value = str(self.rule).partition("RRULE:")
        return value

    def occurrences(self) -> list[datetime]:
        return list(self.rule)


def first_occurrence(start: date, pattern: MeetingPattern) -> ResolvedOccurrence:
    """Find the first date after start on which the pattern meets.

    Only the first listed weekday is searched for, and the search begins
    the day after start: a start date that already falls on that weekday
    is skipped. Pass ``start - timedelta(days=1)`` to allow a same day match.

    Args:
        start: First day of the term.
        pattern: The meeting pattern.

    Returns:
        Date and start time of the first meeting.

    Raises:
        UnresolvableOccurrence: If no matching weekday is found within a week.
    """
    if not pattern.weekdays:
        raise UnresolvableOccurrence(f"Pattern '{pattern.days}' has no weekdays")

    target_weekday = pattern.weekdays[0]
    candidate = start
    for _ in range(DAYS_IN_WEEK):
        candidate += timedelta(days=1)
        if candidate.weekday() == target_weekday:
            return ResolvedOccurrence(date=candidate, time=pattern.time_range.start)

    raise UnresolvableOccurrence(
        f"No date after {start} falls on weekday {target_weekday} of '{pattern.days}'"
    )


def build_recurrence(
    occurrence: ResolvedOccurrence,
    pattern: MeetingPattern,
    until: date
) -> RecurrenceRule:
    """Build a weekly rule on the pattern's weekdays, ending on until.

    An until before the occurrence gives a rule with no occurrences.
    """
    rule = rrule(
        WEEKLY,
        dtstart=occurrence.as_datetime(),
        byweekday=pattern.weekdays,
        until=datetime.combine(until, UNTIL_TIME),
    )
    return RecurrenceRule(rule=rule)
