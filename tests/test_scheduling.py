from datetime import date, datetime, time, timedelta

import pytest

from reader.errors import UnresolvableOccurrence
from reader.models import MeetingPattern, ResolvedOccurrence, TimeRange
from reader.parsing import parse_pattern
from transformer.scheduling import build_recurrence, first_occurrence


@pytest.fixture
def mwf():
    return parse_pattern(1, "M,W,F", "09:00 - 10:00")


class TestFirstOccurrence:
    def test_first_monday_after_start(self, mwf):
        # 2020-01-01 is a Wednesday
        occurrence = first_occurrence(date(2020, 1, 1), mwf)
        assert occurrence == ResolvedOccurrence(date=date(2020, 1, 6), time=time(9, 0))

    def test_start_on_matching_weekday_is_skipped(self, mwf):
        # 2020-01-06 is a Monday
        occurrence = first_occurrence(date(2020, 1, 6), mwf)
        assert occurrence.date == date(2020, 1, 13)

    def test_day_before_allows_same_day(self, mwf):
        occurrence = first_occurrence(date(2020, 1, 6) - timedelta(days=1), mwf)
        assert occurrence.date == date(2020, 1, 6)

    def test_uses_first_listed_weekday(self):
        pattern = parse_pattern(1, "F,M", "09:00 - 10:00")
        occurrence = first_occurrence(date(2020, 1, 1), pattern)
        assert occurrence.date == date(2020, 1, 3)

    @pytest.mark.parametrize("offset", range(14))
    def test_strictly_after_start_on_pattern_weekday(self, offset):
        pattern = parse_pattern(1, "Th,Sa", "18:30 - 20:00")
        start = date(2021, 8, 30) + timedelta(days=offset)
        occurrence = first_occurrence(start, pattern)
        assert occurrence.date > start
        assert occurrence.date - start <= timedelta(days=7)
        assert occurrence.date.weekday() in pattern.weekdays
        assert occurrence.time == time(18, 30)

    def test_pattern_without_weekdays(self):
        pattern = MeetingPattern(
            index=1, days="", times="09:00-10:00", weekdays=(),
            time_range=TimeRange(time(9), time(10)),
        )
        with pytest.raises(UnresolvableOccurrence):
            first_occurrence(date(2020, 1, 1), pattern)

    def test_weekday_outside_week(self):
        pattern = MeetingPattern(
            index=1, days="?", times="09:00-10:00", weekdays=(9,),
            time_range=TimeRange(time(9), time(10)),
        )
        with pytest.raises(UnresolvableOccurrence):
            first_occurrence(date(2020, 1, 1), pattern)


class TestBuildRecurrence:
    def test_weekly_rule_text(self, mwf):
        occurrence = first_occurrence(date(2020, 1, 1), mwf)
        rule = build_recurrence(occurrence, mwf, date(2020, 3, 1))
        assert "FREQ=WEEKLY" in rule.text
        assert "BYDAY=MO,WE,FR" in rule.text
        assert "UNTIL=20200301T235959" in rule.text
        assert "DTSTART" not in rule.text

    def test_occurrences_span_range(self, mwf):
        occurrence = first_occurrence(date(2020, 1, 1), mwf)
        occurrences = build_recurrence(occurrence, mwf, date(2020, 3, 1)).occurrences()

        assert occurrences[0] == datetime(2020, 1, 6, 9, 0)
        assert occurrences[-1] == datetime(2020, 2, 28, 9, 0)
        assert {o.weekday() for o in occurrences} == {0, 2, 4}
        assert all(o.time() == time(9, 0) for o in occurrences)
        # 8 full weeks from Jan 6 to Feb 28
        assert len(occurrences) == 24

    def test_until_day_is_included(self):
        pattern = parse_pattern(1, "M", "20:00 - 21:00")
        occurrence = first_occurrence(date(2020, 1, 1), pattern)
        occurrences = build_recurrence(occurrence, pattern, date(2020, 1, 20)).occurrences()
        assert occurrences[-1] == datetime(2020, 1, 20, 20, 0)
        assert len(occurrences) == 3

    def test_until_before_occurrence_recurs_zero_times(self, mwf):
        occurrence = first_occurrence(date(2020, 1, 1), mwf)
        rule = build_recurrence(occurrence, mwf, date(2019, 12, 1))
        assert rule.occurrences() == []
        assert "FREQ=WEEKLY" in rule.text
