from datetime import date

import pytest

from conftest import make_row
from reader.errors import MalformedName
from reader.models import Attendee, Duration, Organizer
from reader.parsing import parse_pattern
from transformer.assembler import assemble, event_title, flip_name
from transformer.scheduling import build_recurrence, first_occurrence


def build(row, days="M,W,F", times="09:00 - 10:00"):
    pattern = parse_pattern(1, days, times)
    occurrence = first_occurrence(date(2020, 1, 1), pattern)
    rule = build_recurrence(occurrence, pattern, date(2020, 3, 1))
    return assemble(row, pattern, occurrence, rule)


class TestFlipName:
    def test_last_first(self):
        assert flip_name("Smith, Jane") == "Jane Smith"

    def test_extra_whitespace(self):
        assert flip_name("  de la Cruz ,  Maria Elena ") == "Maria Elena de la Cruz"

    @pytest.mark.parametrize("name", ["Jane Smith", ""])
    def test_without_comma(self, name):
        with pytest.raises(MalformedName):
            flip_name(name)


def test_event_title_order():
    assert event_title(make_row(subject="MATH", course="221", section="B02")) == "MATH 221 B02"


class TestAssemble:
    def test_record_fields(self):
        record = build(make_row())

        assert record.start == (2020, 1, 6, 9, 0)
        assert record.duration == Duration(hours=1)
        assert record.duration_minutes == 60
        assert record.title == "CS 101 001"
        assert record.description == "Intro to Programming"
        assert record.status == "CONFIRMED"
        assert record.organizer == Organizer(name="Jane Smith", email="jane.smith@example.edu")
        assert record.attendees == ()
        assert "BYDAY=MO,WE,FR" in record.recurrence_rule

    def test_pure(self):
        row = make_row()
        assert build(row) == build(row)
        assert repr(build(row)) == repr(build(row))

    def test_malformed_instructor(self):
        with pytest.raises(MalformedName):
            build(make_row(instructor1="Jane Smith"))

    def test_second_instructor_as_attendee(self):
        record = build(make_row(instructor2="Doe, John", email2="jdoe@example.edu"))
        assert record.attendees == (Attendee(name="John Doe", email="jdoe@example.edu"),)

    def test_second_instructor_without_comma_kept_as_written(self):
        record = build(make_row(instructor2="TBA Staff", email2="staff@example.edu"))
        assert record.attendees[0].name == "TBA Staff"

    def test_second_instructor_without_email_ignored(self):
        record = build(make_row(instructor2="Doe, John"))
        assert record.attendees == ()

    def test_overnight_duration(self):
        record = build(make_row(), days="S", times="22:00 - 01:30")
        assert record.duration == Duration(hours=3, minutes=30)
