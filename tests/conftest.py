from datetime import date
from zoneinfo import ZoneInfo

import pytest

from pipeline.config import RunConfig
from reader.models import CourseRow, DateRange

HEADER = [
    "TITLE", "SUBJ", "CRSE", "INSTR1", "INSTR2", "INSTR1_EMAIL",
    "INSTR2_EMAIL", "DAYS1", "DAYS2", "TIME1", "TIME2", "SECTION",
]


def make_row(**overrides) -> CourseRow:
    values = {
        "title": "Intro to Programming",
        "subject": "CS",
        "course": "101",
        "instructor1": "Smith, Jane",
        "instructor2": "",
        "email1": "jane.smith@example.edu",
        "email2": "",
        "days1": "M,W,F",
        "days2": "",
        "time1": "09:00 - 10:00",
        "time2": "",
        "section": "001",
    }
    values.update(overrides)
    return CourseRow(**values)


def row_cells(row: CourseRow) -> list[str]:
    return [
        row.title, row.subject, row.course, row.instructor1, row.instructor2,
        row.email1, row.email2, row.days1, row.days2, row.time1, row.time2,
        row.section,
    ]


@pytest.fixture
def date_range() -> DateRange:
    return DateRange(start=date(2020, 1, 1), end=date(2020, 3, 1))


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def config(tmp_path, output_dir, date_range) -> RunConfig:
    return RunConfig(
        input_path=tmp_path / "courses.csv",
        output_dir=output_dir,
        date_range=date_range,
        timezone=ZoneInfo("America/New_York"),
    )


@pytest.fixture
def write_csv(tmp_path):
    def _write(rows, name="courses.csv"):
        path = tmp_path / name
        lines = [",".join(HEADER)]
        for row in rows:
            cells = row_cells(row) if isinstance(row, CourseRow) else row
            lines.append(",".join(f'"{cell}"' for cell in cells))
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
