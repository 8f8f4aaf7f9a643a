from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from reader.models import DateRange

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"
DEFAULT_OUTPUT_DIR = "output"


@dataclass(frozen=True)
class RunConfig:
    input_path: Path
    output_dir: Path
    date_range: DateRange
    timezone: ZoneInfo

    def validate(self) -> None:
        if self.date_range.start > self.date_range.end:
            raise ValueError(
                f"Start date {self.date_range.start} must not be after end date {self.date_range.end}"
            )


def get_timezone(tz_name: str | None = None) -> ZoneInfo:
    tz_name = tz_name or os.getenv("COURSE2ICS_TIMEZONE", DEFAULT_TIMEZONE)
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone %s, falling back to %s", tz_name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def get_output_dir() -> Path:
    return Path(os.getenv("COURSE2ICS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))


def build_config(
    input_path: str | Path,
    start: date,
    end: date,
    output_dir: str | Path | None = None,
    tz_name: str | None = None,
) -> RunConfig:
    config = RunConfig(
        input_path=Path(input_path),
        output_dir=Path(output_dir) if output_dir else get_output_dir(),
        date_range=DateRange(start=start, end=end),
        timezone=get_timezone(tz_name),
    )
    config.validate()
    return config
