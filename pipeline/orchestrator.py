"""Batch processing of course rows into calendar files and a run index."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from reader.errors import (
    IndexWriteError,
    IOFault,
    OutputWriteError,
    RowProcessingError,
    ValidationError,
)
from reader.models import (
    ROW_FAILED,
    ROW_REJECTED,
    ROW_WRITTEN,
    CourseRow,
    GeneratedFile,
    RowResult,
    RunIndex,
)
from reader.parsing import parse_pattern
from reader.reader import CourseTableReader
from transformer.assembler import assemble
from transformer.base import BaseTransformer
from transformer.ical_transformer import ICalTransformer
from transformer.naming import file_name
from transformer.scheduling import build_recurrence, first_occurrence

from .config import RunConfig

logger = logging.getLogger(__name__)

INDEX_FILE_NAME = "index.json"


@dataclass
class RunSummary:
    """Outcome of a whole run."""

    results: list[RowResult]
    index: RunIndex
    index_path: Path

    @property
    def files_written(self) -> int:
        return len(self.index)

    @property
    def rows_rejected(self) -> int:
        return sum(1 for result in self.results if result.status == ROW_REJECTED)

    @property
    def rows_failed(self) -> int:
        return sum(1 for result in self.results if result.status == ROW_FAILED)


class BatchOrchestrator:
    """Turns every row of a schedule table into calendar files.

    Rows are handled one at a time in table order and every file of a
    row is written before the next row starts. A row that is missing a
    required field is rejected; a row whose days, times or instructor
    name cannot be used, or whose file cannot be written, is marked
    failed. Neither stops the run. The run index is written once at the
    end and a failure to write it is raised to the caller.
    """

    def __init__(self, config: RunConfig, transformer: Optional[BaseTransformer] = None) -> None:
        """Initialize the orchestrator.

        Args:
            config: Settings for this run.
            transformer: Serializer for event records. Defaults to an
                ICalTransformer in the configured timezone.
        """
        self._config = config
        self._transformer = transformer or ICalTransformer(tz=config.timezone)

    @property
    def config(self) -> RunConfig:
        return self._config

    def run(self) -> RunSummary:
        """Read the configured input table and process all of its rows.

        Raises:
            IOFault: If the output directory does not exist, the input
                cannot be read, or the run index cannot be written.
        """
        if not self._config.output_dir.is_dir():
            raise IOFault(f"Output directory '{self._config.output_dir}' does not exist")

        rows = CourseTableReader(self._config.input_path).read()
        logger.info("Read %d rows from %s", len(rows), self._config.input_path)
        return self.process(rows)

    def process(self, rows: Iterable[CourseRow]) -> RunSummary:
        """Process rows in order, then write the run index."""
        index = RunIndex(date_range=self._config.date_range)
        results: list[RowResult] = []

        for row_number, row in enumerate(rows, start=1):
            result = self.process_row(row_number, row)
            for generated in result.files:
                index.add(generated)
            results.append(result)

        index_path = self.write_index(index)
        summary = RunSummary(results=results, index=index, index_path=index_path)
        logger.info(
            "Done: %d files written, %d rows rejected, %d rows failed",
            summary.files_written,
            summary.rows_rejected,
            summary.rows_failed,
        )
        return summary

    def process_row(self, row_number: int, row: CourseRow) -> RowResult:
        """Validate a row and write a file for each of its patterns.

        Pattern 2 is attempted whenever DAYS2 and TIME2 are both set,
        whether or not pattern 1 succeeded.
        """
        logger.debug("-" * 43)
        logger.debug("Processing row %d (line %d): %s", row_number, row.line_number, row)

        try:
            row.validate()
        except ValidationError as e:
            logger.warning("Row %d rejected: %s", row_number, e)
            return RowResult(row_number=row_number, status=ROW_REJECTED, error=e)

        result = RowResult(row_number=row_number, status=ROW_WRITTEN)
        patterns = [(1, row.days1, row.time1)]
        if row.has_second_pattern:
            patterns.append((2, row.days2, row.time2))

        for pattern_index, days, times in patterns:
            try:
                result.files.append(self.build_pattern(row, pattern_index, days, times))
            except (RowProcessingError, OutputWriteError) as e:
                logger.error("Row %d pattern %d failed: %s", row_number, pattern_index, e)
                self._mark_failed(result, e)
            except Exception as e:
                logger.exception("Row %d pattern %d failed unexpectedly", row_number, pattern_index)
                self._mark_failed(result, e)

        return result

    @staticmethod
    def _mark_failed(result: RowResult, error: Exception) -> None:
        result.status = ROW_FAILED
        if result.error is None:
            result.error = error

    def build_pattern(self, row: CourseRow, pattern_index: int, days: str, times: str) -> GeneratedFile:
        """Build and write the calendar file for one pattern of a row."""
        date_range = self._config.date_range
        pattern = parse_pattern(pattern_index, days, times)
        occurrence = first_occurrence(date_range.start, pattern)
        recurrence = build_recurrence(occurrence, pattern, date_range.end)
        record = assemble(row, pattern, occurrence, recurrence)

        name = file_name(row, pattern, self._transformer.extension)
        path = self._config.output_dir / name
        self._transformer.transform(record)
        self._transformer.save(path)
        logger.debug("Created %s", path)

        return GeneratedFile(row=row, pattern=pattern, file_name=name, path=path)

    def write_index(self, index: RunIndex) -> Path:
        """Write index.json into the output directory.

        Raises:
            IndexWriteError: If the file cannot be written.
        """
        path = self._config.output_dir / INDEX_FILE_NAME
        try:
            path.write_text(index.to_json(), encoding="utf-8")
        except OSError as e:
            raise IndexWriteError(f"Cannot write run index '{path}': {e}") from e
        logger.debug("Wrote index with %d entries to %s", len(index), path)
        return path
