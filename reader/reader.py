"""Reader for course schedule tables stored as CSV."""

import csv
import logging
from pathlib import Path
from typing import Optional, Union

from .errors import InputReadError
from .models import CourseRow

logger = logging.getLogger(__name__)


class CourseTableReader:
    """Reads a course schedule CSV into CourseRow objects.

    The first row is a header and is discarded. Columns are taken
    positionally: TITLE, SUBJ, CRSE, INSTR1, INSTR2, INSTR1_EMAIL,
    INSTR2_EMAIL, DAYS1, DAYS2, TIME1, TIME2, SECTION.
    """

    ENCODING = "utf-8-sig"

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialize the reader.

        Args:
            path: Path to the input CSV file.
        """
        self._path = Path(path)
        self._records: Optional[list[list[str]]] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[list[str]]:
        """Read every CSV record from disk.

        Returns:
            Raw records, header included.

        Raises:
            InputReadError: If the file cannot be opened or decoded.
        """
        try:
            with self._path.open("r", encoding=self.ENCODING, newline="") as f:
                self._records = list(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise InputReadError(f"Cannot read input file '{self._path}': {e}") from e

        logger.debug("Read %d CSV records from %s", len(self._records), self._path)
        return self._records

    def parse_rows(self) -> list[CourseRow]:
        """Convert the loaded records into course rows.

        Returns:
            One CourseRow per non-blank data record, in file order.

        Raises:
            RuntimeError: If load() hasn't been called yet.
            InputReadError: If the table has no data rows.
        """
        if self._records is None:
            raise RuntimeError("No table data loaded. Call load() first.")

        rows: list[CourseRow] = []
        # Line 1 is the header
        for line_number, cells in enumerate(self._records[1:], start=2):
            if not any(cell.strip() for cell in cells):
                continue
            rows.append(CourseRow.from_cells(cells, line_number=line_number))

        if not rows:
            raise InputReadError(f"No rows could be parsed from '{self._path}'")

        return rows

    def read(self) -> list[CourseRow]:
        """Load the file and return its course rows."""
        self.load()
        return self.parse_rows()
