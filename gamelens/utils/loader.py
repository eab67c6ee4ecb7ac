"""
Record loader.

Reads the combined games CSV into GameRecord objects.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from gamelens.models.game import GameRecord

logger = logging.getLogger(__name__)

OVERFLOW_MARKER = "\x00overflow:"


class GameLoader:
    """
    Loads game records from a comma-delimited file with a header line.

    Rows that cannot be decoded are logged and skipped; the rest of the
    file is still loaded. An unreadable file is an error for the caller.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize loader.

        Args:
            path: Path to the CSV file
        """
        self.path = Path(path)
        self.skipped_rows = 0
        self._column_count = 0

    def load(self) -> List[GameRecord]:
        """
        Load all decodable rows in file order.

        Returns:
            List of GameRecord objects

        Raises:
            FileNotFoundError: If the file does not exist
            pandas.errors.ParserError: If the file is not valid CSV
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Games file not found: {self.path}")

        self.skipped_rows = 0
        self._column_count = len(pd.read_csv(self.path, nrows=0).columns)

        # A first data row longer than the header is taken by pandas as an
        # implicit index; drop such leading rows and read again.
        leading_bad_rows = 0
        df = self._read_frame(leading_bad_rows)
        while not isinstance(df.index, pd.RangeIndex):
            leading_bad_rows += 1
            self._skip_overflow_row(
                leading_bad_rows, f"more than {self._column_count} fields"
            )
            df = self._read_frame(leading_bad_rows)

        logger.info(f"Read {len(df)} rows from {self.path}")

        records = []
        first_column = df.columns[0] if len(df.columns) else None
        rows = df.to_dict(orient="records")
        for row_number, row in enumerate(rows, start=leading_bad_rows + 1):
            marker = row.get(first_column)
            if isinstance(marker, str) and marker.startswith(OVERFLOW_MARKER):
                field_count = marker[len(OVERFLOW_MARKER):]
                self._skip_overflow_row(
                    row_number, f"{field_count} fields, expected {self._column_count}"
                )
                continue

            try:
                records.append(GameRecord.from_row(row))
            except (KeyError, ValueError) as e:
                self.skipped_rows += 1
                logger.error(f"Skipping row {row_number} of {self.path.name}: {_describe(e)}")

        if self.skipped_rows:
            logger.warning(f"Skipped {self.skipped_rows} malformed rows in {self.path.name}")

        logger.info(f"Loaded {len(records)} game records from {self.path}")
        return records

    def _read_frame(self, leading_bad_rows: int) -> pd.DataFrame:
        # Everything as text so decoding rules live in GameRecord.from_row
        return pd.read_csv(
            self.path,
            dtype=str,
            keep_default_na=False,
            skiprows=range(1, leading_bad_rows + 1),
            engine="python",
            on_bad_lines=self._on_bad_line
        )

    def _on_bad_line(self, fields: List[str]) -> List[str]:
        """Replace a row with more fields than the header by a marker row."""
        return [f"{OVERFLOW_MARKER}{len(fields)}"] + [""] * (self._column_count - 1)

    def _skip_overflow_row(self, row_number: int, detail: str) -> None:
        self.skipped_rows += 1
        logger.error(f"Skipping row {row_number} of {self.path.name}: {detail}")


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing column {error.args[0]!r}"
    return str(error)
