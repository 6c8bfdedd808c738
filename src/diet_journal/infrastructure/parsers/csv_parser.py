"""
CSV parser for journal drafts.

Provides CSV parsing with encoding detection, delimiter detection, column
name normalization, and lenient date normalization, producing drafts that are
validated when converted to entries.
"""

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from diet_journal.domain.journal import EntryDraft
from diet_journal.utils.exceptions import ParsingError
from diet_journal.utils.parameters import CSVConfig
from diet_journal.utils.timezone_utils import parse_entry_date

logger = logging.getLogger(__name__)

DRAFT_FIELDS = ("weight", "protein", "exercise_type", "exercise_intensity", "notes")


class DraftCSVParser:
    """
    Parser for CSV files of journal drafts.

    Handles encoding detection, delimiter detection and column normalization.
    Cells are kept as text; interpreting numbers is left to the draft.
    """

    def __init__(self, csv_config: CSVConfig) -> None:
        """
        Initialize CSV parser.

        Args:
            csv_config: CSV parsing configuration.
        """
        self.csv_config = csv_config
        self.column_mappings = csv_config.column_mappings

    def _detect_encoding(self, file_path: Path) -> str:
        """
        Detect file encoding.

        Args:
            file_path: Path to CSV file.

        Returns:
            Detected encoding.
        """
        for encoding in self.csv_config.encodings:
            try:
                with open(file_path, encoding=encoding) as f:
                    f.read()
                logger.debug(f"Detected encoding: {encoding}")
                return encoding
            except (UnicodeDecodeError, LookupError):
                continue

        logger.warning("Encoding detection failed, using utf-8")
        return "utf-8"

    def _detect_delimiter(self, file_path: Path, encoding: str) -> str:
        """
        Detect CSV delimiter from the header line.

        Args:
            file_path: Path to CSV file.
            encoding: File encoding.

        Returns:
            Detected delimiter.
        """
        with open(file_path, encoding=encoding) as f:
            first_line = f.readline()

        for delimiter in self.csv_config.delimiters:
            if delimiter in first_line:
                logger.debug(f"Detected delimiter: {repr(delimiter)}")
                return delimiter

        logger.warning("Delimiter detection failed, using comma")
        return ","

    def _normalize_column_names(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Normalize column names to draft field names.

        Args:
            df: DataFrame with original column names.

        Returns:
            DataFrame with normalized column names.
        """
        rename_map = {}

        for col in df.columns:
            col_stripped = str(col).strip()
            if col_stripped in self.column_mappings:
                rename_map[col] = self.column_mappings[col_stripped]
            elif col_stripped != col:
                rename_map[col] = col_stripped

        if rename_map:
            df = df.rename(columns=rename_map)
            logger.debug(f"Normalized columns: {list(rename_map.values())}")

        return self._merge_duplicate_columns(df)

    def _merge_duplicate_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Collapse headers that normalized to the same field.

        Args:
            df: DataFrame with normalized column names, read as text.

        Returns:
            DataFrame with unique columns, keeping the first non-blank value
            per row for each merged field.
        """
        duplicated = list(df.columns[df.columns.duplicated()].unique())
        if not duplicated:
            return df

        logger.warning(f"Multiple columns map to {duplicated}, using first non-blank value")

        merged: dict[str, pd.Series] = {}
        for name in dict.fromkeys(df.columns):
            block = df.loc[:, df.columns == name]
            if block.shape[1] == 1:
                merged[name] = block.iloc[:, 0]
            else:
                values = block.astype(object).where(block != "", None)
                merged[name] = values.bfill(axis=1).iloc[:, 0].fillna("")

        return pd.DataFrame(merged, index=df.index)

    def _cell_text(self, value: Any) -> str:
        """
        Convert a cell to draft text.

        Args:
            value: Cell value.

        Returns:
            Stripped text, or an empty string for missing cells.
        """
        if value is None or pd.isna(value):
            return ""
        return str(value).strip()

    def parse(self, file_path: Path) -> list[EntryDraft]:
        """
        Parse CSV file into journal drafts.

        Args:
            file_path: Path to CSV file.

        Returns:
            Drafts in file order. Rows without a usable date are skipped.

        Raises:
            ParsingError: If the file cannot be read or has no date column.
        """
        try:
            encoding = self._detect_encoding(file_path)
            delimiter = self._detect_delimiter(file_path, encoding)

            df = pd.read_csv(
                file_path,
                encoding=encoding,
                sep=delimiter,
                dtype=str,
                keep_default_na=False,
            )
        except Exception as e:
            raise ParsingError(f"Failed to parse CSV file {file_path}: {e}") from e

        df = self._normalize_column_names(df)

        if "date" not in df.columns:
            raise ParsingError(f"No date column found in {file_path.name}")

        drafts: list[EntryDraft] = []

        for idx, row in df.iterrows():
            date_text = self._cell_text(row.get("date"))
            if not date_text:
                logger.warning(f"Row {idx}: empty date, skipping")
                continue

            try:
                entry_date = parse_entry_date(date_text)
            except ValueError as e:
                logger.warning(f"Row {idx}: {e}, skipping")
                continue

            fields = {name: self._cell_text(row.get(name)) for name in DRAFT_FIELDS}
            drafts.append(EntryDraft(date=entry_date.isoformat(), **fields))

        logger.info(f"Parsed {len(drafts)} drafts from {file_path.name}")
        return drafts
