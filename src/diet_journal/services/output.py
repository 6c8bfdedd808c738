"""
Output service for exporting derived journal views.

Writes the entry listing, chart series, and exercise series as CSV and/or
JSON, plus a JSON summary with the weight trend.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

import pandas as pd

from diet_journal.domain.journal import ChartPoint, ExercisePoint, JournalEntry
from diet_journal.utils.exceptions import OutputError
from diet_journal.utils.parameters import OutputConfig

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("csv", "json")


class OutputService:
    """
    Service for writing derived views to output files.

    Nothing written here is read back; the journal itself lives in memory.
    """

    def __init__(self, config: OutputConfig) -> None:
        """
        Initialize output service.

        Args:
            config: Output configuration.

        Raises:
            OutputError: If a configured format is not supported.
        """
        unsupported = [f for f in config.formats if f not in SUPPORTED_FORMATS]
        if unsupported:
            raise OutputError(f"Unsupported output formats: {unsupported}")

        self.config = config
        self.output_dir = Path(config.dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _write_table(self, rows: list[dict[str, Any]], stem: str, columns: list[str]) -> list[Path]:
        """
        Write rows in every configured format.

        Args:
            rows: Row dictionaries.
            stem: File name without extension.
            columns: Column order, used even when there are no rows.

        Returns:
            Paths written.
        """
        df = pd.DataFrame(rows, columns=columns)
        written: list[Path] = []

        try:
            if "csv" in self.config.formats:
                csv_path = self.output_dir / f"{stem}.csv"
                df.to_csv(csv_path, index=False, encoding="utf-8")
                written.append(csv_path)

            if "json" in self.config.formats:
                json_path = self.output_dir / f"{stem}.json"
                df.to_json(json_path, orient="records", indent=2, force_ascii=False)
                written.append(json_path)

        except OSError as e:
            raise OutputError(f"Failed to write {stem}: {e}") from e

        for path in written:
            logger.info(f"Wrote {len(df)} rows to {path}")

        return written

    def write_entries(self, entries: list[JournalEntry]) -> list[Path]:
        """
        Write the entry listing in store order.

        Args:
            entries: Journal entries, newest first.

        Returns:
            Paths written.
        """
        rows = [e.to_dict(for_csv=True) for e in entries]
        return self._write_table(rows, self.config.files.entries, list(JournalEntry.model_fields))

    def write_chart_series(self, points: list[ChartPoint]) -> list[Path]:
        """
        Write the weight/protein chart series. Unlogged metrics stay empty.

        Args:
            points: Chart points, oldest first.

        Returns:
            Paths written.
        """
        rows = [p.model_dump(mode="json") for p in points]
        return self._write_table(
            rows, self.config.files.chart_series, list(ChartPoint.model_fields)
        )

    def write_exercise_series(self, points: list[ExercisePoint]) -> list[Path]:
        """
        Write the exercise-activity series.

        Args:
            points: Exercise points, oldest first.

        Returns:
            Paths written.
        """
        rows = [p.model_dump(mode="json") for p in points]
        return self._write_table(
            rows, self.config.files.exercise_series, list(ExercisePoint.model_fields)
        )

    def write_summary(self, entry_count: int, trend: Decimal | None, window_size: int) -> Path:
        """
        Write a JSON summary of the journal.

        Args:
            entry_count: Number of entries in the store.
            trend: Weight trend, or None when undefined.
            window_size: Trend window length.

        Returns:
            Path written.
        """
        summary_path = self.output_dir / self.config.files.summary

        summary: dict[str, Any] = {
            "entry_count": entry_count,
            "trend_window": window_size,
            "weight_trend": None if trend is None else str(trend),
        }

        try:
            with open(summary_path, "w", encoding="utf-8") as f:
                json.dump(summary, f, indent=2)
        except OSError as e:
            raise OutputError(f"Failed to write summary: {e}") from e

        logger.info(f"Wrote summary to {summary_path}")
        return summary_path
