"""
Series builder for chart-ready projections of journal entries.

All series are chronological (oldest first), the reverse of the store's
listing order.
"""

import logging

from diet_journal.domain.journal import (
    INTENSITY_LEVELS,
    ChartPoint,
    ExercisePoint,
    JournalEntry,
)
from diet_journal.services.formatting import short_date_label

logger = logging.getLogger(__name__)


class SeriesBuilder:
    """Service for projecting entries into chart and exercise series."""

    def chart_series(self, entries: list[JournalEntry]) -> list[ChartPoint]:
        """
        Build weight/protein chart points.

        Args:
            entries: Journal entries in any order.

        Returns:
            One point per entry with a weight or protein, oldest first. A
            metric that was not logged is None, never 0.
        """
        logged = [e for e in entries if e.weight is not None or e.protein is not None]
        logged.sort(key=lambda e: e.date)
        logger.debug(f"Chart series: {len(logged)} of {len(entries)} entries logged a metric")

        return [
            ChartPoint(
                date=e.date,
                label=short_date_label(e.date),
                weight=None if e.weight is None else float(e.weight),
                protein=None if e.protein is None else float(e.protein),
            )
            for e in logged
        ]

    def exercise_series(self, entries: list[JournalEntry]) -> list[ExercisePoint]:
        """
        Build the exercise-activity list.

        Args:
            entries: Journal entries in any order.

        Returns:
            One point per entry with an exercise type, oldest first. The
            intensity is 1/2/3 for Low/Medium/High and 0 when unselected.
        """
        exercised = [e for e in entries if e.has_exercise]
        exercised.sort(key=lambda e: e.date)
        logger.debug(f"Exercise series: {len(exercised)} of {len(entries)} entries")

        return [
            ExercisePoint(
                date=e.date,
                label=short_date_label(e.date),
                exercise_type=e.exercise_type,
                intensity=INTENSITY_LEVELS.get(e.exercise_intensity, 0),
            )
            for e in exercised
        ]
