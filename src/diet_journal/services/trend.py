"""
Weight trend analysis.

Summarizes short-term weight movement over the most recently logged entries.
"""

import logging
from decimal import Decimal

from diet_journal.domain.journal import JournalEntry
from diet_journal.utils.parameters import TrendConfig

logger = logging.getLogger(__name__)


class TrendAnalyzer:
    """
    Service for computing the recent weight trend.

    The window is a count of logged entries, not calendar days: if logging
    skips days, the window spans a longer period.
    """

    def __init__(self, config: TrendConfig | None = None) -> None:
        """
        Initialize trend analyzer.

        Args:
            config: Trend window configuration. Defaults to 7 entries, 2 points.
        """
        self.config = config or TrendConfig()

    def weight_trend(self, entries: list[JournalEntry]) -> Decimal | None:
        """
        Compute the weight change across the most recent logged entries.

        Args:
            entries: Journal entries in any order.

        Returns:
            Last weight minus first weight within the window (positive means
            gain), or None if the window holds too few weighed entries.
        """
        ascending = sorted(entries, key=lambda e: e.date)
        window = ascending[-self.config.window_size :]
        weighed = [e for e in window if e.weight is not None]

        if len(weighed) < self.config.min_points:
            logger.debug(
                f"Insufficient data for trend: {len(weighed)} weighed entries "
                f"in last {len(window)}"
            )
            return None

        return weighed[-1].weight - weighed[0].weight
