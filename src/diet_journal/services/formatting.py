"""Display labels for journal entries and derived views."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from diet_journal.domain.journal import JournalEntry


def short_date_label(entry_date: date) -> str:
    """Format a date as month abbreviation and day, e.g. "Jan 5"."""
    return f"{entry_date:%b} {entry_date.day}"


def card_date_label(entry_date: date) -> str:
    """Format a date for an entry card, e.g. "Fri, Jan 5"."""
    return f"{entry_date:%a}, {short_date_label(entry_date)}"


def format_trend(trend: Decimal | None, unit: str = "lbs", window_size: int = 7) -> str | None:
    """
    Format the weight trend banner.

    Args:
        trend: Weight change, or None when there is not enough data.
        unit: Weight unit shown after the number.
        window_size: Window length shown in the banner.

    Returns:
        Banner text such as "7-day trend: +1.5 lbs", or None for no trend.
    """
    if trend is None:
        return None

    rounded = trend.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    sign = "+" if trend > 0 else ""
    return f"{window_size}-day trend: {sign}{rounded} {unit}"


def exercise_badge(entry: JournalEntry) -> str | None:
    """Format the exercise badge of an entry card, e.g. "Cardio - High"."""
    if not entry.has_exercise:
        return None
    return f"{entry.exercise_type} - {entry.exercise_intensity}"
