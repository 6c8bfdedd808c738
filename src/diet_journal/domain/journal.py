"""
Journal domain models.

This module defines the canonical journal entry, the text draft the
presentation layer submits, and the chart-ready points derived from entries.
"""

import logging
import math
from datetime import date as date_type
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from diet_journal.utils.exceptions import EntryValidationError
from diet_journal.utils.timezone_utils import today_in_timezone

logger = logging.getLogger(__name__)


class ExerciseType(str, Enum):
    """Enumeration of exercise types. NONE means no exercise was logged."""

    NONE = ""
    RESISTANCE = "Resistance"
    CARDIO = "Cardio"


class ExerciseIntensity(str, Enum):
    """Enumeration of exercise intensities. NONE means not selected yet."""

    NONE = ""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Ordinal used for bar height / dot count; anything else renders as 0.
INTENSITY_LEVELS: dict[str, int] = {
    ExerciseIntensity.LOW.value: 1,
    ExerciseIntensity.MEDIUM.value: 2,
    ExerciseIntensity.HIGH.value: 3,
}


class JournalEntry(BaseModel):
    """
    One day's logged health data, keyed by date.

    Entries are immutable. Editing an entry means submitting a new one for the
    same date, which replaces the old one wholesale.
    """

    date: date_type = Field(description="Calendar date, the unique key")
    weight: Decimal | None = Field(None, description="Body weight")
    protein: Decimal | None = Field(None, description="Protein intake in grams")
    exercise_type: ExerciseType = Field(ExerciseType.NONE, description="Exercise type")
    exercise_intensity: ExerciseIntensity = Field(
        ExerciseIntensity.NONE, description="Exercise intensity"
    )
    notes: str = Field("", description="Free-text notes")

    model_config = ConfigDict(use_enum_values=True, validate_default=True, frozen=True)

    @property
    def has_exercise(self) -> bool:
        """Whether an exercise type was logged."""
        return self.exercise_type != ExerciseType.NONE.value

    def to_dict(self, for_csv: bool = False) -> dict[str, Any]:
        """
        Convert entry to dictionary representation.

        Args:
            for_csv: If True, render absent numbers as empty strings.

        Returns:
            Dictionary with an ISO date and decimals as strings.
        """
        data = self.model_dump()

        data["date"] = self.date.isoformat()
        for field in ("weight", "protein"):
            value = data[field]
            if value is None:
                data[field] = "" if for_csv else None
            else:
                data[field] = str(value)

        return data


def _parse_decimal(value: str, field_name: str) -> Decimal | None:
    """
    Parse an optional decimal from form text.

    Args:
        value: Raw text. Blank means absent.
        field_name: Field name used in error messages.

    Returns:
        Parsed decimal, or None if the text is blank.

    Raises:
        EntryValidationError: If the text is not a finite number.
    """
    text = value.strip()
    if not text:
        return None

    if "_" in text:
        raise EntryValidationError(f"{field_name} must be a number, got {value!r}")

    try:
        number = Decimal(text.replace(",", "."))
    except InvalidOperation as e:
        raise EntryValidationError(f"{field_name} must be a number, got {value!r}") from e

    if not number.is_finite() or not math.isfinite(float(number)):
        raise EntryValidationError(f"{field_name} must be a finite number, got {value!r}")

    return number


class EntryDraft(BaseModel):
    """
    Text form of a journal entry as submitted by the presentation layer.

    Every field is a string and an empty string means "absent". Drafts are
    converted to entries with to_entry(), which is the only place text is
    interpreted.
    """

    date: str = ""
    weight: str = ""
    protein: str = ""
    exercise_type: str = ""
    exercise_intensity: str = ""
    notes: str = ""

    @classmethod
    def blank(cls, timezone_str: str = "UTC") -> "EntryDraft":
        """Create an empty draft dated today in the given timezone."""
        return cls(date=today_in_timezone(timezone_str).isoformat())

    @classmethod
    def from_entry(cls, entry: JournalEntry) -> "EntryDraft":
        """Load an existing entry into a draft for editing."""
        return cls(
            date=entry.date.isoformat(),
            weight="" if entry.weight is None else str(entry.weight),
            protein="" if entry.protein is None else str(entry.protein),
            exercise_type=entry.exercise_type,
            exercise_intensity=entry.exercise_intensity,
            notes=entry.notes,
        )

    def to_entry(self) -> JournalEntry:
        """
        Validate the draft and convert it to a journal entry.

        Returns:
            The journal entry.

        Raises:
            EntryValidationError: If the date, a number, or the exercise type
                is invalid.
        """
        try:
            entry_date = date_type.fromisoformat(self.date.strip())
        except ValueError as e:
            raise EntryValidationError(
                f"date must be in YYYY-MM-DD format, got {self.date!r}"
            ) from e

        try:
            exercise_type = ExerciseType(self.exercise_type)
        except ValueError as e:
            raise EntryValidationError(
                f"Unknown exercise type {self.exercise_type!r}"
            ) from e

        try:
            exercise_intensity = ExerciseIntensity(self.exercise_intensity)
        except ValueError:
            logger.warning(
                f"{entry_date}: unknown intensity {self.exercise_intensity!r}, left unselected"
            )
            exercise_intensity = ExerciseIntensity.NONE

        return JournalEntry(
            date=entry_date,
            weight=_parse_decimal(self.weight, "weight"),
            protein=_parse_decimal(self.protein, "protein"),
            exercise_type=exercise_type,
            exercise_intensity=exercise_intensity,
            notes=self.notes,
        )


class ChartPoint(BaseModel):
    """One point of the weight/protein chart. None means not logged, not zero."""

    date: date_type
    label: str
    weight: float | None = None
    protein: float | None = None

    model_config = ConfigDict(frozen=True)


class ExercisePoint(BaseModel):
    """One row of the exercise-activity summary."""

    date: date_type
    label: str
    exercise_type: str
    intensity: int = Field(ge=0, le=3, description="Ordinal: 0 unset, 1 low, 2 medium, 3 high")

    model_config = ConfigDict(frozen=True)
