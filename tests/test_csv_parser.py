"""Unit tests for the draft CSV parser."""

from pathlib import Path

import pandas as pd
import pytest

from diet_journal.infrastructure.parsers.csv_parser import DraftCSVParser
from diet_journal.utils.exceptions import ParsingError
from diet_journal.utils.parameters import CSVConfig


def test_normalize_column_names() -> None:
    """Test normalization of spreadsheet column headers."""
    csv_config = CSVConfig(
        encodings=["utf-8"],
        delimiters=[","],
        column_mappings={
            "Date": "date",
            "Weight (lbs)": "weight",
            "Protein (g)": "protein",
            "Type": "exercise_type",
            "Intensity": "exercise_intensity",
        },
    )

    parser = DraftCSVParser(csv_config)

    df = pd.DataFrame(
        {
            "Date": ["2024-01-15"],
            "Weight (lbs) ": ["150.5"],
            "Protein (g)": ["140"],
            "Type": ["Cardio"],
            "Intensity": ["Low"],
            " notes": ["ok"],
        }
    )

    normalized_df = parser._normalize_column_names(df)

    for column in ("date", "weight", "protein", "exercise_type", "exercise_intensity", "notes"):
        if column not in normalized_df.columns:
            raise AssertionError(f"Expected '{column}' column after normalization")


def test_parse_drafts_semicolon_file(tmp_path: Path) -> None:
    """Test parsing a semicolon-delimited file with lenient dates and blanks."""
    csv_file = tmp_path / "journal.csv"
    csv_file.write_text(
        "date;weight;protein;exercise_type;exercise_intensity;notes\n"
        "01/15/2024;150,5;;Cardio;;\n"
        "2024-01-16;;140;;;Rest day\n"
        ";151;;;;\n"
        "not a date;151;;;;\n",
        encoding="utf-8",
    )

    parser = DraftCSVParser(CSVConfig(encodings=["utf-8"], delimiters=[";", ","]))
    drafts = parser.parse(csv_file)

    if len(drafts) != 2:
        raise AssertionError(f"Expected 2 drafts, got {len(drafts)}")

    first = drafts[0]
    if first.date != "2024-01-15":
        raise AssertionError(f"Expected normalized ISO date, got {first.date}")

    if first.weight != "150,5" or first.protein != "":
        raise AssertionError(f"Unexpected numbers in draft: {first}")

    if first.exercise_type != "Cardio" or first.exercise_intensity != "":
        raise AssertionError(f"Unexpected exercise in draft: {first}")

    if drafts[1].notes != "Rest day":
        raise AssertionError(f"Expected notes 'Rest day', got {drafts[1].notes!r}")


def test_parse_without_date_column(tmp_path: Path) -> None:
    """Test that a file without a date column is rejected."""
    csv_file = tmp_path / "journal.csv"
    csv_file.write_text("weight,protein\n150,140\n", encoding="utf-8")

    parser = DraftCSVParser(CSVConfig())

    with pytest.raises(ParsingError):
        parser.parse(csv_file)


def test_parse_missing_file(tmp_path: Path) -> None:
    """Test that an unreadable file raises ParsingError."""
    parser = DraftCSVParser(CSVConfig())

    with pytest.raises(ParsingError):
        parser.parse(tmp_path / "missing.csv")


def test_parse_merges_headers_mapped_to_same_field(tmp_path: Path) -> None:
    """Test that two headers mapped to one field keep the first non-blank value."""
    csv_file = tmp_path / "journal.csv"
    csv_file.write_text(
        "Date,Weight,Weight (lbs),Exercise,Type,Intensity\n"
        "2024-01-15,150,151,Cardio,,Low\n"
        "2024-01-16,,149,,Resistance,High\n"
        "2024-01-17,,,,,\n",
        encoding="utf-8",
    )

    csv_config = CSVConfig(
        encodings=["utf-8"],
        delimiters=[","],
        column_mappings={
            "Date": "date",
            "Weight": "weight",
            "Weight (lbs)": "weight",
            "Exercise": "exercise_type",
            "Type": "exercise_type",
            "Intensity": "exercise_intensity",
        },
    )

    drafts = DraftCSVParser(csv_config).parse(csv_file)

    if len(drafts) != 3:
        raise AssertionError(f"Expected 3 drafts, got {len(drafts)}")

    weights = [d.weight for d in drafts]
    if weights != ["150", "149", ""]:
        raise AssertionError(f"Expected ['150', '149', ''], got {weights}")

    types = [d.exercise_type for d in drafts]
    if types != ["Cardio", "Resistance", ""]:
        raise AssertionError(f"Expected ['Cardio', 'Resistance', ''], got {types}")

    if drafts[1].exercise_intensity != "High":
        raise AssertionError(f"Expected intensity 'High', got {drafts[1].exercise_intensity!r}")
