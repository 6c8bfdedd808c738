"""
Command-line interface for Diet Journal.

Imports drafts from a CSV file into a session journal and prints the entry
listing, weight trend, and chart series.
"""

import logging
from pathlib import Path

import typer

from diet_journal.domain.journal import EntryDraft
from diet_journal.infrastructure.parsers.csv_parser import DraftCSVParser
from diet_journal.services.entry_store import EntryStore
from diet_journal.services.formatting import card_date_label, exercise_badge, format_trend
from diet_journal.services.output import OutputService
from diet_journal.services.series import SeriesBuilder
from diet_journal.services.trend import TrendAnalyzer
from diet_journal.utils.exceptions import DietJournalError
from diet_journal.utils.logging_config import setup_logging
from diet_journal.utils.parameters import ParameterLoader

app = typer.Typer(help="Diet Journal - Daily weight, protein and exercise log")

logger = logging.getLogger(__name__)


def init_config(config_path: str = "config/config.yaml") -> ParameterLoader:
    """
    Initialize configuration and logging.

    Args:
        config_path: Path to configuration file.

    Returns:
        Parameter loader instance.
    """
    param_loader = ParameterLoader(config_path)
    setup_logging(param_loader.get_logging_config(), "diet_journal")
    return param_loader


def load_store(param_loader: ParameterLoader, csv_file: Path) -> EntryStore:
    """
    Build a session store from a CSV of drafts.

    Later rows for the same date replace earlier ones.

    Args:
        param_loader: Loaded configuration.
        csv_file: Draft CSV file.

    Returns:
        Populated entry store.
    """
    parser = DraftCSVParser(param_loader.get_csv_config())
    drafts: list[EntryDraft] = parser.parse(csv_file)

    store = EntryStore()
    for draft in drafts:
        store.upsert(draft.to_entry())

    logger.info(f"Loaded {len(store)} entries from {len(drafts)} drafts")
    return store


def _trend_banner(trend_text: str | None) -> str:
    return trend_text if trend_text is not None else "Trend: insufficient data"


@app.command()
def report(
    csv_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV file of drafts"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
    output_dir: str | None = typer.Option(None, help="Export derived views to this directory"),
) -> None:
    """
    Print the journal and its analytics.

    Shows entries newest first, the weight trend, the weight/protein chart
    points, and the exercise activity.
    """
    try:
        param_loader = init_config(config_path)
        journal_config = param_loader.get_journal_config()

        store = load_store(param_loader, csv_file)
        entries = store.list_entries()

        if not entries:
            typer.echo("No entries yet. Start tracking your journey!")
            return

        trend = TrendAnalyzer(journal_config.trend).weight_trend(entries)
        typer.echo(
            _trend_banner(
                format_trend(trend, journal_config.weight_unit, journal_config.trend.window_size)
            )
        )

        typer.echo("\n=== Journal ===")
        for entry in entries:
            typer.echo(f"\n{card_date_label(entry.date)}")
            badge = exercise_badge(entry)
            if badge:
                typer.echo(f"  {badge}")
            if entry.weight is not None:
                typer.echo(f"  Weight: {entry.weight} {journal_config.weight_unit}")
            if entry.protein is not None:
                typer.echo(f"  Protein: {entry.protein}g")
            if entry.notes:
                typer.echo(f"  Notes: {entry.notes}")

        builder = SeriesBuilder()
        chart = builder.chart_series(entries)
        exercise = builder.exercise_series(entries)

        typer.echo("\n=== Weight & Protein ===")
        for point in chart:
            weight = "-" if point.weight is None else f"{point.weight:g}"
            protein = "-" if point.protein is None else f"{point.protein:g}"
            typer.echo(f"  {point.label:>6}  weight={weight}  protein={protein}")

        if exercise:
            typer.echo("\n=== Exercise Activity ===")
            for ex in exercise:
                bars = "#" * ex.intensity + "." * (3 - ex.intensity)
                typer.echo(f"  {ex.label:>6}  {ex.exercise_type:<10} [{bars}]")

        if output_dir:
            output_config = param_loader.get_output_config()
            output_config.dir = output_dir

            output_service = OutputService(output_config)
            output_service.write_entries(entries)
            output_service.write_chart_series(chart)
            output_service.write_exercise_series(exercise)
            output_service.write_summary(len(entries), trend, journal_config.trend.window_size)

            typer.echo(f"\nOutput written to {output_dir}/")

    except DietJournalError as e:
        logger.error(f"Report failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def trend(
    csv_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV file of drafts"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
    window_size: int | None = typer.Option(
        None, min=1, help="Override trend window size from config"
    ),
) -> None:
    """
    Print the weight trend over the most recently logged entries.
    """
    try:
        param_loader = init_config(config_path)
        journal_config = param_loader.get_journal_config()

        if window_size:
            journal_config.trend.window_size = window_size

        store = load_store(param_loader, csv_file)
        weight_trend = TrendAnalyzer(journal_config.trend).weight_trend(store.list_entries())

        typer.echo(
            _trend_banner(
                format_trend(
                    weight_trend, journal_config.weight_unit, journal_config.trend.window_size
                )
            )
        )

    except DietJournalError as e:
        logger.error(f"Trend failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
