#!/usr/bin/env python3
"""
Heritage Tracker - command line entry point.

Computes heritage metrics and applies the filter pipeline to a JSON file of
site records.

Usage:
    python -m heritage.main parse-year "circa 800 BCE" "7th century"
    python -m heritage.main stats data/sites.json --as-of 2024-01-01
    python -m heritage.main filter data/sites.json --type mosque --built-to 1500
"""

from datetime import date
from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from heritage.config import settings
from heritage.filters import filter_sites
from heritage.loader import load_sites
from heritage.metrics import (
    age_color_code,
    destroyed_value,
    glow_contribution,
    heritage_integrity,
    heritage_stats,
    significance_score,
    total_heritage_value,
)
from heritage.models import FilterState, Site, tag_value
from heritage.normalizers import parse_year_built
from heritage.registry import (
    get_site_type_label,
    get_status_label,
    normalize_site_type,
)
from heritage.utils.logging import setup_logging

console = Console()

ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _load(sites_file: Path) -> list[Site]:
    try:
        return load_sites(sites_file)
    except (OSError, ValidationError) as e:
        logger.error(f"Could not load sites from {sites_file}: {e}")
        raise click.ClickException(f"Could not load sites from {sites_file}") from e


def _format_year(year) -> str:
    if year is None:
        return "-"
    if year < 0:
        return f"{-year} BCE"
    return f"{year} CE"


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Also write logs to this file")
def cli(debug, log_file):
    """Heritage Tracker - heritage metrics and site filtering"""
    if debug or log_file:
        setup_logging(level="DEBUG" if debug else None, log_file=log_file)


@cli.command("parse-year")
@click.argument("texts", nargs=-1, required=True)
def parse_year(texts: tuple[str, ...]):
    """Parse free-text construction dates into signed years."""
    table = Table()
    table.add_column("Input")
    table.add_column("Year")
    table.add_column("Era")

    for text in texts:
        year = parse_year_built(text)
        if year is None:
            table.add_row(text, "[yellow]unparseable[/yellow]", "-")
        else:
            table.add_row(text, str(year), _format_year(year))

    console.print(table)


@cli.command()
@click.argument("sites_file", type=click.Path(path_type=Path))
@click.option("--as-of", type=ISO_DATE, default=None, help="Timeline date (YYYY-MM-DD), defaults to today")
@click.option("--reference-year", type=int, default=None, help="Year ages are measured from")
def stats(sites_file: Path, as_of, reference_year):
    """Show heritage value, destruction and integrity for a site file."""
    sites = _load(sites_file)
    as_of = as_of.date() if as_of else date.today()
    if reference_year is None:
        reference_year = settings.reference_year

    console.print(f"\n[bold blue]Heritage Statistics[/bold blue] as of {as_of.isoformat()}\n")

    total = total_heritage_value(sites, reference_year)
    lost = destroyed_value(sites, as_of, reference_year)
    integrity = heritage_integrity(sites, as_of, reference_year)

    table = Table()
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Sites", str(len(sites)))
    table.add_row("Total Heritage Value", str(total))
    table.add_row("Destroyed Value", str(lost.value))
    table.add_row("Destroyed Sites", str(lost.count))
    table.add_row("Heritage Integrity", f"{integrity}%")
    console.print(table)

    summary = heritage_stats(sites, reference_year)

    counts = Table()
    counts.add_column("Status")
    counts.add_column("Sites")
    counts.add_row(get_status_label("destroyed"), str(summary.destroyed))
    counts.add_row(get_status_label("heavily-damaged"), str(summary.heavily_damaged))
    counts.add_row(get_status_label("damaged"), str(summary.damaged))
    counts.add_row("Religious Sites", f"{summary.religious_sites} ({summary.religious_destroyed} destroyed)")
    counts.add_row("Sites Over 1000 Years", str(summary.ancient_sites))
    counts.add_row("Oldest Site Age", f"{summary.oldest_site_age} years")
    console.print(counts)


@cli.command("filter")
@click.argument("sites_file", type=click.Path(path_type=Path))
@click.option("--type", "types", multiple=True, help="Site type to include (repeatable)")
@click.option("--status", "statuses", multiple=True, help="Damage status to include (repeatable)")
@click.option("--destroyed-from", type=ISO_DATE, default=None, help="Earliest destruction date")
@click.option("--destroyed-to", type=ISO_DATE, default=None, help="Latest destruction date")
@click.option("--built-from", type=int, default=None, help="Earliest construction year (negative = BCE)")
@click.option("--built-to", type=int, default=None, help="Latest construction year (negative = BCE)")
@click.option("--search", default="", help="Search site names")
def filter_command(sites_file: Path, types, statuses, destroyed_from, destroyed_to, built_from, built_to, search):
    """List sites matching the given filters."""
    sites = _load(sites_file)

    state = FilterState(
        selected_types=[normalize_site_type(t) for t in types],
        selected_statuses=list(statuses),
        destruction_date_start=destroyed_from.date() if destroyed_from else None,
        destruction_date_end=destroyed_to.date() if destroyed_to else None,
        creation_year_start=built_from,
        creation_year_end=built_to,
        search_term=search,
    )
    matches = filter_sites(sites, state)

    table = Table()
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Built")
    table.add_column("Glow")
    table.add_column("Colour")
    table.add_column("Significance")

    for site in matches:
        status = tag_value(site.status)
        table.add_row(
            site.id,
            site.name[:40],
            get_site_type_label(tag_value(site.type)),
            get_status_label(status),
            _format_year(parse_year_built(site.year_built)),
            str(glow_contribution(site)),
            age_color_code(site),
            f"{significance_score(site):.2f}",
        )

    console.print(table)
    console.print(f"\n[dim]{len(matches)} of {len(sites)} sites ({state.active_count()} active filters)[/dim]")


if __name__ == "__main__":
    cli()
