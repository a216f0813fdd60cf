"""Command-line interface for feedio."""

import logging
from datetime import datetime
from pathlib import Path

import typer
from lxml import etree
from rich.console import Console
from rich.table import Table

from feedio import __version__
from feedio.client import RequestsClient
from feedio.config import validate_url
from feedio.dates import DateTimeBuilder
from feedio.logging_config import setup_logging
from feedio.service import FeedIo

app = typer.Typer(
    name="feedio",
    help="Read RSS and Atom feeds and convert them between formats.",
)
console = Console()


def parse_since(value: str | None) -> datetime | None:
    """Parse the --since option.

    Raises:
        ValueError: If the date cannot be parsed
    """
    if value is None:
        return None
    try:
        return DateTimeBuilder().convert_to_datetime(value)
    except ValueError as e:
        raise ValueError(
            f"Invalid date: '{value}'. Expected YYYY-MM-DD or an ISO 8601 / RFC 822 date"
        ) from e


def build_feed_io(verbose: bool) -> FeedIo:
    logger = setup_logging(logging.DEBUG if verbose else logging.WARNING)
    return FeedIo(RequestsClient(), logger)


@app.command()
def read(
    url: str = typer.Argument(..., help="Feed URL (e.g., https://example.com/feed.xml)"),
    since: str | None = typer.Option(
        None,
        "--since",
        "-s",
        help="Only fetch if modified since this date (e.g., 2025-01-01)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Read a feed and list its items."""
    try:
        validate_url(url)
        modified_since = parse_since(since)

        feed_io = build_feed_io(verbose)
        result = feed_io.read(url, modified_since=modified_since)

        if not result.modified:
            console.print(f"[yellow]Not modified[/yellow] since {modified_since}")
            return

        feed = result.feed
        console.print(f"[bold]{feed.title or url}[/bold]")
        if feed.link:
            console.print(f"  Link: {feed.link}")
        if feed.last_modified:
            console.print(f"  Last modified: [green]{feed.last_modified.isoformat()}[/green]")

        table = Table("Date", "Title", "Link")
        for item in result.items_since():
            date = item.last_modified.isoformat() if item.last_modified else ""
            table.add_row(date, item.title or "", item.link or "")
        console.print(table)

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


@app.command()
def convert(
    url: str = typer.Argument(..., help="Feed URL"),
    to: str = typer.Option("atom", "--to", "-t", help="Target standard (rss, atom)"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of stdout",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Read a feed and write it in another standard."""
    try:
        validate_url(url)

        feed_io = build_feed_io(verbose)
        feed_io.get_standard(to)
        result = feed_io.read(url)

        document = etree.tostring(
            feed_io.format(result.feed, to),
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        ).decode("utf-8")

        if output is None:
            console.print(document, markup=False, highlight=False)
        else:
            output.write_text(document, encoding="utf-8")
            console.print(f"[bold green]Saved to:[/bold green] {output}")

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"feedio {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
