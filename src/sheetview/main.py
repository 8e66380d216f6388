"""CLI entrypoint for :mod:`sheetview`.

Exposes:

- `show`    Fetch a source and print one page of records.
- `pick`    Fetch a source and print a random record.
- `status`  Refresh every configured source and report its state.
- `watch`   Refresh every configured source on a fixed cadence.
- `version` Print the package version.
"""

from __future__ import annotations

import asyncio
import json
import random
from collections.abc import Sequence
from enum import Enum
from typing import List, NoReturn, Optional

import typer
from typer import BadParameter

from sheetview import __version__
from sheetview.catalog import SourceCatalog
from sheetview.exceptions import ConfigurationError, EmptySource
from sheetview.observability import configure_logging
from sheetview.session import Fetcher, SourceSession
from sheetview.settings import Settings
from sheetview.transport import HttpTextFetcher
from sheetview.types import DISPLAY_RANGES, FetchStatus, Record
from sheetview.view import TableView

app = typer.Typer(
    help=(
        "Browse published spreadsheet exports.\n\n"
        "- **show** - print a page of records\n"
        "- **pick** - print a random record\n"
        "- **status** - refresh all configured sources\n"
        "- **watch** - refresh all configured sources periodically"
    ),
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="markdown",
)


class RangeName(str, Enum):
    """Header ranges a view can display."""

    wide = "wide"
    narrow = "narrow"


def build_fetcher(settings: Settings) -> Fetcher:
    return HttpTextFetcher(timeout=settings.request_timeout)


def resolve_session(source: str, settings: Settings, fetcher: Fetcher) -> SourceSession:
    """Return a session for a configured source name or a literal URL."""

    if source in settings.sources:
        return SourceSession(source, settings.sources[source], fetcher=fetcher)
    if source.startswith(("http://", "https://")):
        return SourceSession(source, source, fetcher=fetcher)
    known = ", ".join(settings.sources) or "none configured"
    raise BadParameter(f"Unknown source {source!r} (known: {known}).", param_hint="source")


def parse_pairs(pairs: Sequence[str], option: str) -> list[tuple[str, str]]:
    parsed: list[tuple[str, str]] = []
    for raw in pairs:
        if "=" not in raw:
            raise BadParameter(f"{option} must be in HEADER=VALUE form.", param_hint=option)
        header, value = raw.split("=", 1)
        header = header.strip()
        if not header:
            raise BadParameter(f"{option} header must be non-empty.", param_hint=option)
        parsed.append((header, value))
    return parsed


def format_rows(headers: Sequence[str], records: Sequence[Record]) -> list[str]:
    """Render records as left-aligned, two-space separated columns."""

    rows = [list(headers)] + [[record.get(header) for header in headers] for record in records]
    widths = [max(len(row[i]) for row in rows) for i in range(len(headers))]
    return ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _load_session(source: str, settings: Settings) -> SourceSession:
    session = resolve_session(source, settings, build_fetcher(settings))
    try:
        status = asyncio.run(session.refresh())
    except ConfigurationError as exc:
        _fail(str(exc))
    if status is not FetchStatus.READY:
        _fail(session.last_error or f"Source {source!r} is {status.value}.")
    return session


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Browse published spreadsheet exports."""


@app.command("version")
def version_command() -> None:
    """Print the package version."""
    typer.echo(__version__)


@app.command("show")
def show_command(
    source: str = typer.Argument(..., help="Configured source name or an http(s) URL."),
    range_name: RangeName = typer.Option(RangeName.wide, "--range", "-r", help="Header range to display."),
    text_filters: List[str] = typer.Option([], "--filter", "-f", help="HEADER=TEXT substring filter. Repeatable."),
    choice_filters: List[str] = typer.Option([], "--choice", "-c", help="HEADER=VALUE exact filter. Repeatable."),
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle the records before paging."),
    page_number: int = typer.Option(1, "--page", "-p", min=1, help="Page to display."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for --shuffle."),
) -> None:
    """Fetch a source and print one page of records."""

    settings = Settings.load()
    text = parse_pairs(text_filters, "--filter")
    choices = parse_pairs(choice_filters, "--choice")

    with configure_logging(log_format=settings.log_format, log_level=settings.log_level):
        session = _load_session(source, settings)

    view = TableView(session, DISPLAY_RANGES[range_name.value], page_size=settings.page_size)
    for header, value in text:
        view.set_text_filter(header, value)
    for header, value in choices:
        view.set_choice_filter(header, value)
    if shuffle:
        view.shuffle(random.Random(seed))
    view.go_to_page(page_number)

    records = view.current_page_records()
    if not records:
        typer.echo("No records match the current filters.")
    else:
        for line in format_rows(view.headers, records):
            typer.echo(line)
    typer.echo(f"Page {view.current_page} of {view.total_pages} ({len(view.filtered())} records)")


@app.command("pick")
def pick_command(
    source: str = typer.Argument(..., help="Configured source name or an http(s) URL."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the pick."),
) -> None:
    """Fetch a source and print a random record."""

    settings = Settings.load()
    with configure_logging(log_format=settings.log_format, log_level=settings.log_level):
        session = _load_session(source, settings)
        try:
            record = session.pick_random(random.Random(seed))
        except EmptySource as exc:
            _fail(str(exc))

    typer.echo(record.key)
    for header, value in record.fields.items():
        typer.echo(f"  {header}: {value}")


def _status_lines(catalog: SourceCatalog) -> list[str]:
    lines = []
    for snap in catalog.snapshot():
        line = f"{snap.name}: {snap.status.value} ({snap.record_count} records)"
        if snap.last_error:
            line = f"{line} - {snap.last_error}"
        lines.append(line)
    return lines


@app.command("status")
def status_command(
    as_json: bool = typer.Option(False, "--json", help="Print session snapshots as JSON."),
) -> None:
    """Refresh every configured source and report its state."""

    settings = Settings.load()
    if not settings.sources:
        _fail("No sources configured. Set SHEETVIEW_SOURCES or add [sources] to settings.toml.")

    catalog = SourceCatalog.from_settings(settings, build_fetcher(settings))
    with configure_logging(log_format=settings.log_format, log_level=settings.log_level):
        asyncio.run(catalog.refresh_all())

    if as_json:
        typer.echo(json.dumps([snap.model_dump(mode="json") for snap in catalog.snapshot()], indent=2))
        return
    for line in _status_lines(catalog):
        typer.echo(line)


async def _watch(catalog: SourceCatalog, interval: float, iterations: int | None) -> None:
    completed = 0
    while True:
        await catalog.refresh_all()
        for line in _status_lines(catalog):
            typer.echo(line)
        completed += 1
        if iterations is not None and completed >= iterations:
            return
        await asyncio.sleep(interval)


@app.command("watch")
def watch_command(
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        min=0.0,
        help="Seconds between refreshes (defaults to the refresh_interval setting).",
    ),
    iterations: Optional[int] = typer.Option(
        None,
        "--iterations",
        min=1,
        help="Stop after this many refresh rounds (runs until interrupted by default).",
    ),
) -> None:
    """Refresh every configured source on a fixed cadence."""

    settings = Settings.load()
    if not settings.sources:
        _fail("No sources configured. Set SHEETVIEW_SOURCES or add [sources] to settings.toml.")

    catalog = SourceCatalog.from_settings(settings, build_fetcher(settings))
    effective_interval = settings.refresh_interval if interval is None else interval
    with configure_logging(log_format=settings.log_format, log_level=settings.log_level):
        try:
            asyncio.run(_watch(catalog, effective_interval, iterations))
        except KeyboardInterrupt:
            raise typer.Exit(code=130)


__all__ = ["app", "build_fetcher", "format_rows", "parse_pairs", "resolve_session"]
