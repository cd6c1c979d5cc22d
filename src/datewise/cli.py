"""Typer-based command line interface for the date engine.

``datewise parse`` lists every interpretation of one or more date strings;
``datewise format``, ``format-day`` and ``format-month`` render a date, a day
count or a month count through a format string.

Exit codes
----------
0 success
2 usage error (no date strings given)
3 I/O error (unreadable or undecodable ``--in`` file)
4 configuration error (unreadable or invalid YAML, unknown locale)
5 parse/format error (unparseable date string, invalid format string)
"""

from __future__ import annotations

import json
import os
import sys
from datetime import date
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .engine import (
    Interpretation,
    format_date_string,
    format_day_string,
    format_month_string,
    parse_date_string,
)
from .julian import to_julian_day
from .names import CalendarNames, get_calendar_names
from .utils.errors import DateStringError, UnparseableDateError, UnsupportedLocaleError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="datewise",
    help="Date string tools. Use 'datewise parse' to list every reading of a date string.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _setup(config_path: Path | None, verbose: bool) -> tuple[ConfigModel, CalendarNames]:
    """Load configuration, configure logging and resolve the name service."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, OSError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    try:
        names = get_calendar_names(cfg.locale)
    except UnsupportedLocaleError as exc:
        _safe_exit(4, str(exc))
    if verbose:
        typer.echo(f"Loaded config (locale={cfg.locale})", err=True)
    return cfg, names


def _read_values(in_path: Path) -> list[str]:
    """Return the non-blank lines of ``in_path``."""

    text = in_path.read_text(encoding="utf-8-sig")
    return [line.strip() for line in text.splitlines() if line.strip()]


def _interpretation_row(interp: Interpretation) -> dict[str, Any]:
    row = interp.to_dict()
    row["julian_day"] = to_julian_day(interp.date)
    return row


def _text_line(value: str, interp: Interpretation) -> str:
    count = f"months={interp.months}" if interp.months is not None else f"days={interp.days}"
    return f"{value}\t{interp.format}\t{interp.date.isoformat()}\t{count}"


@app.callback()
def main() -> None:
    """Entry point for the datewise command group."""
    pass


@app.command()
def parse(
    values: Optional[list[str]] = typer.Argument(  # noqa: B008
        None, help="Date strings to interpret, e.g. '01/05/2023'"
    ),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in", "--input", help="File with one date string per line"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False, "--json", help="Emit JSON instead of text (also set by output.format)"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """List every interpretation of each date string."""

    cfg, names = _setup(config_path, verbose)
    use_json = as_json or cfg.output.format == "json"

    inputs = list(values or [])
    if in_path is not None:
        try:
            inputs.extend(_read_values(in_path))
        except (OSError, UnicodeDecodeError) as exc:
            _safe_exit(3, f"Cannot read {in_path}: {exc}")
    if not inputs:
        _safe_exit(2, "No date strings given")

    failures = 0
    report: list[dict[str, Any]] = []
    for value in inputs:
        try:
            with Timing() as t_parse:
                interps = parse_date_string(value, names=names, separators=cfg.parsing.separators)
        except UnparseableDateError as exc:
            failures += 1
            typer.echo(str(exc), err=True)
            report.append({"input": value, "error": str(exc), "interpretations": []})
            continue
        if verbose:
            typer.echo(
                f"Parsed {value!r} into {len(interps)} interpretation(s) in {t_parse.ms:.1f} ms",
                err=True,
            )
        if use_json:
            report.append(
                {"input": value, "interpretations": [_interpretation_row(i) for i in interps]}
            )
        else:
            for interp in interps:
                typer.echo(_text_line(value, interp))

    if use_json:
        typer.echo(json.dumps(report, indent=2))
    log.info("parsed %d value(s), %d failure(s)", len(inputs), failures)
    if failures:
        _safe_exit(5)


@app.command("format")
def format_date(
    value: str = typer.Argument(..., help="ISO date (YYYY-MM-DD)"),  # noqa: B008
    fmt: str = typer.Argument(..., metavar="FORMAT", help="Format string, e.g. 'Ms D1, Y'"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Render an ISO date through a format string."""

    _, names = _setup(config_path, False)
    try:
        when = date.fromisoformat(value)
    except ValueError:
        _safe_exit(5, f'Invalid ISO date: "{value}"')
    try:
        typer.echo(format_date_string(when, fmt, names=names))
    except DateStringError as exc:
        _safe_exit(5, str(exc))


@app.command("format-day")
def format_day(
    days: int = typer.Argument(..., help="Days since 1970-01-01"),  # noqa: B008
    fmt: str = typer.Argument(..., metavar="FORMAT", help="Format string with a day tag"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Render a day count through a format string."""

    _, names = _setup(config_path, False)
    try:
        typer.echo(format_day_string(days, fmt, names=names))
    except DateStringError as exc:
        _safe_exit(5, str(exc))


@app.command("format-month")
def format_month(
    months: int = typer.Argument(..., help="Months since 1970-01"),  # noqa: B008
    fmt: str = typer.Argument(..., metavar="FORMAT", help="Format string without a day tag"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Render a month count through a format string."""

    _, names = _setup(config_path, False)
    try:
        typer.echo(format_month_string(months, fmt, names=names))
    except DateStringError as exc:
        _safe_exit(5, str(exc))
