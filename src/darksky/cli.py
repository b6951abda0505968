"""
Command line interface for the DarkSky client.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .api import DarkskyClient, RequestsBackend
from .config import ConfigError, Settings, get_settings
from .errors import DarkskyError
from .models import Datapoint, Forecast, encode
from .options import Block, Language, Options, Unit
from .util import uri, uri_optioned

console = Console()
app = typer.Typer(help="Fetch forecasts from the DarkSky API.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("DARKSKY_LOG_LEVEL")
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _resolve_token(token: Optional[str], settings: Settings) -> str:
    if token:
        return token
    try:
        return settings.require_token()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _build_options(
    exclude: Optional[List[Block]],
    extend_hourly: bool,
    lang: Optional[Language],
    units: Optional[Unit],
) -> Optional[Options]:
    """Return None when nothing was requested so the `units=auto` path is used."""
    if not exclude and not extend_hourly and lang is None and units is None:
        return None
    options = Options()
    if exclude:
        options.exclude(exclude)
    if extend_hourly:
        options.extend_hourly()
    if lang is not None:
        options.language(lang)
    if units is not None:
        options.unit(units)
    return options


def _format_value(value: Optional[float], suffix: str = "") -> str:
    if value is None:
        return "-"
    return f"{value:g}{suffix}"


def _print_forecast(forecast: Forecast) -> None:
    table = Table(title="Forecast")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    table.add_row("Location", f"{forecast.latitude}, {forecast.longitude}")
    table.add_row("Timezone", forecast.timezone)
    if forecast.flags and forecast.flags.units:
        table.add_row("Units", forecast.flags.units)
    current: Optional[Datapoint] = forecast.currently
    if current is not None:
        table.add_row("Now", current.summary or "-")
        table.add_row("Temperature", _format_value(current.temperature, "°"))
        table.add_row("Precipitation probability", _format_value(current.precip_probability))
        table.add_row("Wind speed", _format_value(current.wind_speed))
    for name, block in (("Minutely", forecast.minutely), ("Hourly", forecast.hourly), ("Daily", forecast.daily)):
        if block is None:
            continue
        points = len(block.data or [])
        table.add_row(name, f"{block.summary or '-'} ({points} points)")
    table.add_row("Alerts", str(len(forecast.alerts)))
    console.print(table)
    for alert in forecast.alerts:
        console.print(f"[bold yellow]{alert.severity.value.upper()}[/] {alert.title}")


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show darksky version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]darksky[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print("[bold yellow]darksky[/] is ready. Run [cyan]darksky forecast LAT LON[/] to fetch a forecast.")


@app.command("url")
def url_command(
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees."),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees."),
    time: Optional[str] = typer.Option(None, "--time", "-t", help="Unix time or ISO-8601 timestamp (time machine)."),
    exclude: List[Block] = typer.Option(None, "--exclude", "-x", help="Block to exclude (multiple allowed)."),
    extend_hourly: bool = typer.Option(False, "--extend-hourly", help="Return seven days of hourly data."),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Language for summaries.", case_sensitive=False),
    units: Optional[Unit] = typer.Option(None, "--units", help="Unit system.", case_sensitive=False),
    token: Optional[str] = typer.Option(None, "--token", help="API token (defaults to DARKSKY_TOKEN)."),
) -> None:
    """
    Print the request URL without sending it.
    """
    settings = _load_settings_or_exit()
    api_token = _resolve_token(token, settings)
    options = _build_options(exclude, extend_hourly, lang, units)
    try:
        if options is None and time is None:
            request_url = uri(api_token, latitude, longitude, base_url=settings.api_url)
        else:
            request_url = uri_optioned(api_token, latitude, longitude, options, time, base_url=settings.api_url)
    except DarkskyError as exc:
        console.print(f"[bold red]Error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(request_url)


@app.command()
def forecast(
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees."),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees."),
    time: Optional[str] = typer.Option(None, "--time", "-t", help="Unix time or ISO-8601 timestamp (time machine)."),
    exclude: List[Block] = typer.Option(None, "--exclude", "-x", help="Block to exclude (multiple allowed)."),
    extend_hourly: bool = typer.Option(False, "--extend-hourly", help="Return seven days of hourly data."),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Language for summaries.", case_sensitive=False),
    units: Optional[Unit] = typer.Option(None, "--units", help="Unit system.", case_sensitive=False),
    token: Optional[str] = typer.Option(None, "--token", help="API token (defaults to DARKSKY_TOKEN)."),
    as_json: bool = typer.Option(False, "--json", help="Print the decoded forecast as JSON."),
) -> None:
    """
    Fetch a forecast and print a summary.
    """
    settings = _load_settings_or_exit()
    api_token = _resolve_token(token, settings)
    options = _build_options(exclude, extend_hourly, lang, units)
    client = DarkskyClient(
        api_token,
        base_url=settings.api_url,
        backend=RequestsBackend(timeout=settings.timeout),
    )
    try:
        if time is not None:
            result = client.get_forecast_time_machine(latitude, longitude, time, options)
        elif options is None:
            result = client.get_forecast(latitude, longitude)
        else:
            result = client.get_forecast_with_options(latitude, longitude, options)
    except DarkskyError as exc:
        console.print(f"[bold red]Forecast request failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(encode(result, indent=2))
    else:
        _print_forecast(result)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
