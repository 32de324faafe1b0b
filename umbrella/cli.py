"""Command-line interface: print the current weather for a location."""

from __future__ import annotations

import logging
import os
from typing import List, NoReturn, Optional

import typer

from umbrella.abstractions import Provider
from umbrella.config import (
    API_KEY_ENV,
    BASE_URL_ENV,
    LOG_LEVEL_ENV,
    TIMEOUT_ENV,
    Settings,
    load_settings,
    parse_timeout,
)
from umbrella.errors import ConfigurationError, ProviderError
from umbrella.logging_setup import setup_logging
from umbrella.providers.base import RequestConfig
from umbrella.providers.weatherstack import WeatherstackProvider
from umbrella.temperature import Unit


logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Show the current weather for a location using the Weatherstack API.",
    add_completion=False,
)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _resolve_settings(
    api_key: str,
    base_url: Optional[str],
    timeout: Optional[float],
    log_level: Optional[str],
) -> Settings:
    """Layer explicit command-line values over the environment settings.

    A flag replaces its environment variable before parsing, so a malformed
    variable is ignored when the flag is given.
    """
    overrides = {BASE_URL_ENV: base_url, TIMEOUT_ENV: timeout, LOG_LEVEL_ENV: log_level}
    environ = dict(os.environ)
    environ.update({name: str(value) for name, value in overrides.items() if value is not None})
    settings = load_settings(environ)
    return Settings(
        api_key=api_key,
        base_url=settings.base_url,
        timeout=settings.timeout,
        log_level=settings.log_level,
    )


def build_provider(settings: Settings) -> Provider:
    return WeatherstackProvider(
        settings.api_key or "",
        base_url=settings.base_url,
        request_config=RequestConfig(timeout=settings.timeout),
    )


@app.command()
def main(
    ctx: typer.Context,
    location: Optional[List[str]] = typer.Argument(
        None,
        help="Location to look up, e.g. London, UK. Multiple words are joined with spaces.",
        show_default=False,
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        envvar=API_KEY_ENV,
        help="Weatherstack API key (required).",
        show_default=False,
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the API endpoint [env var: UMBRELLA_BASE_URL].", show_default=False
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds [env var: UMBRELLA_TIMEOUT].", show_default=False
    ),
    fahrenheit: bool = typer.Option(False, "--fahrenheit", help="Show the temperature in Fahrenheit."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level [env var: UMBRELLA_LOG_LEVEL].", show_default=False
    ),
) -> None:
    if not location:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    if not api_key:
        raise typer.BadParameter("Missing option '--api-key' / '-k'.", param_hint="'--api-key'")
    if timeout is not None:
        try:
            parse_timeout(str(timeout))
        except ConfigurationError as exc:
            raise typer.BadParameter("must be a positive number", param_hint="'--timeout'") from exc

    try:
        settings = _resolve_settings(api_key, base_url, timeout, log_level)
    except ConfigurationError as exc:
        _fail(str(exc))

    try:
        setup_logging(settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--log-level'") from exc

    query = " ".join(location)
    provider = build_provider(settings)
    try:
        weather = provider.get_weather(query)
    except ProviderError as exc:
        logger.debug("Lookup for %r failed with %s", query, exc.__class__.__name__)
        _fail(str(exc))
    finally:
        close = getattr(provider, "close", None)
        if callable(close):
            close()

    typer.echo(weather.render(Unit.FAHRENHEIT if fahrenheit else Unit.CELSIUS))


def run() -> None:
    app(prog_name="umbrella")


if __name__ == "__main__":  # pragma: no cover
    run()
