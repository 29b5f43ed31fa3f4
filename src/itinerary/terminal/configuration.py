# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from itinerary.configuration import ClockFormat
from itinerary.logs import VALID_LOG_LEVELS
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.terminal.custom_typer import AliasedTyperGroup
from itinerary.view.views.configuration import configuration_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def parse_clock_format(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if value not in ("12h", "24h"):
        raise typer.BadParameter("clock format must be '12h' or '24h'")
    return value


def parse_locale(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not value.strip():
        raise typer.BadParameter("locale must not be empty")
    try:
        pendulum.locale(value.lower())
    except ValueError:
        raise typer.BadParameter(f"unknown locale: '{value}'")
    return value.lower()


def parse_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if value.upper() not in VALID_LOG_LEVELS:
        raise typer.BadParameter(
            f"log level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return value.upper()


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    configuration_view(CONFIGURATION_REPO.get_config())


@app.command("set, s", no_args_is_help=True)
def set(
    api_url: Annotated[
        Optional[str], typer.Option("--api-url", help="base URL of the trip API")
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", parser=parse_locale, help="e.g. pt-br, en, es"),
    ] = None,
    clock_format: Annotated[
        Optional[str],
        typer.Option("--clock-format", parser=parse_clock_format, help="12h or 24h"),
    ] = None,
    request_timeout_seconds: Annotated[
        Optional[float], typer.Option("--timeout", min=0.1)
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", parser=parse_log_level)
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        api_url=api_url,
        locale=locale,
        clock_format=cast(Optional[ClockFormat], clock_format),
        request_timeout_seconds=request_timeout_seconds,
        log_level=log_level,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )
    configuration_view(CONFIGURATION_REPO.get_config())
