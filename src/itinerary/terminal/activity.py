# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from itinerary.client.activity import ActivityClient
from itinerary.client.api import ApiClient, ApiError, get_api_client
from itinerary.client.trip import TripClient
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.service.timeline import build_sections, combine_date_and_hour
from itinerary.service.trip import format_trip_when, trip_contains_day
from itinerary.terminal.custom_typer import AliasedTyperGroup
from itinerary.terminal.parse import parse_day, parse_hour_text
from itinerary.terminal.util import fail, resolve_trip_id
from itinerary.time import date_to_iso_str, now_utc
from itinerary.view.views.activity import activities_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _show_activities(api: ApiClient, trip_id: str) -> None:
    config = CONFIGURATION_REPO.get_config()
    trip = TripClient(api).get_by_id(trip_id)
    buckets = ActivityClient(api).get_by_trip_id(trip_id)
    sections = build_sections(
        buckets,
        now=now_utc(),
        locale=config["locale"],
        clock_format=config["clock_format"],
    )
    activities_view(sections, format_trip_when(trip, config["locale"]))


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="what is happening")],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_day,
            help="valid inputs: YYYY-MM-DD, today, tomorrow, yesterday, or day offset like 1, -1",
        ),
    ] = None,
    hour: Annotated[
        Optional[str],
        typer.Option(
            "--hour",
            "-H",
            parser=parse_hour_text,
            help="hours after midnight of --date; '.' and ',' are ignored",
        ),
    ] = None,
    trip_id: Annotated[
        Optional[str], typer.Option("--trip", help="defaults to the active trip")
    ] = None,
) -> None:
    """Add an activity to a trip, then list the trip's activities."""
    if not title.strip() or date is None or hour is None:
        fail("fill in the title, --date and --hour")

    config = CONFIGURATION_REPO.get_config()
    real_trip_id = resolve_trip_id(trip_id)
    occurs_at = combine_date_and_hour(date, hour)

    try:
        with get_api_client() as api:
            trip = TripClient(api).get_by_id(real_trip_id)
            if not trip_contains_day(trip, date):
                fail(
                    f"{date_to_iso_str(date)} is outside the trip"
                    f" ({format_trip_when(trip, config['locale'])})"
                )
            ActivityClient(api).create(real_trip_id, occurs_at, title.strip())
            Console().print("[green]Nova atividade cadastrada com sucesso![/green]")
            _show_activities(api, real_trip_id)
    except ApiError as e:
        logger.error("could not add activity to trip %s: %s", real_trip_id, e)
        fail(str(e))


@app.command("list, ls")
def list_activities(
    trip_id: Annotated[
        Optional[str], typer.Argument(help="defaults to the active trip")
    ] = None,
) -> None:
    """List a trip's activities day by day."""
    real_trip_id = resolve_trip_id(trip_id)

    try:
        with get_api_client() as api:
            _show_activities(api, real_trip_id)
    except ApiError as e:
        logger.error("could not list activities of trip %s: %s", real_trip_id, e)
        fail(str(e))
