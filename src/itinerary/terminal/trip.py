# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from itinerary.client.api import ApiError, get_api_client
from itinerary.client.link import LinkClient
from itinerary.client.participant import ParticipantClient
from itinerary.client.trip import TripClient
from itinerary.model.selection import SelectionState
from itinerary.repository.active_trip import ACTIVE_TRIP_REPO
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.service.date_range import format_range_text
from itinerary.service.trip import (
    TripFormError,
    check_new_guest,
    check_trip_form,
    format_trip_when,
    trip_selection,
)
from itinerary.terminal.custom_typer import AliasedTyperGroup
from itinerary.terminal.parse import parse_day
from itinerary.terminal.util import (
    fail,
    fail_on_past_days,
    fold_days,
    resolve_trip_id,
)
from itinerary.time import start_of_day
from itinerary.view.views.trip import trip_details_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DAY_HELP = (
    "calendar tap, repeatable; the earlier of two taps becomes the start. "
    "valid inputs: YYYY-MM-DD, today, tomorrow, yesterday, or day offset like 1, -1"
)


@app.command("create, c", no_args_is_help=True)
def create(
    destination: Annotated[str, typer.Argument(help="where to?")],
    days: Annotated[
        Optional[list[pendulum.Date]],
        typer.Option("--day", "-d", parser=parse_day, help=DAY_HELP),
    ] = None,
    guests: Annotated[
        Optional[list[str]],
        typer.Option("--guest", "-g", help="guest e-mail (repeatable)"),
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation prompt")
    ] = False,
) -> None:
    """Create a trip and make it the active one."""
    config = CONFIGURATION_REPO.get_config()
    selection = fold_days(days or [])

    emails_to_invite: list[str] = []
    try:
        check_trip_form(destination, selection)
        for guest in guests or []:
            emails_to_invite.append(check_new_guest(guest, emails_to_invite))
    except TripFormError as e:
        fail(str(e))

    if selection["state"] != SelectionState.RANGE:
        fail("select both the start and the end of the trip")
    fail_on_past_days(days or [])

    console = Console()
    console.print(
        f"{destination}: {format_range_text(selection, config['locale'])}"
        f" ({len(emails_to_invite)} convidado(s))"
    )
    if not yes:
        typer.confirm("Confirmar viagem?", abort=True)

    try:
        with get_api_client() as api:
            trip_id = TripClient(api).create(
                destination=destination.strip(),
                starts_at=start_of_day(selection["starts_at"]),
                ends_at=start_of_day(selection["ends_at"]),
                emails_to_invite=emails_to_invite,
            )
    except ApiError as e:
        logger.error("could not create trip: %s", e)
        fail(str(e))

    ACTIVE_TRIP_REPO.save(trip_id)
    console.print(f"[green]Viagem criada com sucesso: {trip_id}[/green]")


@app.command("show, s")
def show(
    trip_id: Annotated[
        Optional[str], typer.Argument(help="defaults to the active trip")
    ] = None,
) -> None:
    """Show the trip summary, its links and its guests."""
    config = CONFIGURATION_REPO.get_config()
    real_trip_id = resolve_trip_id(trip_id)

    try:
        with get_api_client() as api:
            trip = TripClient(api).get_by_id(real_trip_id)
            links = LinkClient(api).get_by_trip_id(real_trip_id)
            participants = ParticipantClient(api).get_by_trip_id(real_trip_id)
    except ApiError as e:
        logger.error("could not load trip %s: %s", real_trip_id, e)
        fail(str(e))

    trip_details_view(format_trip_when(trip, config["locale"]), links, participants)


@app.command("update, u")
def update(
    destination: Annotated[Optional[str], typer.Option("--destination", "-t")] = None,
    days: Annotated[
        Optional[list[pendulum.Date]],
        typer.Option("--day", "-d", parser=parse_day, help=DAY_HELP),
    ] = None,
    trip_id: Annotated[
        Optional[str], typer.Option("--trip", help="defaults to the active trip")
    ] = None,
) -> None:
    """Change the destination or the dates of a trip."""
    config = CONFIGURATION_REPO.get_config()
    real_trip_id = resolve_trip_id(trip_id)
    fail_on_past_days(days or [])

    try:
        with get_api_client() as api:
            trip_client = TripClient(api)
            trip = trip_client.get_by_id(real_trip_id)

            new_destination = (
                destination if destination is not None else trip["destination"]
            )
            # new taps start a fresh selection, like reopening the calendar
            selection = fold_days(days) if days else trip_selection(trip)
            check_trip_form(new_destination, selection)
            if selection["state"] != SelectionState.RANGE:
                fail("select both the start and the end of the trip")

            trip_client.update(
                real_trip_id,
                destination=new_destination.strip(),
                starts_at=start_of_day(selection["starts_at"]),
                ends_at=start_of_day(selection["ends_at"]),
            )
            trip = trip_client.get_by_id(real_trip_id)
    except TripFormError as e:
        fail(str(e))
    except ApiError as e:
        logger.error("could not update trip %s: %s", real_trip_id, e)
        fail(str(e))

    console = Console()
    console.print("[green]Viagem atualizada com sucesso![/green]")
    console.print(format_trip_when(trip, config["locale"]))


@app.command("forget, f")
def forget() -> None:
    """Stop tracking the active trip on this device."""
    if ACTIVE_TRIP_REPO.get() is None:
        fail("no active trip")
    ACTIVE_TRIP_REPO.remove()
    Console().print("active trip cleared")
