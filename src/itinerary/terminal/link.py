# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console

from itinerary.client.api import ApiError, get_api_client
from itinerary.client.link import LinkClient
from itinerary.client.trip import TripClient
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.service.trip import format_trip_when
from itinerary.service.validate import is_valid_url
from itinerary.terminal.custom_typer import AliasedTyperGroup
from itinerary.terminal.util import fail, resolve_trip_id
from itinerary.view.views.trip import links_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="link title")],
    url: Annotated[str, typer.Argument(help="link address")],
    trip_id: Annotated[
        Optional[str], typer.Option("--trip", help="defaults to the active trip")
    ] = None,
) -> None:
    """Save an important link on a trip."""
    if not title.strip():
        fail("the link needs a title")
    if not is_valid_url(url.strip()):
        fail(f"invalid link: {url}")

    real_trip_id = resolve_trip_id(trip_id)
    try:
        with get_api_client() as api:
            LinkClient(api).create(real_trip_id, title.strip(), url.strip())
    except ApiError as e:
        logger.error("could not add link to trip %s: %s", real_trip_id, e)
        fail(str(e))

    Console().print("[green]Link criado com sucesso[/green]")


@app.command("list, ls")
def list_links(
    trip_id: Annotated[
        Optional[str], typer.Argument(help="defaults to the active trip")
    ] = None,
) -> None:
    """List a trip's links."""
    config = CONFIGURATION_REPO.get_config()
    real_trip_id = resolve_trip_id(trip_id)

    try:
        with get_api_client() as api:
            trip = TripClient(api).get_by_id(real_trip_id)
            links = LinkClient(api).get_by_trip_id(real_trip_id)
    except ApiError as e:
        logger.error("could not list links of trip %s: %s", real_trip_id, e)
        fail(str(e))

    links_view(links, format_trip_when(trip, config["locale"]))
