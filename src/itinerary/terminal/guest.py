# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer

from itinerary.client.api import ApiError, get_api_client
from itinerary.client.participant import ParticipantClient
from itinerary.client.trip import TripClient
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.service.trip import format_trip_when
from itinerary.terminal.custom_typer import AliasedTyperGroup
from itinerary.terminal.util import fail, resolve_trip_id
from itinerary.view.views.trip import participants_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_guests(
    trip_id: Annotated[
        Optional[str], typer.Argument(help="defaults to the active trip")
    ] = None,
) -> None:
    """List the people invited to a trip and whether they confirmed."""
    config = CONFIGURATION_REPO.get_config()
    real_trip_id = resolve_trip_id(trip_id)

    try:
        with get_api_client() as api:
            trip = TripClient(api).get_by_id(real_trip_id)
            participants = ParticipantClient(api).get_by_trip_id(real_trip_id)
    except ApiError as e:
        logger.error("could not list guests of trip %s: %s", real_trip_id, e)
        fail(str(e))

    participants_view(participants, format_trip_when(trip, config["locale"]))
