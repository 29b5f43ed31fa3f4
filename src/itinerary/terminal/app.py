# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from itinerary.logs import configure_logging
from itinerary.terminal import activity, configuration, guest, link, trip
from itinerary.terminal.calendar import calendar
from itinerary.terminal.custom_typer import OrderedAliasedTyperGroup
from itinerary.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Itinerary - plan trips with friends from the CLI",
    no_args_is_help=True,
)
app.add_typer(trip.app, name="trip, t")
app.add_typer(activity.app, name="activity, a")
app.add_typer(link.app, name="link, l")
app.add_typer(guest.app, name="guest, g")
app.add_typer(configuration.app, name="config, c")
app.command(name="calendar, cal")(calendar)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    Itinerary - plan trips with friends from the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
