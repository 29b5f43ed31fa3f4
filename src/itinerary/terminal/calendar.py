# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.terminal.parse import parse_day
from itinerary.terminal.util import fold_days
from itinerary.time import today_local
from itinerary.view.views.calendar import calendar_view


def calendar(
    days: Annotated[
        Optional[list[pendulum.Date]],
        typer.Option(
            "--day",
            "-d",
            parser=parse_day,
            help="calendar tap, repeatable; a third tap starts a new range",
        ),
    ] = None,
    allow_past: Annotated[
        bool,
        typer.Option("--allow-past", help="do not grey out days before today"),
    ] = False,
    max_day: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--max-day",
            parser=parse_day,
            help="grey out days after this one, e.g. the last day of a trip",
        ),
    ] = None,
) -> None:
    """Preview a date range selection on a month calendar."""
    config = CONFIGURATION_REPO.get_config()
    today = today_local()
    selection = fold_days(days or [])
    calendar_view(
        selection,
        today,
        min_date=None if allow_past else today,
        locale=config["locale"],
        max_date=max_day,
    )
