# SPDX-License-Identifier: MIT

import logging
from functools import reduce
from typing import NoReturn, Optional

import pendulum
import typer
from rich.console import Console

from itinerary.model.selection import DateRangeSelection
from itinerary.repository.active_trip import ACTIVE_TRIP_REPO
from itinerary.service.date_range import empty_selection, select_day
from itinerary.time import date_to_iso_str, today_local

logger = logging.getLogger(__name__)


def fail(message: str) -> NoReturn:
    console = Console()
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def resolve_trip_id(trip_id: Optional[str]) -> str:
    """Use the given trip id or fall back to the stored active trip."""
    if trip_id is not None:
        return trip_id
    active_trip_id = ACTIVE_TRIP_REPO.get()
    if active_trip_id is None:
        fail("no active trip, create one with 'itinerary trip create'")
    return active_trip_id


def fold_days(
    days: list[pendulum.Date], selection: Optional[DateRangeSelection] = None
) -> DateRangeSelection:
    """Apply a sequence of calendar taps to a selection."""
    if selection is None:
        selection = empty_selection()
    result = reduce(select_day, days, selection)
    logger.debug("selection after %d taps: %s", len(days), result)
    return result


def fail_on_past_days(days: list[pendulum.Date]) -> None:
    """Trips are planned from today on; earlier calendar taps are refused."""
    today = today_local()
    for day in days:
        if day < today:
            fail(f"{date_to_iso_str(day)} is in the past, pick today or later")
