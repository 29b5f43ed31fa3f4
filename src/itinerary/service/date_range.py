# SPDX-License-Identifier: MIT

"""
Date range selection for calendar pickers.

The selection is owned by the caller and replaced wholesale by the return
value of select_day(). Taps can arrive in any chronological order; the
earlier day always ends up as starts_at.
"""

from typing import Optional

import pendulum

from itinerary.configuration import DEFAULT_LOCALE
from itinerary.model.selection import (
    DateRangeSelection,
    MarkedDates,
    RangeSelection,
    SelectionState,
    StartOnlySelection,
)
from itinerary.template.selection import get_selection_template
from itinerary.time import date_to_iso_str


def empty_selection() -> DateRangeSelection:
    return get_selection_template()


def start_only(day: pendulum.Date) -> StartOnlySelection:
    return {
        "state": SelectionState.START_ONLY,
        "starts_at": day,
        "ends_at": None,
    }


def range_between(first: pendulum.Date, second: pendulum.Date) -> RangeSelection:
    """Build a range from two days given in either order."""
    starts_at, ends_at = (first, second) if first <= second else (second, first)
    return {
        "state": SelectionState.RANGE,
        "starts_at": starts_at,
        "ends_at": ends_at,
    }


def select_day(
    current: DateRangeSelection, tapped: pendulum.Date
) -> DateRangeSelection:
    """
    Compute the selection that follows a tap on a calendar day.

    Args:
        current: The selection before the tap
        tapped: The calendar day that was tapped

    Returns:
        A new selection; current is left untouched
    """
    if current["state"] == SelectionState.EMPTY:
        return start_only(tapped)
    if current["state"] == SelectionState.START_ONLY:
        return range_between(current["starts_at"], tapped)
    # a completed range restarts on any further tap
    return start_only(tapped)


def selection_from_dates(
    starts_at: Optional[pendulum.Date], ends_at: Optional[pendulum.Date]
) -> DateRangeSelection:
    """Rebuild a normalized selection from endpoints that may be missing."""
    if starts_at is None and ends_at is None:
        return empty_selection()
    if starts_at is None or ends_at is None:
        return start_only(starts_at or ends_at)  # type: ignore[arg-type]
    return range_between(starts_at, ends_at)


def marked_dates(selection: DateRangeSelection) -> MarkedDates:
    """
    Per-day highlight hints for every day of a completed range.

    Returns an empty mapping unless both endpoints are set. Otherwise every
    day from starts_at to ends_at inclusive is present; the first carries
    starting_day and the last ending_day (both on a single-day range).
    """
    if selection["state"] != SelectionState.RANGE:
        return {}

    starts_at = selection["starts_at"]
    ends_at = selection["ends_at"]

    dates: MarkedDates = {}
    day = starts_at
    while day <= ends_at:
        dates[date_to_iso_str(day)] = {
            "selected": True,
            "starting_day": day == starts_at,
            "ending_day": day == ends_at,
        }
        day = day.add(days=1)
    return dates


def format_range_text(
    selection: DateRangeSelection, locale: str = DEFAULT_LOCALE
) -> Optional[str]:
    """
    Summarize a completed range, e.g. '22 a 29 de Março.'

    The month name always comes from ends_at, also when the range crosses
    into another month.
    """
    if selection["state"] != SelectionState.RANGE:
        return None

    starts_at = selection["starts_at"]
    ends_at = selection["ends_at"]
    month_name = ends_at.format("MMMM", locale=locale).capitalize()
    return f"{starts_at.day} a {ends_at.day} de {month_name}."
