# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from itinerary.service.timeline import is_hour_text_parsable
from itinerary.time import date_from_str, today_local


def parse_day(day_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a calendar day given on the command line.

    Accepts YYYY-MM-DD, today (t), tomorrow (o), yesterday (y) or a day
    offset from today like 1 or -1.
    """
    if day_param is None:
        return None

    day = str(day_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", day):
        try:
            return date_from_str(day)
        except ValueError:
            raise typer.BadParameter(f"Invalid date: '{day}'")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", day):
        return today_local().add(days=int(day))

    if day == "today" or day == "t":
        return today_local()
    if day == "tomorrow" or day == "o":
        return today_local().add(days=1)
    if day == "yesterday" or day == "y":
        return today_local().subtract(days=1)
    raise typer.BadParameter(
        "Incorrect date format, use YYYY-MM-DD, today, tomorrow, yesterday or an offset"
    )


def parse_hour_text(hour_text: Optional[str]) -> Optional[str]:
    """Keep the raw hour text but refuse anything that is not a whole number."""
    if hour_text is None:
        return None
    if not is_hour_text_parsable(hour_text):
        raise typer.BadParameter(f"Invalid hour: '{hour_text}'")
    return hour_text.strip()
