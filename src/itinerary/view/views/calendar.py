# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from itinerary.color import RANGE_BODY_STYLE, RANGE_EDGE_STYLE, UNAVAILABLE_DAY_STYLE
from itinerary.configuration import DEFAULT_LOCALE
from itinerary.model.selection import DateRangeSelection, MarkedDates
from itinerary.service.date_range import format_range_text, marked_dates
from itinerary.time import date_to_iso_str
from itinerary.view.views.header import header

# 2024-03-03 is a Sunday; weeks start on Sunday like the mobile calendar
_REFERENCE_SUNDAY = pendulum.date(2024, 3, 3)


def months_to_show(
    selection: DateRangeSelection, today: pendulum.Date
) -> list[pendulum.Date]:
    """First day of every month touched by the selection (today's month if empty)."""
    first = selection["starts_at"] or today
    last = selection["ends_at"] or first

    months = []
    month = first.start_of("month")
    while month <= last:
        months.append(month)
        month = month.add(months=1)
    return months


def build_month_table(
    month: pendulum.Date,
    dates: MarkedDates,
    min_date: Optional[pendulum.Date] = None,
    locale: str = DEFAULT_LOCALE,
    max_date: Optional[pendulum.Date] = None,
) -> Table:
    """
    Build a month grid where marked days form a continuous pill.

    Args:
        month: Any day of the month to draw
        dates: Marked dates from marked_dates()
        min_date: Days before this one are drawn as unavailable
        locale: Locale for the month and weekday names
        max_date: Days after this one are drawn as unavailable
    """
    month = month.start_of("month")
    title = month.format("MMMM YYYY", locale=locale).capitalize()
    table = Table(title=title, box=box.SIMPLE, padding=(0, 0))
    for offset in range(7):
        weekday = _REFERENCE_SUNDAY.add(days=offset).format("ddd", locale=locale)
        table.add_column(weekday[:3], justify="center", width=4)

    cells: list[Text] = [Text("") for _ in range(month.isoweekday() % 7)]
    for day_number in range(1, month.days_in_month + 1):
        day = month.add(days=day_number - 1)
        cells.append(render_day_cell(day, dates, min_date, max_date))

    while len(cells) % 7 != 0:
        cells.append(Text(""))
    for week_start in range(0, len(cells), 7):
        table.add_row(*cells[week_start : week_start + 7])
    return table


def render_day_cell(
    day: pendulum.Date,
    dates: MarkedDates,
    min_date: Optional[pendulum.Date] = None,
    max_date: Optional[pendulum.Date] = None,
) -> Text:
    label = f"{day.day:>2}".center(4)
    marked = dates.get(date_to_iso_str(day))
    if marked is not None:
        if marked["starting_day"] or marked["ending_day"]:
            return Text(label, style=RANGE_EDGE_STYLE)
        return Text(label, style=RANGE_BODY_STYLE)
    if (min_date is not None and day < min_date) or (
        max_date is not None and day > max_date
    ):
        return Text(label, style=UNAVAILABLE_DAY_STYLE)
    return Text(label)


def calendar_view(
    selection: DateRangeSelection,
    today: pendulum.Date,
    min_date: Optional[pendulum.Date] = None,
    locale: str = DEFAULT_LOCALE,
    max_date: Optional[pendulum.Date] = None,
) -> None:
    header("calendar", format_range_text(selection, locale))

    console = Console()
    dates = marked_dates(selection)
    for month in months_to_show(selection, today):
        console.print(build_month_table(month, dates, min_date, locale, max_date))

    if selection["starts_at"] is not None and selection["ends_at"] is None:
        console.print(
            f"[bright_black]início: {date_to_iso_str(selection['starts_at'])}"
            " (selecione a data final)[/bright_black]"
        )
