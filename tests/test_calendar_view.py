"""Tests for the month calendar grid."""

import pendulum

from itinerary.color import RANGE_BODY_STYLE, RANGE_EDGE_STYLE, UNAVAILABLE_DAY_STYLE
from itinerary.service.date_range import (
    empty_selection,
    marked_dates,
    range_between,
    start_only,
)
from itinerary.view.views.calendar import months_to_show, render_day_cell

MARCH_5 = pendulum.date(2024, 3, 5)
MARCH_10 = pendulum.date(2024, 3, 10)


class TestRenderDayCell:
    def test_range_edges_and_body(self) -> None:
        dates = marked_dates(range_between(MARCH_5, MARCH_10))

        assert render_day_cell(MARCH_5, dates).style == RANGE_EDGE_STYLE
        assert render_day_cell(pendulum.date(2024, 3, 7), dates).style == (
            RANGE_BODY_STYLE
        )
        assert render_day_cell(MARCH_10, dates).style == RANGE_EDGE_STYLE

    def test_days_outside_min_and_max_are_unavailable(self) -> None:
        def style(day: pendulum.Date) -> str:
            cell = render_day_cell(day, {}, min_date=MARCH_5, max_date=MARCH_10)
            return str(cell.style)

        assert style(pendulum.date(2024, 3, 4)) == UNAVAILABLE_DAY_STYLE
        assert style(MARCH_5) != UNAVAILABLE_DAY_STYLE
        assert style(MARCH_10) != UNAVAILABLE_DAY_STYLE
        assert style(pendulum.date(2024, 3, 11)) == UNAVAILABLE_DAY_STYLE

    def test_without_bounds_every_day_is_available(self) -> None:
        cell = render_day_cell(pendulum.date(1999, 1, 1), {})

        assert str(cell.style) != UNAVAILABLE_DAY_STYLE


class TestMonthsToShow:
    def test_empty_selection_shows_the_current_month(self) -> None:
        today = pendulum.date(2024, 3, 20)

        assert months_to_show(empty_selection(), today) == [
            pendulum.date(2024, 3, 1)
        ]

    def test_start_only_shows_its_month(self) -> None:
        assert months_to_show(start_only(MARCH_5), pendulum.date(2024, 1, 1)) == [
            pendulum.date(2024, 3, 1)
        ]

    def test_range_across_months_shows_each_month(self) -> None:
        selection = range_between(pendulum.date(2024, 3, 28), pendulum.date(2024, 4, 3))

        assert months_to_show(selection, MARCH_5) == [
            pendulum.date(2024, 3, 1),
            pendulum.date(2024, 4, 1),
        ]
