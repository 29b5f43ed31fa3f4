# SPDX-License-Identifier: MIT

from typing import Final, Literal, TypedDict, Union

import pendulum


class SelectionState:
    EMPTY: Final = "empty"
    START_ONLY: Final = "start_only"
    RANGE: Final = "range"


class EmptySelection(TypedDict):
    state: Literal["empty"]
    starts_at: None
    ends_at: None


class StartOnlySelection(TypedDict):
    state: Literal["start_only"]
    starts_at: pendulum.Date
    ends_at: None


class RangeSelection(TypedDict):
    # starts_at <= ends_at
    state: Literal["range"]
    starts_at: pendulum.Date
    ends_at: pendulum.Date


DateRangeSelection = Union[EmptySelection, StartOnlySelection, RangeSelection]


class MarkedDate(TypedDict):
    selected: bool
    starting_day: bool
    ending_day: bool


# keyed by ISO 'YYYY-MM-DD'
MarkedDates = dict[str, MarkedDate]
