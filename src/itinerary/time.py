# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a calendar day."""
    return cast(pendulum.DateTime, pendulum.parse(date_str)).date()


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    if date_str is None:
        return None
    return date_from_str(date_str)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def start_of_day(date: pendulum.Date, tz: str = "local") -> pendulum.DateTime:
    """Midnight of the given calendar day in the given timezone."""
    return pendulum.datetime(date.year, date.month, date.day, tz=tz)


def datetime_to_local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    return datetime.in_tz("local").date()
