# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from itinerary.configuration import DEFAULT_CLOCK_FORMAT, DEFAULT_LOCALE, ClockFormat
from itinerary.model.activity import ActivityItem, DayBucket, DaySection
from itinerary.time import now_utc, start_of_day

HOUR_LABEL_FORMATS: dict[str, str] = {
    "12h": "hh:mm[h]",
    "24h": "HH:mm[h]",
}

_DECIMAL_SEPARATORS = re.compile(r"[.,]")
_HOUR_TEXT = re.compile(r"^-?\d+$")


def format_day_name(date: pendulum.Date, locale: str = DEFAULT_LOCALE) -> str:
    # "segunda-feira" -> "segunda"
    return date.format("dddd", locale=locale).replace("-feira", "")


def format_hour_label(
    occurs_at: pendulum.DateTime, clock_format: ClockFormat = DEFAULT_CLOCK_FORMAT
) -> str:
    return occurs_at.in_tz("local").format(HOUR_LABEL_FORMATS[clock_format])


def build_sections(
    buckets: list[DayBucket],
    now: Optional[pendulum.DateTime] = None,
    locale: str = DEFAULT_LOCALE,
    clock_format: ClockFormat = DEFAULT_CLOCK_FORMAT,
) -> list[DaySection]:
    """
    Turn server-grouped day buckets into render-ready day sections.

    Args:
        buckets: Day buckets in the order delivered by the server
        now: The instant activities are judged against (defaults to the
            current time, sampled once for the whole call)
        locale: Locale for weekday names
        clock_format: "12h" or "24h" hour labels

    Returns:
        One section per bucket, in input order. Buckets without activities
        still produce a section with an empty activity list.
    """
    if now is None:
        now = now_utc()

    sections: list[DaySection] = []
    for bucket in buckets:
        items: list[ActivityItem] = [
            {
                "id": activity["id"],
                "title": activity["title"],
                "hour_label": format_hour_label(activity["occurs_at"], clock_format),
                "is_past": activity["occurs_at"] < now,
            }
            for activity in bucket["activities"]
        ]
        sections.append(
            {
                "day_number": bucket["date"].day,
                "day_name": format_day_name(bucket["date"], locale),
                "activities": items,
            }
        )
    return sections


def sanitize_hour_text(hour_text: str) -> str:
    """Strip decimal separators: '9,5' -> '95'."""
    return _DECIMAL_SEPARATORS.sub("", hour_text)


def is_hour_text_parsable(hour_text: str) -> bool:
    return _HOUR_TEXT.match(sanitize_hour_text(hour_text).strip()) is not None


def combine_date_and_hour(
    day: pendulum.Date, hour_text: str, tz: str = "local"
) -> pendulum.DateTime:
    """
    Combine a calendar day and typed hour text into one instant.

    The hour is not bounded to 0-23; larger values roll over into the
    following days. Callers check is_hour_text_parsable() first.
    """
    hours = int(sanitize_hour_text(hour_text))
    return start_of_day(day, tz).add(hours=hours)
