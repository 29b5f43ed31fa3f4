# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Activity(TypedDict):
    id: str
    title: str
    occurs_at: pendulum.DateTime


class DayBucket(TypedDict):
    date: pendulum.Date
    activities: list[Activity]


class ActivityItem(TypedDict):
    id: str
    title: str
    hour_label: str
    is_past: bool


class DaySection(TypedDict):
    day_number: int
    day_name: str
    activities: list[ActivityItem]
