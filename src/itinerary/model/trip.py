# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Trip(TypedDict):
    id: str
    destination: str
    starts_at: pendulum.DateTime
    ends_at: pendulum.DateTime
    is_confirmed: bool


class TripLink(TypedDict):
    id: str
    title: str
    url: str


class Participant(TypedDict):
    id: str
    name: Optional[str]
    email: str
    is_confirmed: bool
