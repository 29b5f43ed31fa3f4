# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class ActiveTrip(TypedDict):
    trip_id: Optional[str]
