# SPDX-License-Identifier: MIT

from itinerary.model.active_trip import ActiveTrip


def get_active_trip_template() -> ActiveTrip:
    return {"trip_id": None}
