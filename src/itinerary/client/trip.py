# SPDX-License-Identifier: MIT

import logging
from typing import Any, cast

import pendulum

from itinerary import time
from itinerary.client.api import (
    MALFORMED_PAYLOAD_ERRORS,
    ApiClient,
    ApiError,
    malformed_payload_error,
)
from itinerary.model.trip import Trip

logger = logging.getLogger(__name__)


class TripClient:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def create(
        self,
        destination: str,
        starts_at: pendulum.DateTime,
        ends_at: pendulum.DateTime,
        emails_to_invite: list[str],
    ) -> str:
        body = self.api.post(
            "/trips",
            {
                "destination": destination,
                "starts_at": time.datetime_to_iso_str(starts_at),
                "ends_at": time.datetime_to_iso_str(ends_at),
                "emails_to_invite": emails_to_invite,
            },
        )
        if "tripId" not in body:
            raise ApiError("trip API did not return the new trip id")
        trip_id = str(body["tripId"])
        logger.info("created trip %s", trip_id)
        return trip_id

    def get_by_id(self, trip_id: str) -> Trip:
        body = self.api.get(f"/trips/{trip_id}")
        if not isinstance(body.get("trip"), dict):
            raise ApiError(f"trip {trip_id} not found")
        try:
            return convert_trip_for_deserialization(body["trip"])
        except MALFORMED_PAYLOAD_ERRORS as e:
            raise malformed_payload_error("trip", e) from e

    def update(
        self,
        trip_id: str,
        destination: str,
        starts_at: pendulum.DateTime,
        ends_at: pendulum.DateTime,
    ) -> None:
        self.api.put(
            f"/trips/{trip_id}",
            {
                "destination": destination,
                "starts_at": time.datetime_to_iso_str(starts_at),
                "ends_at": time.datetime_to_iso_str(ends_at),
            },
        )
        logger.info("updated trip %s", trip_id)


def convert_trip_for_deserialization(trip: dict[str, Any]) -> Trip:
    deserializable_trip = dict(trip)
    deserializable_trip["id"] = str(deserializable_trip["id"])
    deserializable_trip["starts_at"] = time.datetime_from_str(
        deserializable_trip["starts_at"]
    )
    deserializable_trip["ends_at"] = time.datetime_from_str(
        deserializable_trip["ends_at"]
    )
    deserializable_trip["is_confirmed"] = bool(
        deserializable_trip.get("is_confirmed", False)
    )
    return cast(Trip, deserializable_trip)
