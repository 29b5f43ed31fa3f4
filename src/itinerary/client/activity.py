# SPDX-License-Identifier: MIT

import logging
from typing import Any, cast

import pendulum

from itinerary import time
from itinerary.client.api import (
    MALFORMED_PAYLOAD_ERRORS,
    ApiClient,
    malformed_payload_error,
)
from itinerary.model.activity import Activity, DayBucket

logger = logging.getLogger(__name__)


class ActivityClient:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def create(self, trip_id: str, occurs_at: pendulum.DateTime, title: str) -> str:
        body = self.api.post(
            f"/trips/{trip_id}/activities",
            {"occurs_at": time.datetime_to_iso_str(occurs_at), "title": title},
        )
        activity_id = str(body.get("activityId", ""))
        logger.info("created activity %s on trip %s", activity_id, trip_id)
        return activity_id

    def get_by_trip_id(self, trip_id: str) -> list[DayBucket]:
        """Day buckets exactly as grouped and ordered by the server."""
        body = self.api.get(f"/trips/{trip_id}/activities")
        try:
            return [
                convert_day_bucket_for_deserialization(bucket)
                for bucket in body.get("activities", [])
            ]
        except MALFORMED_PAYLOAD_ERRORS as e:
            raise malformed_payload_error("activity list", e) from e


def convert_day_bucket_for_deserialization(bucket: dict[str, Any]) -> DayBucket:
    # the server sends the day as midnight UTC; keep its calendar date
    date = time.datetime_from_str(bucket["date"]).in_tz("UTC").date()
    activities = [
        convert_activity_for_deserialization(activity)
        for activity in bucket.get("activities", [])
    ]
    return {"date": date, "activities": activities}


def convert_activity_for_deserialization(activity: dict[str, Any]) -> Activity:
    deserializable_activity = dict(activity)
    deserializable_activity["id"] = str(deserializable_activity["id"])
    deserializable_activity["occurs_at"] = time.datetime_from_str(
        deserializable_activity["occurs_at"]
    )
    return cast(Activity, deserializable_activity)
