# SPDX-License-Identifier: MIT

from itinerary.client.api import (
    MALFORMED_PAYLOAD_ERRORS,
    ApiClient,
    malformed_payload_error,
)
from itinerary.model.trip import Participant


class ParticipantClient:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def get_by_trip_id(self, trip_id: str) -> list[Participant]:
        body = self.api.get(f"/trips/{trip_id}/participants")
        participants: list[Participant] = []
        try:
            for participant in body.get("participants", []):
                participants.append(
                    {
                        "id": str(participant["id"]),
                        "name": participant.get("name"),
                        "email": participant["email"],
                        "is_confirmed": bool(participant.get("is_confirmed", False)),
                    }
                )
        except MALFORMED_PAYLOAD_ERRORS as e:
            raise malformed_payload_error("participant list", e) from e
        return participants
