# SPDX-License-Identifier: MIT

import logging
from typing import cast

from itinerary.client.api import (
    MALFORMED_PAYLOAD_ERRORS,
    ApiClient,
    malformed_payload_error,
)
from itinerary.model.trip import TripLink

logger = logging.getLogger(__name__)


class LinkClient:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def create(self, trip_id: str, title: str, url: str) -> str:
        body = self.api.post(f"/trips/{trip_id}/links", {"title": title, "url": url})
        link_id = str(body.get("linkId", ""))
        logger.info("created link %s on trip %s", link_id, trip_id)
        return link_id

    def get_by_trip_id(self, trip_id: str) -> list[TripLink]:
        body = self.api.get(f"/trips/{trip_id}/links")
        try:
            return [
                cast(
                    TripLink,
                    {
                        "id": str(link["id"]),
                        "title": link["title"],
                        "url": link["url"],
                    },
                )
                for link in body.get("links", [])
            ]
        except MALFORMED_PAYLOAD_ERRORS as e:
            raise malformed_payload_error("link list", e) from e
