"""Tests for the trip API clients against an httpx mock transport."""

from typing import Any

import httpx
import pendulum
import pytest

from itinerary.client.activity import ActivityClient
from itinerary.client.api import ApiClient, ApiError
from itinerary.client.link import LinkClient
from itinerary.client.participant import ParticipantClient
from itinerary.client.trip import TripClient

from conftest import FakeTripApi


@pytest.fixture
def fake() -> FakeTripApi:
    return FakeTripApi()


@pytest.fixture
def api(fake: FakeTripApi) -> ApiClient:
    return ApiClient("http://trips.test", transport=fake.transport())


class TestApiClient:
    def test_error_status_raises_api_error_with_message(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add("GET", "/trips/nope", {"message": "Trip not found"}, status_code=400)

        with pytest.raises(ApiError, match="Trip not found") as error:
            api.get("/trips/nope")
        assert error.value.status_code == 400

    def test_unknown_route_raises(self, api: ApiClient) -> None:
        with pytest.raises(ApiError) as error:
            api.get("/missing")
        assert error.value.status_code == 404

    def test_transport_failure_raises_api_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = ApiClient("http://trips.test", transport=httpx.MockTransport(refuse))

        with pytest.raises(ApiError, match="could not reach"):
            client.get("/trips/1")

    def test_empty_body_is_an_empty_dict(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add("PUT", "/trips/1", None)

        assert api.put("/trips/1", {}) == {}

    def test_non_object_body_raises(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add("GET", "/list", [1, 2, 3])

        with pytest.raises(ApiError, match="unexpected payload"):
            api.get("/list")


class TestTripClient:
    def test_create_sends_iso_dates_and_returns_the_id(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add("POST", "/trips", {"tripId": "trip-1"})

        trip_id = TripClient(api).create(
            destination="Lisboa",
            starts_at=pendulum.datetime(2024, 3, 5, tz="UTC"),
            ends_at=pendulum.datetime(2024, 3, 10, tz="UTC"),
            emails_to_invite=["ana@example.com"],
        )

        assert trip_id == "trip-1"
        assert fake.sent_json("POST", "/trips") == {
            "destination": "Lisboa",
            "starts_at": "2024-03-05T00:00:00+00:00",
            "ends_at": "2024-03-10T00:00:00+00:00",
            "emails_to_invite": ["ana@example.com"],
        }

    def test_create_without_id_raises(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add("POST", "/trips", {})

        with pytest.raises(ApiError):
            TripClient(api).create(
                "Lisboa",
                pendulum.datetime(2024, 3, 5),
                pendulum.datetime(2024, 3, 10),
                [],
            )

    def test_get_by_id_parses_dates(
        self, fake: FakeTripApi, api: ApiClient, trip_payload: dict[str, Any]
    ) -> None:
        fake.add("GET", "/trips/trip-1", {"trip": trip_payload})

        trip = TripClient(api).get_by_id("trip-1")

        assert trip["id"] == "trip-1"
        assert trip["destination"] == "Florianópolis"
        assert trip["starts_at"] == pendulum.datetime(2024, 3, 5, 12, tz="UTC")
        assert trip["ends_at"] == pendulum.datetime(2024, 3, 10, 12, tz="UTC")
        assert trip["is_confirmed"] is True

    def test_update_sends_start_and_end_in_order(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add("PUT", "/trips/trip-1", None)

        TripClient(api).update(
            "trip-1",
            destination="Lisboa",
            starts_at=pendulum.datetime(2024, 3, 5, tz="UTC"),
            ends_at=pendulum.datetime(2024, 3, 10, tz="UTC"),
        )

        sent = fake.sent_json("PUT", "/trips/trip-1")
        assert sent["starts_at"] == "2024-03-05T00:00:00+00:00"
        assert sent["ends_at"] == "2024-03-10T00:00:00+00:00"


class TestActivityClient:
    def test_get_by_trip_id_keeps_server_grouping(
        self,
        fake: FakeTripApi,
        api: ApiClient,
        activities_payload: dict[str, Any],
    ) -> None:
        fake.add("GET", "/trips/trip-1/activities", activities_payload)

        buckets = ActivityClient(api).get_by_trip_id("trip-1")

        assert [bucket["date"] for bucket in buckets] == [
            pendulum.date(2024, 3, 10),
            pendulum.date(2024, 3, 11),
        ]
        assert [a["id"] for a in buckets[0]["activities"]] == ["a-1", "a-2"]
        assert buckets[0]["activities"][1]["occurs_at"] == pendulum.datetime(
            2024, 3, 10, 15, 30, tz="UTC"
        )
        assert buckets[1]["activities"] == []

    def test_create(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add("POST", "/trips/trip-1/activities", {"activityId": "a-9"})

        activity_id = ActivityClient(api).create(
            "trip-1", pendulum.datetime(2024, 3, 13, 23, tz="UTC"), "Jantar"
        )

        assert activity_id == "a-9"
        assert fake.sent_json("POST", "/trips/trip-1/activities") == {
            "occurs_at": "2024-03-13T23:00:00+00:00",
            "title": "Jantar",
        }


class TestLinkAndParticipantClients:
    def test_links(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add(
            "GET",
            "/trips/trip-1/links",
            {"links": [{"id": 1, "title": "Hotel", "url": "https://hotel.test"}]},
        )
        fake.add("POST", "/trips/trip-1/links", {"linkId": "l-2"})

        links = LinkClient(api).get_by_trip_id("trip-1")
        link_id = LinkClient(api).create("trip-1", "Voo", "https://voo.test")

        assert links == [{"id": "1", "title": "Hotel", "url": "https://hotel.test"}]
        assert link_id == "l-2"
        assert fake.sent_json("POST", "/trips/trip-1/links") == {
            "title": "Voo",
            "url": "https://voo.test",
        }

    def test_participants(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add(
            "GET",
            "/trips/trip-1/participants",
            {
                "participants": [
                    {
                        "id": "p-1",
                        "name": "Ana",
                        "email": "ana@example.com",
                        "is_confirmed": True,
                    },
                    {"id": "p-2", "name": None, "email": "bia@example.com"},
                ]
            },
        )

        participants = ParticipantClient(api).get_by_trip_id("trip-1")

        assert participants == [
            {
                "id": "p-1",
                "name": "Ana",
                "email": "ana@example.com",
                "is_confirmed": True,
            },
            {
                "id": "p-2",
                "name": None,
                "email": "bia@example.com",
                "is_confirmed": False,
            },
        ]


class TestMalformedPayloads:
    def test_trip_without_dates(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add("GET", "/trips/trip-1", {"trip": {"id": "trip-1"}})

        with pytest.raises(ApiError, match="malformed trip"):
            TripClient(api).get_by_id("trip-1")

    def test_trip_with_an_unparsable_date(
        self, fake: FakeTripApi, api: ApiClient, trip_payload: dict[str, Any]
    ) -> None:
        fake.add("GET", "/trips/trip-1", {"trip": {**trip_payload, "ends_at": "soon"}})

        with pytest.raises(ApiError, match="malformed trip"):
            TripClient(api).get_by_id("trip-1")

    def test_activity_without_occurs_at(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add(
            "GET",
            "/trips/trip-1/activities",
            {
                "activities": [
                    {
                        "date": "2024-03-10T00:00:00.000Z",
                        "activities": [{"id": "a-1", "title": "Café"}],
                    }
                ]
            },
        )

        with pytest.raises(ApiError, match="malformed activity list"):
            ActivityClient(api).get_by_trip_id("trip-1")

    def test_link_without_url(self, fake: FakeTripApi, api: ApiClient) -> None:
        fake.add("GET", "/trips/trip-1/links", {"links": [{"id": 1, "title": "Hotel"}]})

        with pytest.raises(ApiError, match="malformed link list"):
            LinkClient(api).get_by_trip_id("trip-1")

    def test_participant_without_email(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add(
            "GET", "/trips/trip-1/participants", {"participants": [{"id": "p-1"}]}
        )

        with pytest.raises(ApiError, match="malformed participant list"):
            ParticipantClient(api).get_by_trip_id("trip-1")

    def test_list_that_is_not_a_list_of_objects(
        self, fake: FakeTripApi, api: ApiClient
    ) -> None:
        fake.add("GET", "/trips/trip-1/links", {"links": ["https://hotel.test"]})

        with pytest.raises(ApiError, match="malformed link list"):
            LinkClient(api).get_by_trip_id("trip-1")
