# SPDX-License-Identifier: MIT

from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from itinerary import configuration
from itinerary.model.active_trip import ActiveTrip
from itinerary.template.active_trip import get_active_trip_template


class ActiveTripRepository:
    """Keeps the id of the trip the user is currently planning."""

    def __init__(self) -> None:
        self._active_trip: Optional[ActiveTrip] = None
        self.is_dirty = False

    @property
    def active_trip(self) -> ActiveTrip:
        if self._active_trip is None:
            self.__load_data()
        if self._active_trip is None:
            raise ValueError()
        return self._active_trip

    def __load_data(self) -> None:
        if not configuration.DATA_ACTIVE_TRIP_PATH.is_file():
            self._active_trip = get_active_trip_template()
            return
        self._active_trip = load(
            configuration.DATA_ACTIVE_TRIP_PATH.read_text(), Loader=Loader
        )
        if self._active_trip is None:
            self._active_trip = get_active_trip_template()

    def __save_data(self, active_trip: ActiveTrip) -> None:
        configuration.DATA_ACTIVE_TRIP_PATH.write_text(dump(active_trip, Dumper=Dumper))

    def flush(self) -> None:
        if self._active_trip is not None and self.is_dirty:
            self.__save_data(self._active_trip)
            self.is_dirty = False

    def get(self) -> Optional[str]:
        return self.active_trip["trip_id"]

    def save(self, trip_id: str) -> None:
        self.is_dirty = True
        self.active_trip["trip_id"] = trip_id

    def remove(self) -> None:
        self.is_dirty = True
        self.active_trip["trip_id"] = None


ACTIVE_TRIP_REPO = ActiveTripRepository()
