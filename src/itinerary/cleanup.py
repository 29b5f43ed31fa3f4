# SPDX-License-Identifier: MIT

import atexit

from itinerary.repository.active_trip import ACTIVE_TRIP_REPO
from itinerary.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ACTIVE_TRIP_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
