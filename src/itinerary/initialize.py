# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from itinerary import configuration
from itinerary.logs import configure_logging
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.template.active_trip import get_active_trip_template

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    logger.debug("config loaded from %s", configuration.APP_CONFIG_PATH)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_config()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_ACTIVE_TRIP_PATH.is_file():
        configuration.DATA_ACTIVE_TRIP_PATH.touch()
        configuration.DATA_ACTIVE_TRIP_PATH.write_text(
            dump(get_active_trip_template(), Dumper=Dumper)
        )
