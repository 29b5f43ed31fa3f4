# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "itinerary"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ACTIVE_TRIP_PATH: Path = DATA_PATH / "active_trip.yaml"

ClockFormat = Literal["12h", "24h"]

DEFAULT_API_URL = "http://localhost:3333"
DEFAULT_LOCALE = "pt-br"
DEFAULT_CLOCK_FORMAT: ClockFormat = "12h"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


class Configuration(TypedDict):
    api_url: str
    locale: str
    clock_format: ClockFormat
    request_timeout_seconds: float
    log_level: str
    data_path: Optional[str]


def get_default_config() -> Configuration:
    return {
        "api_url": DEFAULT_API_URL,
        "locale": DEFAULT_LOCALE,
        "clock_format": DEFAULT_CLOCK_FORMAT,
        "request_timeout_seconds": DEFAULT_REQUEST_TIMEOUT_SECONDS,
        "log_level": DEFAULT_LOG_LEVEL,
        "data_path": None,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    global DATA_PATH, DATA_ACTIVE_TRIP_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_ACTIVE_TRIP_PATH = DATA_PATH / "active_trip.yaml"
