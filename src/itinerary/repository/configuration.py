# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from itinerary import configuration
from itinerary.configuration import ClockFormat


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: fill in any setting added after the file was written
        for key, value in configuration.get_default_config().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        api_url: Optional[str] = None,
        locale: Optional[str] = None,
        clock_format: Optional[ClockFormat] = None,
        request_timeout_seconds: Optional[float] = None,
        log_level: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if api_url is not None:
            self.config["api_url"] = api_url.rstrip("/")
        if locale is not None:
            self.config["locale"] = locale
        if clock_format is not None:
            self.config["clock_format"] = clock_format
        if request_timeout_seconds is not None:
            self.config["request_timeout_seconds"] = request_timeout_seconds
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
