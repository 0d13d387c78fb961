# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from scheduler import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        defaults = configuration.get_default_configuration()

        if loaded is None:
            self._config = defaults
            return

        # Back-fill keys added after the config file was first written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
        self._config = loaded

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def reset(self) -> None:
        self._config = None


CONFIGURATION_REPO = ConfigurationRepository()
