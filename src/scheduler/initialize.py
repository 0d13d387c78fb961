# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from scheduler import configuration
from scheduler import state as app_state
from scheduler.error import StorageUnavailableError
from scheduler.query.sort_by import sort_by_from_str
from scheduler.repository.configuration import CONFIGURATION_REPO
from scheduler.view import state as view_state

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING

logger = logging.getLogger(__name__)


def initialize() -> None:
    try:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        __ensure_config_files()
        configuration.load_data_path_configuration()
        configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageUnavailableError(
            f"cannot create scheduler directories: {e}"
        ) from e

    config = CONFIGURATION_REPO.get_config()

    level = log_level_from_str(config["log_level"])
    logging.basicConfig(
        level=level if level is not None else DEFAULT_LOG_LEVEL, format=LOG_FORMAT
    )
    if level is None:
        logger.warning(
            "unknown log_level %r in %s, using WARNING",
            config["log_level"],
            configuration.APP_CONFIG_PATH,
        )
    view_state.set_show_header(config["show_header"])
    if config["default_sort"] is not None:
        app_state.set_default_sort(sort_by_from_str(config["default_sort"]))


def log_level_from_str(name: object) -> Optional[int]:
    if not isinstance(name, str):
        return None
    return logging.getLevelNamesMapping().get(name.upper())


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
