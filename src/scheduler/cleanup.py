# SPDX-License-Identifier: MIT

import atexit

from scheduler.repository.event import EVENT_REPO


def close_storage() -> None:
    EVENT_REPO.close()


def register_cleanup() -> None:
    atexit.register(close_storage)
