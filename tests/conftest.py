"""Shared test fixtures.

Every repository fixture is backed by a SQLite file under pytest's tmp_path,
so tests never touch the user's real schedule.
"""

import pytest
from typer.testing import CliRunner

from scheduler import state as app_state
from scheduler.repository.event import EVENT_REPO, EventRepository
from scheduler.template.event import get_event_template
from scheduler.view import state as view_state


def make_event(date, name, time=None, note=None, complete=False):
    event = get_event_template()
    event["date"] = date
    event["time"] = time
    event["name"] = name
    if note is not None:
        event["note"] = note
    event["complete"] = complete
    return event


@pytest.fixture(autouse=True)
def reset_state():
    """Context variables outlive a single test; put them back to defaults."""
    view_state.set_show_header(True)
    app_state.set_default_sort(None)
    yield
    view_state.set_show_header(True)
    app_state.set_default_sort(None)


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def tmp_db_path(tmp_path):
    return tmp_path / "schedule.db"


@pytest.fixture
def event_repo(tmp_db_path):
    repository = EventRepository(tmp_db_path)
    yield repository
    repository.close()


@pytest.fixture
def seeded_repo(event_repo):
    """The two-event example plus a few rows on other dates and times."""
    event_repo.save_new_event(make_event("2024-03-01", "A"))
    event_repo.save_new_event(make_event("2024-03-01", "B", complete=True))
    event_repo.save_new_event(
        make_event("2024-03-02", "C", time="09:00:00", note="dentist")
    )
    event_repo.save_new_event(
        make_event("2024-03-02", "D", time="17:30:00", note="dentist", complete=True)
    )
    event_repo.save_new_event(make_event("2024-04-10", "E", time="09:00:00"))
    return event_repo


@pytest.fixture
def cli_repo(tmp_db_path):
    """Bind the application-wide repository to a temporary database."""
    EVENT_REPO.open(tmp_db_path)
    yield EVENT_REPO
    EVENT_REPO.close()


@pytest.fixture
def runner():
    return CliRunner()
