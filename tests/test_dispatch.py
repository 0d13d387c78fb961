"""Tests for scheduler.dispatch — one store operation per command."""

import pendulum

from scheduler import state as app_state
from scheduler import time as scheduler_time
from scheduler.dispatch import dispatch
from scheduler.model.command import CommandKind
from scheduler.query.sort_by import SortBy
from scheduler.template.criteria import get_criteria_template
from scheduler.view import state as view_state


class CountingRepository:
    """Wraps a repository and counts the calls made through it."""

    def __init__(self, repository):
        self.repository = repository
        self.calls = []

    def __getattr__(self, name):
        attribute = getattr(self.repository, name)
        if callable(attribute):

            def counted(*args, **kwargs):
                self.calls.append(name)
                return attribute(*args, **kwargs)

            return counted
        return attribute


class TestDispatch:
    def test_event_show_is_one_query(self, seeded_repo, capsys):
        repository = CountingRepository(seeded_repo)
        dispatch(
            CommandKind.EVENT_SHOW,
            {"criteria": get_criteria_template(complete=True)},
            repository,
        )
        assert repository.calls == ["query_events"]
        output = capsys.readouterr().out
        assert " B " in output
        assert " D " in output

    def test_remove_without_criteria_never_reaches_the_store(self, seeded_repo, capsys):
        repository = CountingRepository(seeded_repo)
        dispatch(
            CommandKind.EVENT_REMOVE,
            {"criteria": get_criteria_template()},
            repository,
        )
        assert repository.calls == []
        assert "nothing changed" in capsys.readouterr().out
        assert seeded_repo.count_events() == 5

    def test_update_without_criteria_never_reaches_the_store(self, seeded_repo):
        repository = CountingRepository(seeded_repo)
        dispatch(
            CommandKind.EVENT_UPDATE,
            {"criteria": get_criteria_template(), "fields": {"note": "x"}},
            repository,
        )
        assert repository.calls == []

    def test_show_calendar_queries_each_day(self, seeded_repo):
        repository = CountingRepository(seeded_repo)
        dispatch(CommandKind.SHOW_CALENDAR, {"prev": None, "next": None}, repository)
        assert repository.calls == ["query_events"] * pendulum.today().days_in_month

    def test_calendar_heading_and_days_share_one_month(
        self, seeded_repo, monkeypatch, capsys
    ):
        dates = iter([pendulum.date(2024, 3, 31), pendulum.date(2024, 4, 1)])
        monkeypatch.setattr(scheduler_time, "today", lambda: next(dates))
        dispatch(CommandKind.SHOW_CALENDAR, {"prev": None, "next": None}, seeded_repo)
        output = capsys.readouterr().out
        assert "March 2024" in output
        assert "Date: 2024-03-31" in output
        assert "2024-04-" not in output

    def test_filtered_listings_hide_ids(self, seeded_repo, capsys):
        dispatch(
            CommandKind.EVENT_SHOW,
            {"criteria": get_criteria_template(date="2024-03-02")},
            seeded_repo,
        )
        dispatch(
            CommandKind.SHOW_DATE, {"date": "2024-03-02", "time": None}, seeded_repo
        )
        output = capsys.readouterr().out
        assert " C " in output
        assert " id " not in output

    def test_list_shows_ids(self, seeded_repo, capsys):
        dispatch(
            CommandKind.LIST,
            {"sort_by": None, "descending": False, "limit": None},
            seeded_repo,
        )
        assert " id " in capsys.readouterr().out

    def test_list_uses_default_sort(self, seeded_repo, capsys):
        view_state.set_show_header(False)
        app_state.set_default_sort(SortBy.NAME)
        seeded_repo.update_events(get_criteria_template(name="A"), {"name": "Z"})
        dispatch(
            CommandKind.LIST,
            {"sort_by": None, "descending": False, "limit": None},
            seeded_repo,
        )
        output = capsys.readouterr().out
        assert output.index(" B ") < output.index(" Z ")

    def test_complete_by_date(self, seeded_repo):
        dispatch(CommandKind.COMPLETE_BY_DATE, {"date": "2024-03-02"}, seeded_repo)
        events = seeded_repo.query_events(get_criteria_template(date="2024-03-02"))
        assert all(event["complete"] for event in events)

    def test_ordinal_selects_by_name(self, seeded_repo):
        dispatch(
            CommandKind.EVENT_COMPLETE,
            {"criteria": get_criteria_template(), "ordinal": 3},
            seeded_repo,
        )
        completed = seeded_repo.query_events(get_criteria_template(complete=True))
        assert sorted(event["name"] for event in completed) == ["B", "C", "D"]
