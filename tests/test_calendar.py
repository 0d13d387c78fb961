"""Tests for scheduler.service.calendar — month window and per-day listing."""

import pendulum
import pytest

from scheduler.service.calendar import calendar_days, calendar_listing, calendar_month


class TestCalendarMonth:
    def test_current_month(self):
        assert calendar_month(today=pendulum.date(2024, 2, 15)) == pendulum.date(2024, 2, 1)

    def test_next(self):
        assert calendar_month(next=2, today=pendulum.date(2024, 11, 30)) == pendulum.date(
            2025, 1, 1
        )

    def test_prev(self):
        assert calendar_month(prev=3, today=pendulum.date(2024, 2, 29)) == pendulum.date(
            2023, 11, 1
        )

    def test_prev_and_next_compose(self):
        today = pendulum.date(2024, 3, 31)
        assert calendar_month(prev=1, next=1, today=today) == pendulum.date(2024, 3, 1)
        assert calendar_month(prev=1, next=3, today=today) == pendulum.date(2024, 5, 1)

    def test_next_overflow_falls_back_to_current_month(self):
        today = pendulum.date(9999, 12, 15)
        assert calendar_month(next=1, today=today) == pendulum.date(9999, 12, 1)

    def test_prev_overflow_falls_back_to_current_month(self):
        today = pendulum.date(1, 1, 15)
        assert calendar_month(prev=1, today=today) == pendulum.date(1, 1, 1)

    def test_prev_overflow_discards_next_offset(self):
        today = pendulum.date(1, 1, 15)
        assert calendar_month(prev=5, next=1, today=today) == pendulum.date(1, 1, 1)

    def test_defaults_to_today(self):
        assert calendar_month() == pendulum.today().date().start_of("month")


class TestCalendarDays:
    @pytest.mark.parametrize(
        "today, count",
        [
            (pendulum.date(2024, 2, 10), 29),
            (pendulum.date(2023, 2, 10), 28),
            (pendulum.date(2024, 4, 30), 30),
            (pendulum.date(2024, 12, 1), 31),
        ],
    )
    def test_every_day_of_the_month(self, today, count):
        days = calendar_days(calendar_month(today=today))
        assert len(days) == count
        assert days[0] == today.start_of("month")
        assert all(day.month == today.month for day in days)
        assert [day.day for day in days] == list(range(1, count + 1))

    def test_current_month_without_offsets(self):
        today = pendulum.today().date()
        days = calendar_days(calendar_month(prev=0, next=0))
        assert len(days) == today.days_in_month
        assert days[0] == today.start_of("month")


class TestCalendarListing:
    def test_one_block_per_day(self, seeded_repo):
        listing = calendar_listing(seeded_repo, pendulum.date(2024, 3, 1))
        assert len(listing) == 31
        assert [day["date"] for day in listing][:3] == [
            "2024-03-01",
            "2024-03-02",
            "2024-03-03",
        ]

    def test_blocks_hold_that_dates_events(self, seeded_repo):
        listing = calendar_listing(seeded_repo, pendulum.date(2024, 3, 1))
        first, second = listing[0], listing[1]
        assert [item["event"]["name"] for item in first["events"]] == ["A", "B"]
        assert [item["event"]["name"] for item in second["events"]] == ["C", "D"]
        assert [item["ordinal"] for item in second["events"]] == [1, 2]
        assert all(day["events"] == [] for day in listing[2:])

    def test_next_month(self, seeded_repo):
        listing = calendar_listing(
            seeded_repo, calendar_month(next=1, today=pendulum.date(2024, 3, 20))
        )
        assert len(listing) == 30
        populated = [day for day in listing if day["events"]]
        assert [day["date"] for day in populated] == ["2024-04-10"]
