from datetime import date, datetime, timezone

import pytest

from tracker.schedule import Clock, is_possible, week_day_index


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 1, 7), 0),
        (date(2024, 1, 1), 1),
        (date(2024, 1, 2), 2),
        (date(2024, 1, 6), 6),
    ],
)
def test_week_day_index_starts_on_sunday(day, expected):
    assert week_day_index(day) == expected


def test_is_possible_requires_creation_and_weekday():
    created = date(2024, 1, 1)
    assert is_possible(created, [1, 3, 5], date(2024, 1, 1))
    assert is_possible(created, [1, 3, 5], date(2024, 1, 3))
    assert not is_possible(created, [1, 3, 5], date(2024, 1, 2))
    assert not is_possible(created, [0, 1, 2, 3, 4, 5, 6], date(2023, 12, 31))
    assert not is_possible(created, [], date(2024, 1, 1))


def test_clock_today_uses_reference_timezone():
    late_utc = datetime(2024, 1, 2, 2, 0, tzinfo=timezone.utc)
    assert Clock("UTC", now=lambda: late_utc).today() == date(2024, 1, 2)
    assert Clock("America/Sao_Paulo", now=lambda: late_utc).today() == date(2024, 1, 1)


def test_start_of_day_truncates_instants():
    clock = Clock("America/Sao_Paulo")
    assert clock.start_of_day(date(2024, 1, 5)) == date(2024, 1, 5)
    assert clock.start_of_day(datetime(2024, 1, 5, 1, 30, tzinfo=timezone.utc)) == date(2024, 1, 4)
    # naive values are already local wall-clock times
    assert clock.start_of_day(datetime(2024, 1, 5, 1, 30)) == date(2024, 1, 5)
    assert clock.start_of_day(datetime(2024, 1, 5)) == date(2024, 1, 5)
