from datetime import date, timedelta

from tracker.crud import create_habit, get_day_view, toggle_habit
from tests.conftest import at


def _view(client, email, day):
    resp = client.post(f"/day?date={day}", json={"userEmail": email})
    assert resp.status_code == 200
    return resp.json()


def test_alice_run_scenario(client, db, clock, alice):
    run = create_habit(db, clock, "Run", [1, 3, 5], "alice@x.com")

    view = _view(client, "alice@x.com", "2024-01-01")
    assert [h["title"] for h in view["possibleHabits"]] == ["Run"]
    assert view["completedHabits"] == []

    assert client.patch(f"/habits/{run.id}/toggle").json()["completed"] is True
    assert _view(client, "alice@x.com", "2024-01-01")["completedHabits"] == [run.id]

    assert client.patch(f"/habits/{run.id}/toggle").json()["completed"] is False
    assert _view(client, "alice@x.com", "2024-01-01")["completedHabits"] == []


def test_unscheduled_weekday_has_no_possible_habits(client, db, clock, alice):
    run = create_habit(db, clock, "Run", [1, 3, 5], "alice@x.com")
    clock.set(at(2024, 1, 2))
    toggle_habit(db, clock, run.id)

    view = _view(client, "alice@x.com", "2024-01-02")
    assert view["possibleHabits"] == []
    assert view["completedHabits"] == [run.id]


def test_daily_habit_possible_only_from_creation_date(db, clock, alice):
    habit = create_habit(db, clock, "Stretch", range(7), "alice@x.com")
    start = date(2024, 1, 1)

    for offset in range(-7, 15):
        day = start + timedelta(days=offset)
        possible = [h.id for h in get_day_view(db, clock, "alice@x.com", day)["possible_habits"]]
        if day >= start:
            assert possible == [habit.id]
        else:
            assert possible == []


def test_instant_is_truncated_in_reference_timezone(db, alice):
    from tests.conftest import FrozenClock

    clock = FrozenClock(at(2024, 1, 2, hour=15), tz_name="America/Sao_Paulo")
    habit = create_habit(db, clock, "Tuesday only", [2], "alice@x.com")

    # 01:00 UTC on Wednesday is still Tuesday evening in Sao Paulo
    view = get_day_view(db, clock, "alice@x.com", at(2024, 1, 3, hour=1))
    assert view["date"] == date(2024, 1, 2)
    assert [h.id for h in view["possible_habits"]] == [habit.id]


def test_unknown_user_gets_empty_view(client, db, clock, alice):
    run = create_habit(db, clock, "Run", [1], "alice@x.com")
    toggle_habit(db, clock, run.id)
    create_habit(db, clock, "Orphan", [1], "ghost@x.com")

    assert _view(client, "ghost@x.com", "2024-01-01") == {"possibleHabits": [], "completedHabits": []}


def test_completed_habits_are_restricted_to_the_user(client, db, clock, alice, bob):
    run = create_habit(db, clock, "Run", [1], "alice@x.com")
    swim = create_habit(db, clock, "Swim", [1], "bob@x.com")
    toggle_habit(db, clock, run.id)
    toggle_habit(db, clock, swim.id)

    assert _view(client, "alice@x.com", "2024-01-01")["completedHabits"] == [run.id]
    assert _view(client, "bob@x.com", "2024-01-01")["completedHabits"] == [swim.id]


def test_day_without_ledger_row_is_not_an_error(client, db, clock, alice):
    create_habit(db, clock, "Run", [1], "alice@x.com")
    view = _view(client, "alice@x.com", "2024-01-08")
    assert len(view["possibleHabits"]) == 1
    assert view["completedHabits"] == []


def test_day_view_requires_valid_date(client, alice):
    resp = client.post("/day?date=not-a-date", json={"userEmail": "alice@x.com"})
    assert resp.status_code == 422
    resp = client.post("/day", json={"userEmail": "alice@x.com"})
    assert resp.status_code == 422


def test_timestamp_query_is_truncated_in_reference_timezone(client, db, alice):
    from api_main import app
    from tests.conftest import FrozenClock
    from tracker.api.deps import get_clock

    sao_paulo = FrozenClock(at(2024, 1, 1, hour=15), tz_name="America/Sao_Paulo")
    app.dependency_overrides[get_clock] = lambda: sao_paulo
    monday = create_habit(db, sao_paulo, "Monday only", [1], "alice@x.com")

    # 02:00 UTC on Tuesday is still Monday evening in Sao Paulo
    view = _view(client, "alice@x.com", "2024-01-02T02:00:00.000Z")
    assert [h["id"] for h in view["possibleHabits"]] == [monday.id]

    assert _view(client, "alice@x.com", "2024-01-02")["possibleHabits"] == []
