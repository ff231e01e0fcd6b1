from tracker.crud.days import (
    HabitNotFound,
    HabitNotOwned,
    HabitNotScheduled,
    ToggleRejected,
    get_day,
    get_day_view,
    get_or_create_day,
    toggle_habit,
)
from tracker.crud.habits import create_habit, get_habit, list_user_habits
from tracker.crud.summary import get_summary
from tracker.crud.user import (
    generate_unique_username,
    get_profile,
    get_user_by_email,
    get_user_by_id,
    get_user_by_username,
    upsert_google_user,
)

__all__ = [
    "get_user_by_email",
    "get_user_by_id",
    "get_user_by_username",
    "generate_unique_username",
    "upsert_google_user",
    "get_profile",
    "create_habit",
    "get_habit",
    "list_user_habits",
    "get_day",
    "get_or_create_day",
    "get_day_view",
    "toggle_habit",
    "get_summary",
    "ToggleRejected",
    "HabitNotFound",
    "HabitNotOwned",
    "HabitNotScheduled",
]
