from tracker.schemas.day import DayViewOut, SummaryRowOut, ToggleOut, UserEmailIn
from tracker.schemas.habit import HabitCreateIn, HabitOut, UsernameIn
from tracker.schemas.user import GoogleUserIn, ProfileOut, UserOut

__all__ = [
    "UsernameIn",
    "HabitCreateIn",
    "HabitOut",
    "UserEmailIn",
    "DayViewOut",
    "ToggleOut",
    "SummaryRowOut",
    "GoogleUserIn",
    "UserOut",
    "ProfileOut",
]
