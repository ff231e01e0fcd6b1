from tracker.models.base import Base
from tracker.models.day import Day, DayHabit
from tracker.models.habit import Habit, HabitWeekDay
from tracker.models.user import User

__all__ = [
    "Base",
    "User",
    "Habit",
    "HabitWeekDay",
    "Day",
    "DayHabit",
]
