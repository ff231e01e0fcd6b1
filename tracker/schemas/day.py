from datetime import date
from typing import List

from pydantic import BaseModel

from tracker.schemas.habit import HabitOut


class UserEmailIn(BaseModel):
    userEmail: str


class DayViewOut(BaseModel):
    possibleHabits: List[HabitOut]
    completedHabits: List[str]


class ToggleOut(BaseModel):
    id: str
    completed: bool


class SummaryRowOut(BaseModel):
    id: str
    date: date
    completed: int
    amount: int
