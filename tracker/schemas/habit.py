from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from tracker.schedule import WEEK_DAYS


class UsernameIn(BaseModel):
    username: str


class HabitCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    weekDays: List[StrictInt]
    email: str

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("weekDays")
    @classmethod
    def week_days_in_range(cls, value: List[int]) -> List[int]:
        if any(day not in WEEK_DAYS for day in value):
            raise ValueError("week days must be integers between 0 and 6")
        if len(set(value)) != len(value):
            raise ValueError("week days must be unique")
        return value


class HabitOut(BaseModel):
    id: str
    title: str
    created_at: date
    userId: Optional[str] = None
    weekDays: List[int] = []
