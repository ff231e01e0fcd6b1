from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from tracker.api.deps import get_clock, get_db
from tracker.config import settings
from tracker.crud import (
    HabitNotFound,
    HabitNotOwned,
    HabitNotScheduled,
    create_habit,
    get_day_view,
    get_profile,
    get_summary,
    list_user_habits,
    toggle_habit,
    upsert_google_user,
)
from tracker.models import Habit
from tracker.schedule import Clock
from tracker.schemas import (
    DayViewOut,
    GoogleUserIn,
    HabitCreateIn,
    ProfileOut,
    SummaryRowOut,
    ToggleOut,
    UserEmailIn,
    UsernameIn,
    UserOut,
)

router = APIRouter()


def _habit_out(habit: Habit) -> Dict[str, Any]:
    return {
        "id": habit.id,
        "title": habit.title,
        "created_at": habit.created_at,
        "userId": habit.user_id,
        "weekDays": habit.week_day_numbers,
    }


@router.post("/habits")
def user_habits(payload: UsernameIn, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return {"userHabits": [_habit_out(habit) for habit in list_user_habits(db, payload.username)]}


@router.post("/habits/new", status_code=201)
def new_habit(
    payload: HabitCreateIn,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> Dict[str, str]:
    habit = create_habit(db, clock, payload.title, payload.weekDays, payload.email)
    return {"id": habit.id}


@router.post("/day", response_model=DayViewOut)
def day_view(
    payload: UserEmailIn,
    day: Union[datetime, date] = Query(..., alias="date"),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    view = get_day_view(db, clock, payload.userEmail, day)
    return {
        "possibleHabits": [_habit_out(habit) for habit in view["possible_habits"]],
        "completedHabits": view["completed_habits"],
    }


@router.patch("/habits/{habit_id}/toggle", response_model=ToggleOut)
def toggle(
    habit_id: UUID,
    x_user_email: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    try:
        completed = toggle_habit(
            db,
            clock,
            str(habit_id),
            caller_email=x_user_email,
            require_owner=settings.REQUIRE_HABIT_OWNER,
            require_scheduled=settings.REQUIRE_SCHEDULED_TOGGLE,
        )
    except HabitNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except HabitNotOwned as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except HabitNotScheduled as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return {"id": str(habit_id), "completed": completed}


@router.post("/summary", response_model=List[SummaryRowOut])
def summary(payload: UserEmailIn, db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return get_summary(db, payload.userEmail)


@router.post("/users", response_model=UserOut)
def users(payload: GoogleUserIn, db: Session = Depends(get_db)) -> Any:
    return upsert_google_user(db, payload.id, payload.email, payload.name, payload.picture)


@router.post("/users/{username}/profile", response_model=Optional[ProfileOut])
def profile(username: str, payload: UsernameIn, db: Session = Depends(get_db)) -> Optional[Dict[str, Any]]:
    return get_profile(db, payload.username)
