import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.crud.habits import get_habit
from tracker.crud.user import get_user_by_email
from tracker.models import Day, DayHabit, Habit, HabitWeekDay
from tracker.schedule import Clock, is_possible, week_day_index

logger = logging.getLogger(__name__)


class ToggleRejected(Exception):
    def __init__(self, habit_id: str, message: str) -> None:
        super().__init__(message)
        self.habit_id = habit_id


class HabitNotFound(ToggleRejected):
    def __init__(self, habit_id: str) -> None:
        super().__init__(habit_id, "habit not found")


class HabitNotOwned(ToggleRejected):
    def __init__(self, habit_id: str) -> None:
        super().__init__(habit_id, "habit belongs to another user")


class HabitNotScheduled(ToggleRejected):
    def __init__(self, habit_id: str) -> None:
        super().__init__(habit_id, "habit is not scheduled for today")


def get_day(db: Session, day_date: date) -> Optional[Day]:
    return db.scalar(select(Day).where(Day.date == day_date))


def get_or_create_day(db: Session, day_date: date) -> Day:
    """Return the ledger row for ``day_date``, inserting it when missing.

    Must be the first write of the current transaction: losing the insert race
    to a concurrent request rolls the session back before re-reading the row.
    """
    day = get_day(db, day_date)
    if day:
        return day

    day = Day(date=day_date)
    db.add(day)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        logger.info("Day %s was created concurrently, reusing it", day_date.isoformat())
        day = get_day(db, day_date)
        if day is None:
            raise
    return day


def get_day_view(db: Session, clock: Clock, user_email: str, on_date: Union[date, datetime]) -> Dict[str, Any]:
    day_date = clock.start_of_day(on_date)
    view: Dict[str, Any] = {"date": day_date, "possible_habits": [], "completed_habits": []}

    user = get_user_by_email(db, user_email)
    if not user:
        return view

    view["possible_habits"] = list(
        db.scalars(
            select(Habit)
            .join(HabitWeekDay, HabitWeekDay.habit_id == Habit.id)
            .where(
                and_(
                    Habit.user_id == user.id,
                    Habit.created_at <= day_date,
                    HabitWeekDay.week_day == week_day_index(day_date),
                )
            )
            .order_by(Habit.created_at, Habit.title)
        )
    )
    view["completed_habits"] = list(
        db.scalars(
            select(DayHabit.habit_id)
            .join(Day, Day.id == DayHabit.day_id)
            .join(Habit, Habit.id == DayHabit.habit_id)
            .where(and_(Day.date == day_date, Habit.user_id == user.id))
        )
    )
    return view


def toggle_habit(
    db: Session,
    clock: Clock,
    habit_id: str,
    caller_email: Optional[str] = None,
    require_owner: bool = False,
    require_scheduled: bool = False,
) -> bool:
    """Flip today's completion of a habit and return whether it is now complete."""
    habit = get_habit(db, habit_id)
    if habit is None:
        raise HabitNotFound(habit_id)

    today = clock.today()
    if require_owner:
        caller = get_user_by_email(db, caller_email) if caller_email else None
        if caller is None or habit.user_id != caller.id:
            raise HabitNotOwned(habit_id)
    if require_scheduled and not is_possible(habit.created_at, habit.week_day_numbers, today):
        raise HabitNotScheduled(habit_id)

    day = get_or_create_day(db, today)
    existing_id = db.scalar(
        select(DayHabit.id).where(and_(DayHabit.day_id == day.id, DayHabit.habit_id == habit_id))
    )
    if existing_id:
        # zero affected rows means a concurrent toggle already removed it
        db.execute(delete(DayHabit).where(DayHabit.id == existing_id))
        completed = False
    else:
        db.add(DayHabit(day_id=day.id, habit_id=habit_id))
        try:
            db.flush()
        except IntegrityError:
            db.rollback()
            logger.info("Habit %s was completed concurrently on %s", habit_id, today.isoformat())
            return True
        completed = True

    db.commit()
    logger.info("Habit %s marked %s on %s", habit_id, "complete" if completed else "incomplete", today.isoformat())
    return completed
