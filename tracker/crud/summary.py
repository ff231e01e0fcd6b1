from typing import Any, Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tracker.crud.user import get_user_by_email
from tracker.models import Day, DayHabit, Habit
from tracker.schedule import is_possible


def get_summary(db: Session, user_email: str) -> List[Dict[str, Any]]:
    """Per active day of the user: habits completed and habits possible that day.

    Days where the user completed nothing are left out. Rows come sorted by date.
    """
    user = get_user_by_email(db, user_email)
    if not user:
        return []

    completed_rows = db.execute(
        select(Day.id, Day.date, func.count(DayHabit.id))
        .join(DayHabit, DayHabit.day_id == Day.id)
        .join(Habit, Habit.id == DayHabit.habit_id)
        .where(Habit.user_id == user.id)
        .group_by(Day.id, Day.date)
        .order_by(Day.date)
    ).all()
    if not completed_rows:
        return []

    schedules = [
        (habit.created_at, habit.week_day_numbers)
        for habit in db.scalars(select(Habit).where(Habit.user_id == user.id))
    ]

    summary: List[Dict[str, Any]] = []
    for day_id, day_date, completed in completed_rows:
        amount = sum(1 for created_at, week_days in schedules if is_possible(created_at, week_days, day_date))
        summary.append({"id": day_id, "date": day_date, "completed": int(completed), "amount": amount})
    return summary
