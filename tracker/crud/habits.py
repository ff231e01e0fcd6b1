import logging
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from tracker.crud.user import get_user_by_email
from tracker.models import Habit, HabitWeekDay, User
from tracker.schedule import Clock

logger = logging.getLogger(__name__)


def create_habit(db: Session, clock: Clock, title: str, week_days: Iterable[int], owner_email: str) -> Habit:
    """Store a habit stamped with today's date.

    An unknown owner email leaves the habit without an owner.
    """
    owner = get_user_by_email(db, owner_email)
    habit = Habit(
        title=title,
        created_at=clock.today(),
        user_id=owner.id if owner else None,
        week_days=[HabitWeekDay(week_day=day) for day in sorted(set(week_days))],
    )
    db.add(habit)
    db.commit()
    db.refresh(habit)

    if owner is None:
        logger.warning("Habit %s created without owner, no user with email %s", habit.id, owner_email)
    else:
        logger.info("Habit %s created for user %s", habit.id, owner.id)
    return habit


def get_habit(db: Session, habit_id: str) -> Optional[Habit]:
    return db.get(Habit, habit_id)


def list_user_habits(db: Session, username: str) -> list[Habit]:
    return list(
        db.scalars(
            select(Habit)
            .join(User, User.id == Habit.user_id)
            .where(User.username == username)
            .order_by(Habit.created_at, Habit.title)
        )
    )
