import datetime

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tracker.models.base import Base, new_id


class Day(Base):
    __tablename__ = "days"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    date: Mapped[datetime.date] = mapped_column(Date, unique=True, index=True)

    day_habits: Mapped[list["DayHabit"]] = relationship(back_populates="day", cascade="all, delete-orphan")


class DayHabit(Base):
    __tablename__ = "day_habits"
    __table_args__ = (UniqueConstraint("day_id", "habit_id", name="uq_day_habit"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    day_id: Mapped[str] = mapped_column(ForeignKey("days.id", ondelete="CASCADE"), index=True)
    habit_id: Mapped[str] = mapped_column(ForeignKey("habits.id", ondelete="CASCADE"), index=True)

    day: Mapped[Day] = relationship(back_populates="day_habits")
