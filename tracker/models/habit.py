from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tracker.models.base import Base, new_id


class Habit(Base):
    __tablename__ = "habits"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[date] = mapped_column(Date, index=True)
    user_id: Mapped[Optional[str]] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True)

    week_days: Mapped[list["HabitWeekDay"]] = relationship(
        back_populates="habit",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="HabitWeekDay.week_day",
    )

    @property
    def week_day_numbers(self) -> list[int]:
        return sorted(item.week_day for item in self.week_days)


class HabitWeekDay(Base):
    __tablename__ = "habit_week_days"
    __table_args__ = (UniqueConstraint("habit_id", "week_day", name="uq_habit_week_day"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    habit_id: Mapped[str] = mapped_column(ForeignKey("habits.id", ondelete="CASCADE"), index=True)
    week_day: Mapped[int] = mapped_column(Integer, index=True)

    habit: Mapped[Habit] = relationship(back_populates="week_days")
