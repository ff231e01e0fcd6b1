"""Calendar rules shared by the day view and the summary.

Weekdays are numbered Sunday=0 .. Saturday=6. Dates are plain calendar
dates in the reference timezone; instants are truncated to the day there.
"""

from datetime import date, datetime, timezone
from typing import Callable, Iterable, Optional, Union
from zoneinfo import ZoneInfo

WEEK_DAYS = range(7)


def week_day_index(day: date) -> int:
    # date.weekday() is Monday=0
    return (day.weekday() + 1) % 7


def is_possible(created_at: date, week_days: Iterable[int], on_date: date) -> bool:
    """A habit counts for ``on_date`` once created and when scheduled on its weekday."""
    return created_at <= on_date and week_day_index(on_date) in set(week_days)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Clock:
    """Reference timezone plus a source of "now".

    ``now`` must return an aware datetime; it defaults to the system clock.
    """

    def __init__(self, tz_name: str = "UTC", now: Optional[Callable[[], datetime]] = None) -> None:
        self.tz = ZoneInfo(tz_name)
        self._now = now or _utc_now

    def now(self) -> datetime:
        return self._now().astimezone(self.tz)

    def today(self) -> date:
        return self.now().date()

    def start_of_day(self, value: Union[date, datetime]) -> date:
        if isinstance(value, datetime):
            # naive values are wall-clock times in the reference timezone
            if value.tzinfo is None:
                return value.date()
            return value.astimezone(self.tz).date()
        return value
