"""Meal entitlement calculations.

Two weekly formulas live side by side:

- ``weekly_meals_remaining`` caps the weekly allotment by the working days
  left in a Monday-Friday week (employer and employee allotment views).
- ``weekly_meals_remaining_from_balance`` spreads the remaining balance over
  the weeks left in the period, using a full Monday-Sunday week for the
  overlap check (employee balance view).

Keep them separate until product decides which one is right.

None of the functions raise on bad data: missing or unparseable dates
yield 0 meals.
"""
from __future__ import annotations
from calendar import month_name
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Dict, Optional, Tuple
import logging
import math

from lunchpass.domain.MealBalance import MealBalance
from lunchpass.domain.Membership import MembershipPeriod
from lunchpass.utilities.config import DEFAULT_MEALS_PER_WEEK, WEEKS_PER_MONTH
from lunchpass.utilities.constants import WORKING_DAYS_PER_WEEK

__all__ = [
    "week_bounds", "weekly_meals_remaining", "weekly_meals_remaining_from_balance",
    "monthly_meals_remaining", "meal_balance_summary", "employee_weekly_summary",
]

logger = logging.getLogger(__name__)

ONE_WEEK = timedelta(weeks=1)


def _as_datetime(value, tz: Optional[tzinfo]) -> Optional[datetime]:
    """Coerce a date, datetime or ISO string to a datetime comparable with ``now``.

    Bare dates mean midnight of that day in ``now``'s timezone. An offset-carrying
    value paired with a naive ``now`` is converted to local wall time first.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Unparseable period date %r", value)
            return None
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is None:
            value = value.astimezone().replace(tzinfo=None)
        elif value.tzinfo is None and tz is not None:
            value = value.replace(tzinfo=tz)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=tz)
    return None


def _period(start, end, now: datetime) -> Optional[Tuple[datetime, datetime]]:
    period_start = _as_datetime(start, now.tzinfo)
    period_end = _as_datetime(end, now.tzinfo)
    if period_start is None or period_end is None:
        return None
    return period_start, period_end


def week_bounds(now: datetime, days: int) -> Tuple[datetime, datetime]:
    """Monday 00:00 of ``now``'s week and the end of the ``days``-th day (1-based) after it.

    Sunday belongs to the week that started six days earlier.
    """
    week_start = (now - timedelta(days=now.weekday())).replace(hour=0, minute=0, second=0, microsecond=0)
    week_end = (week_start + timedelta(days=days - 1)).replace(hour=23, minute=59, second=59, microsecond=999000)
    return week_start, week_end


def _overlaps(window: Tuple[datetime, datetime], period: Tuple[datetime, datetime]) -> bool:
    return not (window[1] < period[0] or window[0] > period[1])


def weekly_meals_remaining(period_start, period_end, meals_per_week: int,
                           now: Optional[datetime] = None) -> int:
    """Meals still orderable this working week, capped by the weekly allotment."""
    now = now if now is not None else datetime.now()
    period = _period(period_start, period_end, now)
    if period is None:
        return 0
    if not _overlaps(week_bounds(now, WORKING_DAYS_PER_WEEK), period):
        return 0

    iso_day = now.isoweekday()
    if iso_day > WORKING_DAYS_PER_WEEK:
        return 0
    remaining_weekdays = WORKING_DAYS_PER_WEEK - iso_day + 1
    return max(0, min(int(meals_per_week or 0), remaining_weekdays))


def weekly_meals_remaining_from_balance(period_start, period_end, remaining_meals: int,
                                        meals_per_week: int, now: Optional[datetime] = None) -> int:
    """Spread the remaining balance over the weeks left in the period, capped by the allotment."""
    now = now if now is not None else datetime.now()
    period = _period(period_start, period_end, now)
    if period is None:
        return 0
    if not _overlaps(week_bounds(now, 7), period):
        return 0

    remaining_weeks = math.ceil((period[1] - now) / ONE_WEEK)
    if remaining_weeks <= 0:
        # period is over even though the current week still touches it
        return 0
    per_week = max(0, int(remaining_meals or 0)) // remaining_weeks
    return max(0, min(int(meals_per_week or 0), per_week))


def monthly_meals_remaining(remaining_meals: int) -> int:
    return remaining_meals


def meal_balance_summary(balance: Optional[MealBalance], membership: Optional[MembershipPeriod],
                         now: Optional[datetime] = None) -> Dict[str, Any]:
    """Numbers for the "Meals Remaining" dashboard (balance based).

    Memberships without an allotment fall back to DEFAULT_MEALS_PER_WEEK.
    An inactive membership grants nothing: both counts are 0.
    """
    now = now if now is not None else datetime.now()
    entitled = membership is None or membership.is_active
    weekly_max = (membership.meals_per_week if membership else 0) or DEFAULT_MEALS_PER_WEEK
    weekly = 0
    monthly = 0
    if entitled and balance is not None and balance.is_complete():
        weekly = weekly_meals_remaining_from_balance(
            balance.start_date, balance.end_date, balance.remaining_meals, weekly_max, now)
    if entitled and balance is not None and balance.remaining_meals:
        monthly = monthly_meals_remaining(balance.remaining_meals)
    return {
        "weekly": weekly,
        "weekly_max": weekly_max,
        "monthly": monthly,
        "monthly_max": weekly_max * WEEKS_PER_MONTH,
        "month_name": month_name[now.month],
    }


def employee_weekly_summary(membership: Optional[MembershipPeriod], meals_per_week: Optional[int],
                            now: Optional[datetime] = None) -> Dict[str, Any]:
    """Weekly allotment view for an employee with a per-user allotment."""
    now = now if now is not None else datetime.now()
    weekly = 0
    if (membership is not None and membership.is_active and membership.start_date
            and membership.end_date and meals_per_week):
        weekly = weekly_meals_remaining(membership.start_date, membership.end_date, meals_per_week, now)
    return {
        "weekly": weekly,
        "weekly_max": meals_per_week or 0,
        "month_name": month_name[now.month],
    }
