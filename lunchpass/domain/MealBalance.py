"""MealBalance snapshot: remaining meals within a balance period (read-only here)."""
from datetime import date
from typing import Optional
from lunchpass.domain.Membership import parse_date
from lunchpass.utilities.constants import DATE_FORMAT


class MealBalance:
    def __init__(self, start_date: Optional[date] = None, end_date: Optional[date] = None,
                 remaining_meals: int = 0, user_id: Optional[str] = None):
        self.start_date = start_date
        self.end_date = end_date
        self.remaining_meals = remaining_meals
        self.user_id = user_id

    def is_complete(self) -> bool:
        '''Dashboard numbers are only computed when both dates and a positive counter exist.'''
        return bool(self.start_date and self.end_date and self.remaining_meals)

    def __str__(self) -> str:
        return f"{self.remaining_meals} meals left - {self.start_date} .. {self.end_date}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        try:
            remaining = max(0, int(d.get("remaining_meals") or 0))
        except (TypeError, ValueError):
            remaining = 0
        return MealBalance(
            start_date=parse_date(d.get("start_date")),
            end_date=parse_date(d.get("end_date")),
            remaining_meals=remaining,
            user_id=d.get("user_id"),
        )

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "start_date": self.start_date.strftime(DATE_FORMAT) if self.start_date else None,
            "end_date": self.end_date.strftime(DATE_FORMAT) if self.end_date else None,
            "remaining_meals": self.remaining_meals,
        }
