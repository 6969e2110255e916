"""Membership domain entity: a company's subscription period, plan type and weekly allotment."""
from datetime import date, datetime
from typing import Optional
from lunchpass.utilities.constants import DATE_FORMAT, MEMBERSHIP_STATUSES, PLAN_TYPES


def parse_date(value) -> Optional[date]:
    '''Accepts a date, datetime or ISO string; anything else (or garbage) becomes None.'''
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.strptime(value.strip()[:10], DATE_FORMAT).date()
        except ValueError:
            return None
    return None


class MembershipPeriod:
    def __init__(self, start_date: Optional[date] = None, end_date: Optional[date] = None,
                 plan_type: Optional[str] = None, meals_per_week: int = 0,
                 status: str = "active", company_id: Optional[str] = None,
                 membership_id: Optional[str] = None):
        self.start_date = start_date
        self.end_date = end_date
        self.plan_type = plan_type
        self.meals_per_week = meals_per_week
        self.status = status
        self.company_id = company_id
        self.membership_id = membership_id

    @property
    def is_active(self) -> bool:
        return self.status == MEMBERSHIP_STATUSES[0]

    def __str__(self) -> str:
        return (f"Plan {self.plan_type or '-'} ({self.status}) - {self.meals_per_week} meals/week - "
                f"{self.start_date} .. {self.end_date}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a MembershipPeriod from a memberships record. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        plan_type = d.get("plan_type")
        if plan_type not in PLAN_TYPES:
            plan_type = None
        status = d.get("status") or MEMBERSHIP_STATUSES[0]
        if status not in MEMBERSHIP_STATUSES:
            # unknown statuses never grant meals
            status = "inactive"
        try:
            meals_per_week = max(0, int(d.get("meals_per_week") or 0))
        except (TypeError, ValueError):
            meals_per_week = 0
        return MembershipPeriod(
            start_date=parse_date(d.get("start_date")),
            end_date=parse_date(d.get("end_date")),
            plan_type=plan_type,
            meals_per_week=meals_per_week,
            status=status,
            company_id=d.get("company_id"),
            membership_id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.membership_id,
            "company_id": self.company_id,
            "start_date": self.start_date.strftime(DATE_FORMAT) if self.start_date else None,
            "end_date": self.end_date.strftime(DATE_FORMAT) if self.end_date else None,
            "plan_type": self.plan_type,
            "meals_per_week": self.meals_per_week,
            "status": self.status,
        }
