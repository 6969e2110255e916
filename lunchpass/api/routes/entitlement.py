from datetime import datetime

from fastapi import APIRouter

from lunchpass.domain.MealBalance import MealBalance
from lunchpass.domain.Membership import MembershipPeriod
from lunchpass.logic.entitlement.calculator import (
    employee_weekly_summary,
    meal_balance_summary,
    monthly_meals_remaining,
    weekly_meals_remaining,
    weekly_meals_remaining_from_balance,
)
from lunchpass.utilities.validators import (
    BalanceMealsRequest,
    DashboardRequest,
    EmployeeAllotmentRequest,
    WeeklyMealsRequest,
)

router = APIRouter(prefix="/api/entitlement", tags=["entitlement"])


@router.post("/weekly")
def weekly_meals(body: WeeklyMealsRequest):
    now = body.now or datetime.now()
    return {"weekly_meals": weekly_meals_remaining(body.start_date, body.end_date, body.meals_per_week, now)}


@router.post("/weekly-from-balance")
def weekly_meals_from_balance(body: BalanceMealsRequest):
    now = body.now or datetime.now()
    weekly = weekly_meals_remaining_from_balance(
        body.start_date, body.end_date, body.remaining_meals, body.meals_per_week, now)
    return {"weekly_meals": weekly, "monthly_meals": monthly_meals_remaining(body.remaining_meals)}


@router.post("/dashboard")
def meals_dashboard(body: DashboardRequest):
    """Balance based "Meals Remaining" numbers for the employee dashboard."""
    membership = MembershipPeriod.from_dict(body.membership.model_dump()) if body.membership else None
    balance = MealBalance.from_dict(body.meal_balance.model_dump()) if body.meal_balance else None
    return meal_balance_summary(balance, membership, body.now or datetime.now())


@router.post("/employee")
def employee_allotment(body: EmployeeAllotmentRequest):
    """Allotment based weekly count for an employee with a per-user meals_per_week."""
    membership = MembershipPeriod.from_dict(body.membership.model_dump()) if body.membership else None
    return employee_weekly_summary(membership, body.meals_per_week, body.now or datetime.now())
