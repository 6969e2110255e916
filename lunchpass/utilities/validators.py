"""
Request validation schemas using Pydantic for the JSON API.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import date, datetime


class HoursRangeInput(BaseModel):
    """Schema for a {"from": "HH:MM", "to": "HH:MM"} window. Values are not range-checked."""
    model_config = ConfigDict(populate_by_name=True)

    from_time: Optional[str] = Field(None, alias="from")
    to_time: Optional[str] = Field(None, alias="to")

    def to_record(self):
        return {"from": self.from_time, "to": self.to_time}


class AvailabilityRequest(BaseModel):
    lunch_hours: Optional[HoursRangeInput] = None
    now: Optional[datetime] = None


class WeeklyMealsRequest(BaseModel):
    """Schema for the allotment based weekly count."""
    start_date: date
    end_date: date
    meals_per_week: int = Field(..., ge=0, le=7)
    now: Optional[datetime] = None


class BalanceMealsRequest(BaseModel):
    """Schema for the balance based weekly count."""
    start_date: date
    end_date: date
    remaining_meals: int = Field(..., ge=0)
    meals_per_week: int = Field(..., ge=0, le=7)
    now: Optional[datetime] = None


class MembershipInput(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    plan_type: Optional[str] = Field(None, pattern=r'^(S|M|L|XL)$')
    meals_per_week: int = Field(0, ge=0, le=7)
    status: str = Field("active", pattern=r'^(active|inactive)$')


class MealBalanceInput(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    remaining_meals: int = Field(0, ge=0)


class DashboardRequest(BaseModel):
    """Schema for the employee "Meals Remaining" dashboard."""
    membership: Optional[MembershipInput] = None
    meal_balance: Optional[MealBalanceInput] = None
    now: Optional[datetime] = None


class EmployeeAllotmentRequest(BaseModel):
    membership: Optional[MembershipInput] = None
    meals_per_week: Optional[int] = Field(None, ge=0, le=7)
    now: Optional[datetime] = None


class RestaurantInput(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    tier: Optional[str] = None
    lunch_hours: Optional[HoursRangeInput] = None
    opening_hours: Optional[str] = Field(None, max_length=100)
    distance_km: Optional[float] = Field(None, ge=0)
    address: str = ""
    image_url: str = ""

    @field_validator('tier')
    @classmethod
    def normalize_tier(cls, v):
        """Upper-case and strip tiers; blank becomes None."""
        if isinstance(v, str):
            return v.strip().upper() or None
        return v

    def to_record(self):
        record = self.model_dump(exclude={"lunch_hours"})
        record["lunch_hours"] = self.lunch_hours.to_record() if self.lunch_hours else None
        return record


class AllowedRestaurantInput(BaseModel):
    restaurant_id: str = Field(..., min_length=1)
    distance_km: Optional[float] = Field(None, ge=0)


class VisibleRestaurantsRequest(BaseModel):
    membership_tier: Optional[str] = None
    restaurants: List[RestaurantInput] = Field(default_factory=list)
    allowed: Optional[List[AllowedRestaurantInput]] = None
    now: Optional[datetime] = None


class MenuItemInput(BaseModel):
    id: str = ""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: Optional[str] = None
    category: Optional[str] = None
    days: List[str] = Field(default_factory=list)
    is_available: Optional[bool] = None

    @field_validator('days')
    @classmethod
    def normalize_days(cls, v):
        """Lower-case day tags and drop blanks."""
        return [d.strip().lower() for d in v if d and d.strip()]


class DailyMenuRequest(BaseModel):
    items: List[MenuItemInput] = Field(default_factory=list)
    now: Optional[datetime] = None
