from datetime import datetime

from fastapi import APIRouter

from lunchpass.domain.Restaurant import Restaurant
from lunchpass.logic.availability.evaluator import (
    is_orderable_now,
    lunch_hours_label,
    opening_hours_label,
)
from lunchpass.logic.restaurants.listing import list_restaurants_for_company
from lunchpass.utilities.validators import VisibleRestaurantsRequest

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"])


@router.post("/visible")
def visible_restaurants(body: VisibleRestaurantsRequest):
    """Restaurants the membership tier may see, nearest first, with card labels."""
    now = body.now or datetime.now()
    restaurants = [Restaurant.from_dict(r.to_record()) for r in body.restaurants]
    allowed = [a.model_dump() for a in body.allowed] if body.allowed is not None else None
    visible = list_restaurants_for_company(restaurants, body.membership_tier, allowed)
    items = []
    for restaurant in visible:
        entry = restaurant.to_dict()
        entry["lunch_label"] = lunch_hours_label(restaurant.lunch_hours)
        entry["opening_label"] = opening_hours_label(restaurant.opening_hours)
        entry["is_open"] = is_orderable_now(restaurant.lunch_hours, now).is_open
        items.append(entry)
    return {"count": len(items), "total": len(restaurants), "restaurants": items}
