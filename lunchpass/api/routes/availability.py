from datetime import datetime
import logging

from fastapi import APIRouter

from lunchpass.logic.availability.evaluator import (
    availability_status,
    check_order_allowed,
    current_weekday_name,
    weekday_name_german,
)
from lunchpass.utilities.validators import AvailabilityRequest

router = APIRouter(prefix="/api/availability", tags=["availability"])
logger = logging.getLogger(__name__)


def _hours(body: AvailabilityRequest):
    return body.lunch_hours.to_record() if body.lunch_hours else None


@router.post("")
def restaurant_availability(body: AvailabilityRequest):
    """Open/closed status for a restaurant's lunch window at ``now``."""
    now = body.now or datetime.now()
    status = availability_status(_hours(body), now)
    status["day"] = current_weekday_name(now)
    status["day_label"] = weekday_name_german(now)
    return status


@router.post("/order-check")
def order_check(body: AvailabilityRequest):
    """Gate an order attempt; a rejection carries the alert title and message."""
    now = body.now or datetime.now()
    rejection = check_order_allowed(_hours(body), now)
    if rejection is None:
        return {"allowed": True}
    title, message = rejection
    logger.info("Order rejected at %s: %s", now.isoformat(), message)
    return {"allowed": False, "title": title, "message": message}
