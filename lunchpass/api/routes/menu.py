from datetime import datetime

from fastapi import APIRouter

from lunchpass.domain.MenuItem import MenuItem
from lunchpass.logic.availability.evaluator import current_weekday_name, weekday_name_german
from lunchpass.logic.menu.daily_menu import group_by_category, menu_for_day
from lunchpass.utilities.validators import DailyMenuRequest

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.post("/today")
def todays_menu(body: DailyMenuRequest):
    now = body.now or datetime.now()
    items = [MenuItem.from_dict(i.model_dump()) for i in body.items]
    grouped = group_by_category(menu_for_day(items, now))
    return {
        "day": current_weekday_name(now),
        "day_label": weekday_name_german(now),
        "count": sum(len(v) for v in grouped.values()),
        "categories": {name: [i.to_dict() for i in group] for name, group in grouped.items()},
    }
