"""Daily menu helpers: today's items and category grouping."""
from __future__ import annotations
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from lunchpass.domain.MenuItem import MenuItem
from lunchpass.logic.availability.evaluator import current_weekday_name
from lunchpass.utilities.constants import DEFAULT_MENU_CATEGORY

__all__ = ["menu_for_day", "group_by_category"]


def menu_for_day(items: Iterable[MenuItem], now: Optional[datetime] = None) -> List[MenuItem]:
    """Items tagged with ``now``'s weekday; items explicitly flagged unavailable are dropped."""
    day = current_weekday_name(now)
    return [item for item in items if item.served_on(day) and item.is_available is not False]


def group_by_category(items: Iterable[MenuItem]) -> Dict[str, List[MenuItem]]:
    grouped: Dict[str, List[MenuItem]] = {}
    for item in items:
        grouped.setdefault(item.category or DEFAULT_MENU_CATEGORY, []).append(item)
    return grouped
