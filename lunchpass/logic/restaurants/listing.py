"""Restaurant list helpers: tier visibility, distance join and ordering."""
from __future__ import annotations
from copy import copy
from typing import Any, Dict, Iterable, List, Optional
import logging

from lunchpass.domain.Restaurant import Restaurant
from lunchpass.utilities.constants import RESTAURANT_TIERS

__all__ = [
    "tier_rank", "is_restaurant_visible_for_tier", "filter_visible_restaurants",
    "attach_distances", "sort_by_distance", "list_restaurants_for_company",
]

logger = logging.getLogger(__name__)


def tier_rank(tier: Optional[str]) -> Optional[int]:
    """Position of a tier in S < M < L; None for anything else (XL included)."""
    if not isinstance(tier, str):
        return None
    key = tier.strip().upper()
    if key not in RESTAURANT_TIERS:
        return None
    return RESTAURANT_TIERS.index(key)


def is_restaurant_visible_for_tier(restaurant_tier: Optional[str], membership_tier: Optional[str]) -> bool:
    membership_rank = tier_rank(membership_tier)
    restaurant_rank = tier_rank(restaurant_tier)
    if membership_rank is None or restaurant_rank is None:
        return False
    return restaurant_rank <= membership_rank


def filter_visible_restaurants(restaurants: Iterable[Restaurant], membership_tier: Optional[str]) -> List[Restaurant]:
    visible = [r for r in restaurants if is_restaurant_visible_for_tier(r.tier, membership_tier)]
    logger.debug("%d restaurants visible for plan %r", len(visible), membership_tier)
    return visible


def attach_distances(restaurants: Iterable[Restaurant], allowed: Iterable[Dict[str, Any]]) -> List[Restaurant]:
    """Keep only restaurants linked to the company and copy the link's distance onto them.

    ``allowed`` holds allowed_restaurants records ({"restaurant_id", "distance_km"}).
    """
    distances: Dict[str, Optional[float]] = {}
    for link in allowed:
        rid = link.get("restaurant_id")
        if rid is None:
            continue
        try:
            distances[str(rid)] = float(link["distance_km"]) if link.get("distance_km") is not None else None
        except (TypeError, ValueError):
            distances[str(rid)] = None
    linked: List[Restaurant] = []
    for restaurant in restaurants:
        if restaurant.id not in distances:
            continue
        entry = copy(restaurant)
        entry.distance_km = distances[restaurant.id]
        linked.append(entry)
    return linked


def sort_by_distance(restaurants: Iterable[Restaurant]) -> List[Restaurant]:
    # missing distance sorts as 0 (nearest)
    return sorted(restaurants, key=lambda r: r.distance_km or 0)


def list_restaurants_for_company(restaurants: Iterable[Restaurant], membership_tier: Optional[str],
                                 allowed: Optional[Iterable[Dict[str, Any]]] = None) -> List[Restaurant]:
    """Restaurants an employee may browse, nearest first."""
    pool = attach_distances(restaurants, allowed) if allowed is not None else list(restaurants)
    return sort_by_distance(filter_visible_restaurants(pool, membership_tier))
