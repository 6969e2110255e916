"""Restaurant domain entity: partner restaurant with tier, hours and company distance."""
from typing import Optional
from lunchpass.domain.HoursRange import HoursRange


class Restaurant:
    def __init__(self, restaurant_id: str = "", name: str = "", tier: Optional[str] = None,
                 lunch_hours: Optional[HoursRange] = None, opening_hours: Optional[str] = None,
                 distance_km: Optional[float] = None, address: str = "", image_url: str = ""):
        self.id = restaurant_id
        self.name = name
        self.tier = tier
        self.lunch_hours = lunch_hours
        self.opening_hours = opening_hours
        self.distance_km = distance_km
        self.address = address
        self.image_url = image_url

    def __str__(self) -> str:
        parts = [f"{self.name} [{self.tier or '-'}]"]
        if self.distance_km is not None:
            parts.append(f"{self.distance_km} km")
        if self.lunch_hours:
            parts.append(f"Lunch: {self.lunch_hours}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Restaurant from a restaurants record.

        Lunch hours may arrive either as "lunch_hours" or under the joined
        alias "hours_range_lunch". Unknown keys are ignored.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        lunch = d.get("lunch_hours") or d.get("hours_range_lunch")
        tier = d.get("tier")
        opening = d.get("opening_hours")
        distance = d.get("distance_km")
        try:
            distance = float(distance) if distance is not None else None
        except (TypeError, ValueError):
            distance = None
        return Restaurant(
            restaurant_id=str(d.get("id") or ""),
            name=d.get("name") or "",
            tier=tier.strip().upper() if isinstance(tier, str) and tier.strip() else None,
            lunch_hours=HoursRange.from_dict(lunch),
            opening_hours=opening if isinstance(opening, str) and opening.strip() else None,
            distance_km=distance,
            address=d.get("address") or "",
            image_url=d.get("image_url") or "",
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "lunch_hours": self.lunch_hours.to_dict() if self.lunch_hours else None,
            "opening_hours": self.opening_hours,
            "distance_km": self.distance_km,
            "address": self.address,
            "image_url": self.image_url,
        }
