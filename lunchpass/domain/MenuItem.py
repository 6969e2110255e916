"""MenuItem domain entity: a dish offered on specific weekdays."""
from typing import List, Optional


class MenuItem:
    def __init__(self, item_id: str = "", name: str = "", description: str = "",
                 price: Optional[str] = None, category: Optional[str] = None,
                 days: Optional[List[str]] = None, is_available: Optional[bool] = None,
                 restaurant_id: Optional[str] = None):
        self.id = item_id
        self.name = name
        self.description = description
        self.price = price
        self.category = category
        # Avoid mutable default arguments
        self.days = [d.strip().lower() for d in days if isinstance(d, str)] if days else []
        self.is_available = is_available
        self.restaurant_id = restaurant_id

    def served_on(self, weekday_name: str) -> bool:
        return weekday_name.lower() in self.days

    def __str__(self) -> str:
        parts = [self.name]
        if self.price:
            parts.append(str(self.price))
        if self.days:
            parts.append("Days: " + ", ".join(self.days))
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        days = d.get("days")
        if isinstance(days, str):
            days = [days]
        elif not isinstance(days, list):
            # single-day records use "day"
            days = [d["day"]] if isinstance(d.get("day"), str) else []
        return MenuItem(
            item_id=str(d.get("id") or ""),
            name=d.get("name") or "",
            description=d.get("description") or "",
            price=d.get("price"),
            category=d.get("category") or None,
            days=days,
            is_available=d.get("is_available"),
            restaurant_id=d.get("restaurant_id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "days": self.days,
            "is_available": self.is_available,
            "restaurant_id": self.restaurant_id,
        }
