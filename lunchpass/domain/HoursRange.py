"""HoursRange value object: an inclusive daily time window given as HH:MM strings."""
from typing import Optional


class HoursRange:
    def __init__(self, from_time: Optional[str] = None, to_time: Optional[str] = None):
        self.from_time = from_time
        self.to_time = to_time

    def is_complete(self) -> bool:
        '''True when both ends carry a non-empty value (not necessarily a valid one).'''
        return bool(self.from_time) and bool(self.to_time)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HoursRange):
            return NotImplemented
        return (self.from_time, self.to_time) == (other.from_time, other.to_time)

    def __hash__(self) -> int:
        return hash((self.from_time, self.to_time))

    def __str__(self) -> str:
        return f"{self.from_time or '?'} - {self.to_time or '?'}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> Optional["HoursRange"]:
        '''Builds a HoursRange from a {"from", "to"} record; None stays None.'''
        if isinstance(data, HoursRange):
            return data
        if not isinstance(data, dict):
            return None
        from_time = data.get("from")
        to_time = data.get("to")
        return HoursRange(
            from_time if isinstance(from_time, str) else None,
            to_time if isinstance(to_time, str) else None,
        )

    def to_dict(self):
        return {"from": self.from_time, "to": self.to_time}
