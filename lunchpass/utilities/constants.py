from typing import Final

# Indexed by JavaScript-style day numbers: 0 = Sunday .. 6 = Saturday
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)
WEEKDAY_NAMES_DE: Final[tuple[str, ...]] = (
    "SONNTAG", "MONTAG", "DIENSTAG", "MITTWOCH", "DONNERSTAG", "FREITAG", "SAMSTAG",
)
WEEKEND_DAYS: Final[frozenset[int]] = frozenset({0, 6})

WORKING_DAYS_PER_WEEK: Final[int] = 5

# Restaurant tiers in ascending order; memberships may also carry "XL"
RESTAURANT_TIERS: Final[tuple[str, ...]] = ("S", "M", "L")
PLAN_TYPES: Final[tuple[str, ...]] = ("S", "M", "L", "XL")
MEMBERSHIP_STATUSES: Final[tuple[str, ...]] = ("active", "inactive")

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_MENU_CATEGORY: Final[str] = "Other"
