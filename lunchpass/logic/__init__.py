"""Core business logic layer.

Subpackages:
- availability: lunch-window ordering checks and weekday names
- entitlement: weekly and monthly meal counts
- restaurants: tier visibility and distance ordering
- menu: today's menu and category grouping

All functions are pure: records come in as arguments and the evaluation
instant is passed explicitly.
"""
__all__ = ["availability", "entitlement", "restaurants", "menu"]
