"""Shared enumerations for the plans API."""

from enum import Enum

# Plans with this country match every destination filter.
ALL_COUNTRIES = "all"

DEFAULT_POPULAR_LIMIT = 5


class InteractionType(str, Enum):
    VIEW = "view"
    SELECTION = "selection"
    COMPARISON = "comparison"
    CHECKOUT_START = "checkout_start"
    CHECKOUT_COMPLETE = "checkout_complete"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
