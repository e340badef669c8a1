"""
Human-readable labels for inferred categories.

UI labels are short titles; summary labels read naturally inside a sentence
for assistant prompts.
"""

from enum import Enum
from typing import Any, Final

from observer.models.observed_profile import AvoidanceCategory, InterestCategory, Pace

INTEREST_LABELS: Final[dict[InterestCategory, str]] = {
    InterestCategory.FOODIE: "Food & Dining",
    InterestCategory.CULTURE_BUFF: "Culture & History",
    InterestCategory.NATURE_LOVER: "Nature & Outdoors",
    InterestCategory.NIGHTLIFE: "Nightlife",
    InterestCategory.BEACH_PERSON: "Beaches & Coast",
    InterestCategory.ADVENTURE_SEEKER: "Adventure",
    InterestCategory.RELAXATION: "Relaxation & Wellness",
    InterestCategory.SHOPPING: "Shopping",
    InterestCategory.PHOTOGRAPHY: "Photography & Scenic",
    InterestCategory.LOCAL_EXPLORER: "Local Experiences",
}

AVOIDANCE_LABELS: Final[dict[AvoidanceCategory, str]] = {
    AvoidanceCategory.CROWDS: "Crowds",
    AvoidanceCategory.HIKING: "Hiking",
    AvoidanceCategory.MUSEUMS: "Museums",
    AvoidanceCategory.NIGHTLIFE: "Nightlife",
    AvoidanceCategory.EXPENSIVE: "Expensive Places",
    AvoidanceCategory.EARLY_MORNINGS: "Early Mornings",
}

INTEREST_SUMMARY_LABELS: Final[dict[InterestCategory, str]] = {
    InterestCategory.FOODIE: "food and dining",
    InterestCategory.CULTURE_BUFF: "culture and history",
    InterestCategory.NATURE_LOVER: "nature and outdoors",
    InterestCategory.NIGHTLIFE: "nightlife and entertainment",
    InterestCategory.BEACH_PERSON: "beaches and coastal areas",
    InterestCategory.ADVENTURE_SEEKER: "adventure activities",
    InterestCategory.RELAXATION: "relaxation and wellness",
    InterestCategory.SHOPPING: "shopping and markets",
    InterestCategory.PHOTOGRAPHY: "photography and scenic spots",
    InterestCategory.LOCAL_EXPLORER: "local and hidden experiences",
}

AVOIDANCE_SUMMARY_LABELS: Final[dict[AvoidanceCategory, str]] = {
    AvoidanceCategory.CROWDS: "crowds and touristy places",
    AvoidanceCategory.HIKING: "hiking and mountain activities",
    AvoidanceCategory.MUSEUMS: "museums and galleries",
    AvoidanceCategory.NIGHTLIFE: "nightlife",
    AvoidanceCategory.EXPENSIVE: "expensive options",
    AvoidanceCategory.EARLY_MORNINGS: "early morning activities",
}

PACE_SUMMARY_LABELS: Final[dict[Pace, str]] = {
    "slow": "relaxed pace (3+ nights per city)",
    "moderate": "moderate pace (2 nights per city)",
    "fast": "fast pace (1 night per city)",
}


def _coerce(enum_type: type[Enum], value: Any) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        return None


def get_interest_label(category: InterestCategory | str) -> str:
    """Display label for an interest; unknown values are returned as given."""
    member = _coerce(InterestCategory, category)
    if member is None:
        return str(category)
    return INTEREST_LABELS[member]


def get_avoidance_label(category: AvoidanceCategory | str) -> str:
    """Display label for an avoidance; unknown values are returned as given."""
    member = _coerce(AvoidanceCategory, category)
    if member is None:
        return str(category)
    return AVOIDANCE_LABELS[member]
