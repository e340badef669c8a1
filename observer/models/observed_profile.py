from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from observer.models.discovery import PlaceType


class InterestCategory(str, Enum):
    FOODIE = "foodie"
    CULTURE_BUFF = "culture_buff"
    NATURE_LOVER = "nature_lover"
    NIGHTLIFE = "nightlife"
    BEACH_PERSON = "beach_person"
    ADVENTURE_SEEKER = "adventure_seeker"
    RELAXATION = "relaxation"
    SHOPPING = "shopping"
    PHOTOGRAPHY = "photography"
    LOCAL_EXPLORER = "local_explorer"


class AvoidanceCategory(str, Enum):
    CROWDS = "crowds"
    HIKING = "hiking"
    MUSEUMS = "museums"
    NIGHTLIFE = "nightlife"
    EXPENSIVE = "expensive"
    EARLY_MORNINGS = "early_mornings"


Pace = Literal["slow", "moderate", "fast"]
BudgetLevel = Literal["budget", "moderate", "luxury"]


class InterestSignal(BaseModel):
    """
    Evidence produced by a single extractor for one category.

    Transient: only the merger reads these.
    """

    model_config = ConfigDict(frozen=True)

    category: InterestCategory
    weight: float = Field(ge=0.0, le=1.0)
    provenance: tuple[str, ...] = ()


class InferredInterest(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: InterestCategory
    confidence: float = Field(ge=0.0, le=1.0)
    signals: tuple[str, ...] = ()
    last_updated: datetime


class InferredAvoidance(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: AvoidanceCategory
    confidence: float = Field(ge=0.0, le=1.0)
    signals: tuple[str, ...] = ()
    last_updated: datetime


class TravelStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    pace: Pace = "fast"
    prefers_hidden_gems: bool = False
    budget_level: BudgetLevel | None = None


class BehaviorPatterns(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_actions_observed: int = Field(default=0, ge=0)
    favourite_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    removal_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    average_view_time: float = Field(default=0.0, ge=0.0, description="Seconds")
    is_active: bool = False


class ViewTimeTracking(BaseModel):
    model_config = ConfigDict(frozen=True)

    place_type: PlaceType
    total_seconds: float = Field(default=0.0, ge=0.0)
    view_count: int = Field(default=0, ge=0)
    last_viewed: datetime


class ObservedProfile(BaseModel):
    """
    Immutable snapshot of everything inferred from one discovery session.

    Rebuilt from scratch on every recomputation. Safe to pass to
    ``model_dump(mode="json")`` for prompt builders and logs.
    """

    model_config = ConfigDict(frozen=True)

    interests: tuple[InferredInterest, ...] = ()
    top_interests: tuple[InterestCategory, ...] = ()
    avoidances: tuple[InferredAvoidance, ...] = ()
    travel_style: TravelStyle = Field(default_factory=TravelStyle)
    patterns: BehaviorPatterns = Field(default_factory=BehaviorPatterns)
    view_time_by_type: tuple[ViewTimeTracking, ...] = ()
    summary_for_ai: str = ""
    generated_at: datetime

    def get_interest(self, category: InterestCategory) -> InferredInterest | None:
        """Return the emitted interest for a category, if any."""
        return next((i for i in self.interests if i.category == category), None)

    def get_avoidance(self, category: AvoidanceCategory) -> InferredAvoidance | None:
        """Return the emitted avoidance for a category, if any."""
        return next((a for a in self.avoidances if a.category == category), None)
