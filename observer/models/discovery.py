from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from observer.utils import ensure_utc


class ActionType(str, Enum):
    CITY_ADDED = "city_added"
    CITY_REMOVED = "city_removed"
    CITY_SELECTED = "city_selected"
    CITY_REORDERED = "city_reordered"
    PLACE_FAVOURITED = "place_favourited"
    PLACE_UNFAVOURITED = "place_unfavourited"
    NIGHTS_ADJUSTED = "nights_adjusted"
    CITY_PREVIEW_VIEWED = "city_preview_viewed"
    PROCEED_CLICKED = "proceed_clicked"


class PlaceType(str, Enum):
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    BAR = "bar"
    MUSEUM = "museum"
    GALLERY = "gallery"
    PARK = "park"
    LANDMARK = "landmark"
    SHOP = "shop"
    MARKET = "market"
    VIEWPOINT = "viewpoint"
    EXPERIENCE = "experience"
    OTHER = "other"


PLACE_TYPE_VALUES = frozenset(place_type.value for place_type in PlaceType)


def _is_unknown_place_type(value) -> bool:
    return isinstance(value, str) and not isinstance(value, PlaceType) and value not in PLACE_TYPE_VALUES


def _place_type_or_other(value):
    """Unknown place types are kept as `other` rather than rejected."""
    return PlaceType.OTHER if _is_unknown_place_type(value) else value


class DiscoveryAction(BaseModel):
    """
    One logged user action from the discovery phase.

    Appended by the session store and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    type: ActionType
    target_id: str
    place_type: PlaceType | None = None
    city_name: str | None = None
    timestamp: datetime

    @field_validator("place_type", mode="before")
    @classmethod
    def _unknown_place_type(cls, value):
        return _place_type_or_other(value)

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class DiscoveryPlace(BaseModel):
    id: str
    name: str
    type: PlaceType = PlaceType.OTHER
    is_hidden_gem: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_place_type(cls, value):
        return _place_type_or_other(value)


class DiscoveryCity(BaseModel):
    id: str
    name: str
    description: str | None = None
    is_selected: bool = True
    is_fixed: bool = False
    nights: int | None = Field(default=None, ge=0)
    suggested_nights: int | None = Field(default=None, ge=0)
    places: list[DiscoveryPlace] = Field(default_factory=list)

    def searchable_text(self) -> str:
        """Lower-cased name and description, as scanned by keyword matching."""
        return f"{self.name.lower()} {(self.description or '').lower()}"


class DiscoveryAggregates(BaseModel):
    """Running counters kept by the discovery session store."""

    favourite_place_types: dict[PlaceType, int] = Field(
        default_factory=dict, description="Place type → number of favourited places"
    )
    total_favourites: int = Field(default=0, ge=0)
    average_nights_per_city: float = Field(default=0.0, ge=0)
    prefers_hidden_gems: bool = False
    total_suggested_cities: int = Field(default=0, ge=0)

    @field_validator("favourite_place_types", mode="before")
    @classmethod
    def _drop_unknown_place_types(cls, value):
        if not isinstance(value, dict):
            return value
        return {
            place_type: count
            for place_type, count in value.items()
            if not _is_unknown_place_type(place_type)
        }
