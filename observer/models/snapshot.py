from pydantic import BaseModel, Field

from observer.models.discovery import DiscoveryAction, DiscoveryAggregates, DiscoveryCity
from observer.models.view_tracking import ViewTimeTracker


class DiscoverySnapshot(BaseModel):
    """
    Everything the observer reads from the discovery session store.

    ``cities`` is the current trip (origin, selected stops, destination);
    ``removed_cities`` are the suggestions the user explicitly dropped.
    """

    actions: list[DiscoveryAction] = Field(default_factory=list)
    aggregates: DiscoveryAggregates = Field(default_factory=DiscoveryAggregates)
    cities: list[DiscoveryCity] = Field(default_factory=list)
    removed_cities: list[DiscoveryCity] = Field(default_factory=list)
    view_time: ViewTimeTracker | None = None
