from collections import defaultdict

from observer.models.discovery import (
    ActionType,
    DiscoveryAction,
    DiscoveryAggregates,
    DiscoveryCity,
    PlaceType,
)
from observer.models.observed_profile import Pace, TravelStyle
from observer.services.profile.constants import (
    DEFAULT_CITY_NIGHTS,
    HIDDEN_GEM_SHARE,
    PACE_MODERATE_NIGHTS,
    PACE_SLOW_NIGHTS,
)


class TravelStyleEstimator:
    """
    Travel style from the session's aggregate counters.

    Stateless thresholds, recomputed every time with no smoothing.
    """

    @staticmethod
    def infer_pace(average_nights_per_city: float) -> Pace:
        if average_nights_per_city >= PACE_SLOW_NIGHTS:
            return "slow"
        if average_nights_per_city >= PACE_MODERATE_NIGHTS:
            return "moderate"
        return "fast"

    @staticmethod
    def estimate(aggregates: DiscoveryAggregates) -> TravelStyle:
        return TravelStyle(
            pace=TravelStyleEstimator.infer_pace(aggregates.average_nights_per_city),
            prefers_hidden_gems=aggregates.prefers_hidden_gems,
            budget_level=None,
        )


class AggregateCalculator:
    """
    Derives the session counters from raw store state.

    Hosts that already keep these counters can skip this and build
    ``DiscoveryAggregates`` directly.
    """

    @staticmethod
    def average_nights_per_city(cities: list[DiscoveryCity]) -> float:
        """Mean nights over the trip, using suggested nights (or 1) when unset."""
        if not cities:
            return 0.0
        total = 0
        for city in cities:
            if city.nights is not None:
                total += city.nights
            elif city.suggested_nights is not None:
                total += city.suggested_nights
            else:
                total += DEFAULT_CITY_NIGHTS
        return total / len(cities)

    @staticmethod
    def prefers_hidden_gems(cities: list[DiscoveryCity], favourited_place_ids: set[str]) -> bool:
        """True when more than half of the favourited places are hidden gems."""
        favourited = [place for city in cities for place in city.places if place.id in favourited_place_ids]
        if not favourited:
            return False
        hidden = sum(1 for place in favourited if place.is_hidden_gem)
        return hidden / len(favourited) > HIDDEN_GEM_SHARE

    @staticmethod
    def favourite_place_type_counts(actions: list[DiscoveryAction]) -> dict[PlaceType, int]:
        counts: dict[PlaceType, int] = defaultdict(int)
        for action in actions:
            if action.type == ActionType.PLACE_FAVOURITED and action.place_type is not None:
                counts[action.place_type] += 1
        return dict(counts)

    @staticmethod
    def from_discovery(
        actions: list[DiscoveryAction],
        cities: list[DiscoveryCity],
        favourited_place_ids: set[str],
        total_suggested_cities: int,
        all_cities: list[DiscoveryCity] | None = None,
    ) -> DiscoveryAggregates:
        """
        Build aggregates from the action log and trip state.

        Args:
            actions: Full action log
            cities: Cities currently on the trip, with their places
            favourited_place_ids: Places the user currently has favourited
            total_suggested_cities: Number of cities suggested for the route
            all_cities: Every city the user could favourite in, including
                deselected suggestions; defaults to the trip cities

        Returns:
            DiscoveryAggregates ready for profile computation
        """
        return DiscoveryAggregates(
            favourite_place_types=AggregateCalculator.favourite_place_type_counts(actions),
            total_favourites=len(favourited_place_ids),
            average_nights_per_city=AggregateCalculator.average_nights_per_city(cities),
            prefers_hidden_gems=AggregateCalculator.prefers_hidden_gems(
                all_cities if all_cities is not None else cities, favourited_place_ids
            ),
            total_suggested_cities=total_suggested_cities,
        )
