from collections import defaultdict

from observer.models.discovery import DiscoveryCity, PlaceType
from observer.models.observed_profile import InterestCategory, InterestSignal
from observer.services.profile.constants import (
    CITY_CHARACTERISTICS,
    CONTENT_SATURATION,
    FAVOURITE_SATURATION,
    PLACE_TYPE_TO_INTEREST,
)


class SignalExtractor:
    """
    Turns raw discovery evidence into per-category interest signals.

    Pure functions: no side effects, easy to test.
    """

    @staticmethod
    def from_favourites(
        favourite_place_types: dict[PlaceType, int],
        total_favourites: int = 0,
    ) -> list[InterestSignal]:
        """
        Extract interests from favourited places.

        Each place type counts once per mapped category, so a bar feeds both
        nightlife and foodie.

        Args:
            favourite_place_types: Place type → number of favourites
            total_favourites: Overall favourite count (reserved for weighting)

        Returns:
            One signal per category, weight saturating at 5 favourites
        """
        counts: dict[InterestCategory, int] = defaultdict(int)
        provenance: dict[InterestCategory, list[str]] = defaultdict(list)

        for place_type, count in favourite_place_types.items():
            if count <= 0:
                continue
            for category in PLACE_TYPE_TO_INTEREST.get(place_type, ()):
                counts[category] += count
                provenance[category].append(f"Favourited {count} {place_type.value}(s)")

        return [
            InterestSignal(
                category=category,
                weight=min(1.0, count / FAVOURITE_SATURATION),
                provenance=tuple(provenance[category]),
            )
            for category, count in counts.items()
        ]

    @staticmethod
    def from_cities(cities: list[DiscoveryCity]) -> list[InterestSignal]:
        """
        Extract interests from the cities currently on the trip.

        Every keyword found in a city's name or description adds one unit to
        each category it maps to. Matching is plain substring containment.

        Args:
            cities: Origin, selected stops and destination

        Returns:
            One signal per category, weight saturating at 3 matches
        """
        counts: dict[InterestCategory, int] = defaultdict(int)
        provenance: dict[InterestCategory, list[str]] = defaultdict(list)

        for city in cities:
            text = city.searchable_text()
            for keyword, categories in CITY_CHARACTERISTICS.items():
                if keyword not in text:
                    continue
                for category in categories:
                    counts[category] += 1
                    provenance[category].append(f"Added {city.name} ({keyword})")

        return [
            InterestSignal(
                category=category,
                weight=min(1.0, count / CONTENT_SATURATION),
                provenance=tuple(provenance[category]),
            )
            for category, count in counts.items()
        ]
