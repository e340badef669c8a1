"""Tests for travel pace estimation and aggregate derivation."""

from datetime import timedelta

import pytest

from observer.models.discovery import (
    ActionType,
    DiscoveryAction,
    DiscoveryAggregates,
    DiscoveryCity,
    DiscoveryPlace,
    PlaceType,
)
from observer.services.profile.style import AggregateCalculator, TravelStyleEstimator


class TestInferPace:
    @pytest.mark.parametrize(
        "nights, pace",
        [
            (0.0, "fast"),
            (1.0, "fast"),
            (1.99, "fast"),
            (2.0, "moderate"),
            (2.5, "moderate"),
            (3.0, "slow"),
            (7.0, "slow"),
        ],
    )
    def test_thresholds(self, nights: float, pace: str):
        assert TravelStyleEstimator.infer_pace(nights) == pace


class TestEstimate:
    def test_moderate_with_hidden_gems(self):
        style = TravelStyleEstimator.estimate(
            DiscoveryAggregates(average_nights_per_city=2.5, prefers_hidden_gems=True)
        )
        assert style.pace == "moderate"
        assert style.prefers_hidden_gems is True
        assert style.budget_level is None

    def test_defaults_are_fast(self):
        style = TravelStyleEstimator.estimate(DiscoveryAggregates())
        assert style.pace == "fast"
        assert style.prefers_hidden_gems is False


class TestAverageNights:
    def test_uses_nights_then_suggested_then_default(self):
        cities = [
            DiscoveryCity(id="a", name="A", nights=4, suggested_nights=1),
            DiscoveryCity(id="b", name="B", suggested_nights=2),
            DiscoveryCity(id="c", name="C"),
        ]
        assert AggregateCalculator.average_nights_per_city(cities) == pytest.approx(7 / 3)

    def test_explicit_zero_nights_respected(self):
        cities = [DiscoveryCity(id="a", name="A", nights=0, suggested_nights=3)]
        assert AggregateCalculator.average_nights_per_city(cities) == 0.0

    def test_empty_trip(self):
        assert AggregateCalculator.average_nights_per_city([]) == 0.0


class TestHiddenGems:
    def _cities(self):
        return [
            DiscoveryCity(
                id="lisbon",
                name="Lisbon",
                places=[
                    DiscoveryPlace(id="p1", name="Tasca", type=PlaceType.RESTAURANT, is_hidden_gem=True),
                    DiscoveryPlace(id="p2", name="Tower", type=PlaceType.LANDMARK),
                    DiscoveryPlace(id="p3", name="Miradouro", type=PlaceType.VIEWPOINT, is_hidden_gem=True),
                ],
            )
        ]

    def test_majority_hidden_gems(self):
        assert AggregateCalculator.prefers_hidden_gems(self._cities(), {"p1", "p3"}) is True

    def test_half_is_not_a_majority(self):
        assert AggregateCalculator.prefers_hidden_gems(self._cities(), {"p1", "p2"}) is False

    def test_no_favourites(self):
        assert AggregateCalculator.prefers_hidden_gems(self._cities(), set()) is False


class TestFromDiscovery:
    def test_builds_aggregates(self, fixed_now):
        actions = [
            DiscoveryAction(
                type=ActionType.PLACE_FAVOURITED,
                target_id="p1",
                place_type=PlaceType.RESTAURANT,
                timestamp=fixed_now - timedelta(seconds=20),
            ),
            DiscoveryAction(
                type=ActionType.PLACE_FAVOURITED,
                target_id="p2",
                place_type=PlaceType.RESTAURANT,
                timestamp=fixed_now - timedelta(seconds=10),
            ),
            DiscoveryAction(type=ActionType.PLACE_FAVOURITED, target_id="p3", timestamp=fixed_now),
            DiscoveryAction(type=ActionType.CITY_ADDED, target_id="x", timestamp=fixed_now),
        ]
        cities = [DiscoveryCity(id="a", name="A", nights=3), DiscoveryCity(id="b", name="B", nights=2)]

        aggregates = AggregateCalculator.from_discovery(actions, cities, {"p1", "p2"}, total_suggested_cities=6)

        assert aggregates.favourite_place_types == {PlaceType.RESTAURANT: 2}
        assert aggregates.total_favourites == 2
        assert aggregates.average_nights_per_city == pytest.approx(2.5)
        assert aggregates.prefers_hidden_gems is False
        assert aggregates.total_suggested_cities == 6

    def test_hidden_gem_in_deselected_city_still_counts(self):
        lisbon = DiscoveryCity(
            id="lisbon",
            name="Lisbon",
            nights=2,
            places=[DiscoveryPlace(id="p1", name="Tasca", type=PlaceType.RESTAURANT, is_hidden_gem=True)],
        )
        obidos = DiscoveryCity(
            id="obidos",
            name="Obidos",
            is_selected=False,
            places=[DiscoveryPlace(id="p2", name="Bookshop church", type=PlaceType.SHOP, is_hidden_gem=True)],
        )
        porto = DiscoveryCity(
            id="porto",
            name="Porto",
            nights=4,
            places=[DiscoveryPlace(id="p3", name="Bridge", type=PlaceType.LANDMARK)],
        )

        trip_only = AggregateCalculator.from_discovery([], [lisbon, porto], {"p1", "p2", "p3"}, 3)
        aggregates = AggregateCalculator.from_discovery(
            [], [lisbon, porto], {"p1", "p2", "p3"}, 3, all_cities=[lisbon, obidos, porto]
        )

        assert trip_only.prefers_hidden_gems is False
        assert aggregates.prefers_hidden_gems is True
        assert aggregates.average_nights_per_city == pytest.approx(3.0)


class TestFavouriteCounts:
    def test_unknown_place_type_counted_as_other(self, fixed_now):
        actions = [
            DiscoveryAction(type=ActionType.PLACE_FAVOURITED, target_id="p1", place_type="spa", timestamp=fixed_now),
            DiscoveryAction(
                type=ActionType.PLACE_FAVOURITED, target_id="p2", place_type="restaurant", timestamp=fixed_now
            ),
        ]
        counts = AggregateCalculator.favourite_place_type_counts(actions)
        assert counts == {PlaceType.OTHER: 1, PlaceType.RESTAURANT: 1}

    def test_unknown_place_on_city_becomes_other(self):
        place = DiscoveryPlace(id="p1", name="Thermal baths", type="spa")
        assert place.type == PlaceType.OTHER
