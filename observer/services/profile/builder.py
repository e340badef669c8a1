from loguru import logger

from observer.models.discovery import DiscoveryAction, DiscoveryAggregates, DiscoveryCity
from observer.models.observed_profile import ObservedProfile
from observer.models.snapshot import DiscoverySnapshot
from observer.models.view_tracking import ViewTimeTracker
from observer.services.profile.avoidance import AvoidanceExtractor
from observer.services.profile.evidence import SignalExtractor
from observer.services.profile.merger import ConfidenceMerger
from observer.services.profile.patterns import BehaviorPatternCalculator
from observer.services.profile.style import TravelStyleEstimator
from observer.services.profile.summary import SummaryGenerator
from observer.utils import Clock, ensure_utc, utc_now


class ProfileBuilder:
    """
    Builds the observed profile from a discovery session.

    Design principles:
    - Recomputed from scratch on every call, never patched
    - Same inputs and clock give an identical profile
    - The clock is read once, so every timestamp in a profile matches
    """

    def __init__(self, clock: Clock = utc_now):
        """
        Initialize profile builder.

        Args:
            clock: Source of "now" for activity checks and timestamps
        """
        self.clock = clock

    def build_profile(
        self,
        actions: list[DiscoveryAction],
        aggregates: DiscoveryAggregates,
        cities: list[DiscoveryCity],
        removed_cities: list[DiscoveryCity] | None = None,
        view_time: ViewTimeTracker | None = None,
    ) -> ObservedProfile:
        """
        Build the profile.

        Args:
            actions: Action log, oldest first
            aggregates: Session counters kept by the store
            cities: Current trip (origin, selected stops, destination)
            removed_cities: Suggestions the user dropped
            view_time: Dwell tracker owned by the host, if any

        Returns:
            A fresh ObservedProfile
        """
        now = ensure_utc(self.clock())
        removed_cities = removed_cities or []

        signals = [
            *SignalExtractor.from_favourites(aggregates.favourite_place_types, aggregates.total_favourites),
            *SignalExtractor.from_cities(cities),
        ]
        interests = ConfidenceMerger.merge(signals, now)
        top_interests = ConfidenceMerger.top_interests(interests)

        avoidances = AvoidanceExtractor.extract(removed_cities, actions, now)
        travel_style = TravelStyleEstimator.estimate(aggregates)
        patterns = BehaviorPatternCalculator.calculate(actions, aggregates, now, view_time)

        summary = SummaryGenerator.generate(top_interests, avoidances, travel_style, patterns)

        logger.debug(
            f"Observed profile: {len(actions)} actions, {len(interests)} interests, "
            f"{len(avoidances)} avoidances, pace={travel_style.pace}"
        )

        return ObservedProfile(
            interests=tuple(interests),
            top_interests=tuple(top_interests),
            avoidances=tuple(avoidances),
            travel_style=travel_style,
            patterns=patterns,
            view_time_by_type=view_time.totals if view_time is not None else (),
            summary_for_ai=summary,
            generated_at=now,
        )

    def build_from_snapshot(self, snapshot: DiscoverySnapshot) -> ObservedProfile:
        return self.build_profile(
            snapshot.actions,
            snapshot.aggregates,
            snapshot.cities,
            snapshot.removed_cities,
            snapshot.view_time,
        )


def compute_profile(
    actions: list[DiscoveryAction],
    aggregates: DiscoveryAggregates,
    cities: list[DiscoveryCity],
    removed_cities: list[DiscoveryCity] | None = None,
    clock: Clock = utc_now,
    view_time: ViewTimeTracker | None = None,
) -> ObservedProfile:
    """Compute an observed profile. Hosts call this whenever their session state changes."""
    return ProfileBuilder(clock).build_profile(actions, aggregates, cities, removed_cities, view_time)


def compute_profile_from_snapshot(snapshot: DiscoverySnapshot, clock: Clock = utc_now) -> ObservedProfile:
    return ProfileBuilder(clock).build_from_snapshot(snapshot)
