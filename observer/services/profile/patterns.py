from datetime import datetime

from observer.models.discovery import ActionType, DiscoveryAction, DiscoveryAggregates
from observer.models.observed_profile import BehaviorPatterns
from observer.models.view_tracking import ViewTimeTracker
from observer.services.profile.constants import ACTIVE_WINDOW


class BehaviorPatternCalculator:
    """
    Ratio statistics over the action log.

    Rates never divide by zero: a missing denominator gives 0.0, and both
    rates are capped at 1.0.
    """

    @staticmethod
    def calculate(
        actions: list[DiscoveryAction],
        aggregates: DiscoveryAggregates,
        now: datetime,
        view_time: ViewTimeTracker | None = None,
    ) -> BehaviorPatterns:
        """
        Calculate behaviour patterns.

        Args:
            actions: Full action log, oldest first
            aggregates: Session counters (suggested city count)
            now: Evaluation time for the activity check
            view_time: Dwell tracker, if the host tracks viewing

        Returns:
            BehaviorPatterns for this recomputation
        """
        favourites = sum(1 for a in actions if a.type == ActionType.PLACE_FAVOURITED)
        removals = sum(1 for a in actions if a.type == ActionType.CITY_REMOVED)
        views = sum(1 for a in actions if a.type == ActionType.CITY_PREVIEW_VIEWED)

        favourite_rate = min(1.0, favourites / views) if views > 0 else 0.0
        suggested = aggregates.total_suggested_cities
        removal_rate = min(1.0, removals / suggested) if suggested > 0 else 0.0

        return BehaviorPatterns(
            total_actions_observed=len(actions),
            favourite_rate=favourite_rate,
            removal_rate=removal_rate,
            average_view_time=view_time.average_view_time() if view_time is not None else 0.0,
            is_active=BehaviorPatternCalculator.is_active(actions, now),
        )

    @staticmethod
    def is_active(actions: list[DiscoveryAction], now: datetime) -> bool:
        """True when the most recent action happened within the last minute."""
        if not actions:
            return False
        return now - actions[-1].timestamp < ACTIVE_WINDOW
