from collections import defaultdict
from datetime import datetime

from observer.models.discovery import ActionType, DiscoveryAction, DiscoveryCity
from observer.models.observed_profile import AvoidanceCategory, InferredAvoidance
from observer.services.profile.constants import (
    AVOIDANCE_KEYWORDS,
    AVOIDANCE_MIN_EVIDENCE,
    AVOIDANCE_SATURATION,
    AVOIDANCE_SIGNAL_TAGS,
    SELECTIVE_REMOVAL_COUNT,
)


class AvoidanceExtractor:
    """
    Infers what the user steers away from.

    Two rules feed the same counters:
    - content: a removed city mentions something tied to an avoidance
    - behaviour: many removals read as a selective, crowd-averse traveller

    Nothing is reported until a category has at least two units of evidence.
    """

    @staticmethod
    def extract(
        removed_cities: list[DiscoveryCity],
        actions: list[DiscoveryAction],
        now: datetime,
    ) -> list[InferredAvoidance]:
        """
        Infer avoidances from removed cities and the action log.

        Args:
            removed_cities: Cities the user dropped from the suggestions
            actions: Full action log
            now: Timestamp stamped on every emitted avoidance

        Returns:
            Avoidances in first-seen order, confidence saturating at 4 units
        """
        counts: dict[AvoidanceCategory, int] = defaultdict(int)
        provenance: dict[AvoidanceCategory, list[str]] = defaultdict(list)

        for city in removed_cities:
            text = city.searchable_text()
            for category, keywords in AVOIDANCE_KEYWORDS.items():
                if any(keyword in text for keyword in keywords):
                    counts[category] += 1
                    provenance[category].append(f"Removed {city.name} ({AVOIDANCE_SIGNAL_TAGS[category]})")

        removal_count = sum(1 for action in actions if action.type == ActionType.CITY_REMOVED)
        if removal_count >= SELECTIVE_REMOVAL_COUNT:
            counts[AvoidanceCategory.CROWDS] += 1
            provenance[AvoidanceCategory.CROWDS].append(f"Removed {removal_count} cities (selective traveller)")

        return [
            InferredAvoidance(
                category=category,
                confidence=min(1.0, count / AVOIDANCE_SATURATION),
                signals=tuple(provenance[category]),
                last_updated=now,
            )
            for category, count in counts.items()
            if count >= AVOIDANCE_MIN_EVIDENCE
        ]
