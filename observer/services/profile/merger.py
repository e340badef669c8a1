from datetime import datetime

from observer.models.observed_profile import InferredInterest, InterestCategory, InterestSignal
from observer.services.profile.constants import CONFIDENCE_LOW, MERGE_DECAY, TOP_INTERESTS_LIMIT


class ConfidenceMerger:
    """
    Folds signals from every extractor into one confidence per category.

    The first source for a category sets its confidence; each further source
    adds half of its own weight, capped at 1.0. Corroborated categories
    therefore outrank single-source ones at equal raw counts.
    """

    @staticmethod
    def merge(signals: list[InterestSignal], now: datetime) -> list[InferredInterest]:
        """
        Merge signals into reportable interests.

        Args:
            signals: Signals in extractor order
            now: Timestamp stamped on every interest

        Returns:
            Interests with confidence >= 0.3, highest first. Ties keep the
            order in which categories were first seen.
        """
        confidences: dict[InterestCategory, float] = {}
        provenance: dict[InterestCategory, list[str]] = {}

        for signal in signals:
            if signal.category in confidences:
                confidences[signal.category] = min(1.0, confidences[signal.category] + signal.weight * MERGE_DECAY)
                provenance[signal.category].extend(signal.provenance)
            else:
                confidences[signal.category] = signal.weight
                provenance[signal.category] = list(signal.provenance)

        interests = [
            InferredInterest(
                category=category,
                confidence=confidence,
                signals=tuple(provenance[category]),
                last_updated=now,
            )
            for category, confidence in confidences.items()
            if confidence >= CONFIDENCE_LOW
        ]
        return sorted(interests, key=lambda i: i.confidence, reverse=True)

    @staticmethod
    def top_interests(interests: list[InferredInterest], limit: int = TOP_INTERESTS_LIMIT) -> list[InterestCategory]:
        """Get top N categories from an already sorted interest list."""
        return [interest.category for interest in interests[:limit]]
