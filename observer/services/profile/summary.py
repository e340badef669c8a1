from observer.models.observed_profile import (
    BehaviorPatterns,
    InferredAvoidance,
    InterestCategory,
    TravelStyle,
)
from observer.services.profile.constants import FAVOURITE_RATE_NOTABLE, REMOVAL_RATE_NOTABLE
from observer.services.profile.labels import (
    AVOIDANCE_SUMMARY_LABELS,
    INTEREST_SUMMARY_LABELS,
    PACE_SUMMARY_LABELS,
)


class SummaryGenerator:
    """
    Renders a profile as a short paragraph for assistant prompts.

    Clause order is fixed: interests, avoidances, pace, hidden gems,
    favouriting habit, selectivity.
    """

    @staticmethod
    def generate(
        top_interests: list[InterestCategory],
        avoidances: list[InferredAvoidance],
        travel_style: TravelStyle,
        patterns: BehaviorPatterns,
    ) -> str:
        lines: list[str] = []

        if top_interests:
            lines.append("Interests: " + ", ".join(INTEREST_SUMMARY_LABELS[c] for c in top_interests))

        if avoidances:
            lines.append("Prefers to avoid: " + ", ".join(AVOIDANCE_SUMMARY_LABELS[a.category] for a in avoidances))

        lines.append(f"Travel style: {PACE_SUMMARY_LABELS[travel_style.pace]}")

        if travel_style.prefers_hidden_gems:
            lines.append("Prefers hidden gems over popular tourist spots")

        if patterns.favourite_rate > FAVOURITE_RATE_NOTABLE:
            lines.append("Actively favourites places they like")

        if patterns.removal_rate > REMOVAL_RATE_NOTABLE:
            lines.append("Selective about city choices")

        return ". ".join(lines) + "."
