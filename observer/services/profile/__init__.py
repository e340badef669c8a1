"""
Observed Profile - Passive, Rule-Based Inference.

This package infers travel interests, avoidances, pace and behaviour patterns
from what a user does during discovery, without asking them anything.
Deterministic, auditable, recomputed from scratch on every change.
"""

from observer.services.profile.avoidance import AvoidanceExtractor
from observer.services.profile.builder import ProfileBuilder, compute_profile, compute_profile_from_snapshot
from observer.services.profile.evidence import SignalExtractor
from observer.services.profile.labels import get_avoidance_label, get_interest_label
from observer.services.profile.merger import ConfidenceMerger
from observer.services.profile.patterns import BehaviorPatternCalculator
from observer.services.profile.style import AggregateCalculator, TravelStyleEstimator
from observer.services.profile.summary import SummaryGenerator

__all__ = [
    "ProfileBuilder",
    "compute_profile",
    "compute_profile_from_snapshot",
    "SignalExtractor",
    "AvoidanceExtractor",
    "ConfidenceMerger",
    "TravelStyleEstimator",
    "AggregateCalculator",
    "BehaviorPatternCalculator",
    "SummaryGenerator",
    "get_interest_label",
    "get_avoidance_label",
]
