"""Constants for fuzzy matching configuration.

This module defines default values and thresholds used throughout
the correction engine to improve maintainability and configurability.
"""


class MatchingDefaults:
    """Global gates applied before any confidence tier is considered."""

    # Maximum edit distance for a candidate to be considered at all
    MAX_EDIT_DISTANCE = 2

    # Minimum similarity (0.0-1.0) for a candidate to be considered at all
    MIN_SIMILARITY = 0.70

    # Minimum gap between best and second-best similarity
    MIN_MARGIN = 0.08


class TierThresholds:
    """(max_distance, min_similarity) per confidence tier, strictest first."""

    # Auto-fix silently
    HIGH = (1, 0.85)

    # Auto-fix, reported with a note
    MEDIUM = (2, 0.75)

    # Suggest only
    LOW = (2, 0.65)
