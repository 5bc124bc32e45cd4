"""Threshold configuration for the fuzzy match resolver."""

from pydantic import BaseModel, ConfigDict, Field

from snfix.analysis.matching_constants import MatchingDefaults, TierThresholds


class TierThreshold(BaseModel):
    """Distance/similarity thresholds a match must meet to reach a tier."""

    model_config = ConfigDict(frozen=True)

    max_distance: int = Field(ge=0, description="Maximum edit distance")
    min_similarity: float = Field(ge=0.0, le=1.0, description="Minimum similarity")

    def accepts(self, distance: int, similarity: float) -> bool:
        return distance <= self.max_distance and similarity >= self.min_similarity


def _tier(defaults: tuple[int, float]) -> TierThreshold:
    max_distance, min_similarity = defaults
    return TierThreshold(max_distance=max_distance, min_similarity=min_similarity)


class MatcherConfig(BaseModel):
    """Configuration for the fuzzy match resolver."""

    model_config = ConfigDict(frozen=True)

    max_edit_distance: int = Field(
        default=MatchingDefaults.MAX_EDIT_DISTANCE, ge=0, description="Global distance floor"
    )
    min_similarity: float = Field(
        default=MatchingDefaults.MIN_SIMILARITY,
        ge=0.0,
        le=1.0,
        description="Global similarity floor",
    )
    min_margin: float = Field(
        default=MatchingDefaults.MIN_MARGIN,
        ge=0.0,
        le=1.0,
        description="Minimum gap between best and second-best similarity",
    )
    high: TierThreshold = Field(default_factory=lambda: _tier(TierThresholds.HIGH))
    medium: TierThreshold = Field(default_factory=lambda: _tier(TierThresholds.MEDIUM))
    low: TierThreshold = Field(default_factory=lambda: _tier(TierThresholds.LOW))
