"""Fuzzy matching of identifiers against the API dictionary.

Candidates are scored with case-insensitive Damerau-Levenshtein similarity and
sorted into confidence tiers:

- high: distance <= 1 and similarity >= 0.85, fixed silently
- medium: distance <= 2 and similarity >= 0.75, fixed with a note
- low: distance <= 2 and similarity >= 0.65, suggested only

A candidate must also pass the global floor (distance <= 2, similarity >= 0.70)
and beat the runner-up by a minimum margin, so that typos sitting between two
valid names are never resolved by guessing.
"""

from collections.abc import Iterable
import logging

from snfix.analysis.dictionary import ApiDictionary
from snfix.analysis.match_types import ConfidenceTier, MatchResult
from snfix.analysis.matcher_config import MatcherConfig
from snfix.analysis.similarity import damerau_levenshtein_distance, similarity_from_distance

logger = logging.getLogger(__name__)


class FuzzyMatcher:
    """Finds the closest valid class or method name for a possibly misspelled one."""

    def __init__(self, dictionary: ApiDictionary, config: MatcherConfig | None = None) -> None:
        """Initialize FuzzyMatcher.

        Args:
            dictionary: Dictionary of valid names
            config: Thresholds (defaults to MatcherConfig())
        """
        self.dictionary = dictionary
        self.config = config or MatcherConfig()

    def find_best_match(self, identifier: str, candidates: Iterable[str]) -> MatchResult:
        """Find the best fuzzy match for identifier among candidates.

        Args:
            identifier: Identifier to match (possibly misspelled)
            candidates: Valid names, in priority order for exact ties

        Returns:
            MatchResult. An identifier that is already valid yields a perfect
            match with tier NONE (nothing to do); an identifier with no
            qualifying candidate yields match=None.
        """
        candidates = tuple(candidates)
        if identifier in candidates:
            return MatchResult(match=identifier, distance=0, similarity=1.0, margin=1.0)

        max_distance = self.config.max_edit_distance
        identifier_lower = identifier.lower()

        best_match: str | None = None
        best_distance: int | None = None
        best_similarity = 0.0
        second_best_similarity = 0.0

        for candidate in candidates:
            # Length difference alone exceeds the distance budget
            if abs(len(identifier) - len(candidate)) > max_distance:
                continue

            distance = damerau_levenshtein_distance(identifier_lower, candidate.lower())
            similarity = similarity_from_distance(distance, len(identifier), len(candidate))

            if similarity > best_similarity:
                second_best_similarity = best_similarity
                best_similarity = similarity
                best_distance = distance
                best_match = candidate
            elif similarity > second_best_similarity:
                second_best_similarity = similarity

        margin = best_similarity - second_best_similarity
        confidence = self._classify(best_distance, best_similarity, margin)

        if confidence is ConfidenceTier.NONE:
            return MatchResult(
                match=None,
                distance=best_distance,
                similarity=best_similarity,
                margin=margin,
            )

        return MatchResult(
            match=best_match,
            distance=best_distance,
            similarity=best_similarity,
            margin=margin,
            confidence=confidence,
            should_auto_fix=confidence in (ConfidenceTier.HIGH, ConfidenceTier.MEDIUM),
        )

    def find_best_class_match(self, class_name: str) -> MatchResult:
        return self.find_best_match(class_name, self.dictionary.class_names)

    def find_best_method_match(self, method_name: str, context: str | None = None) -> MatchResult:
        """Find the best match for a method, scoped to context when it has a dictionary."""
        return self.find_best_match(method_name, self.dictionary.methods_for(context))

    def _classify(self, distance: int | None, similarity: float, margin: float) -> ConfidenceTier:
        config = self.config
        if distance is None:
            return ConfidenceTier.NONE
        if distance > config.max_edit_distance or similarity < config.min_similarity:
            return ConfidenceTier.NONE
        if margin < config.min_margin:
            logger.debug(f"Ambiguous match rejected (margin {margin:.3f})")
            return ConfidenceTier.NONE

        for tier, threshold in (
            (ConfidenceTier.HIGH, config.high),
            (ConfidenceTier.MEDIUM, config.medium),
            (ConfidenceTier.LOW, config.low),
        ):
            if threshold.accepts(distance, similarity):
                return tier

        return ConfidenceTier.NONE
