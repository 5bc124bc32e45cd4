"""Data types for fuzzy matching and code correction results.

This module defines the core data structures used by the correction engine:
- ConfidenceTier: How sure the matcher is about a candidate
- MatchResult: Outcome of a single dictionary lookup
- Correction: One proposed text replacement in a script
- AnalysisResult: Corrections and suggestions found in one script
- FuzzyCorrectionResult: Corrected text plus human-readable messages
"""

from dataclasses import dataclass, field
from enum import Enum


class ConfidenceTier(Enum):
    """Confidence of a fuzzy match, from ignored to silently applied."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CorrectionKind(Enum):
    """Syntactic shape a correction targets."""

    CLASS = "class"
    METHOD = "method"


@dataclass(frozen=True)
class MatchResult:
    """Result of matching one identifier against a dictionary.

    Attributes:
        match: Best qualifying candidate, or None when nothing qualifies.
            For an identifier that is already valid this is the identifier itself.
        distance: Edit distance to the best candidate (None if no candidate survived)
        similarity: Similarity to the best candidate (0.0-1.0)
        margin: Best similarity minus second-best similarity
        confidence: Confidence tier of the match
        should_auto_fix: True for high and medium tiers only
    """

    match: str | None
    distance: int | None
    similarity: float
    margin: float
    confidence: ConfidenceTier = ConfidenceTier.NONE
    should_auto_fix: bool = False

    @property
    def is_correction(self) -> bool:
        """True if the result proposes replacing the identifier."""
        return self.match is not None and self.confidence is not ConfidenceTier.NONE


@dataclass(frozen=True)
class Correction:
    """A proposed replacement of one identifier in the source text.

    Attributes:
        original: Misspelled identifier as written
        corrected: Replacement identifier
        start: Start offset of the identifier in the source text
        end: End offset (exclusive)
        confidence: Confidence tier of the underlying match
        kind: Whether a class name or a method name is corrected
        context: Inferred receiver type for method corrections, if any
        distance: Edit distance between original and corrected
        similarity: Similarity between original and corrected
    """

    original: str
    corrected: str
    start: int
    end: int
    confidence: ConfidenceTier
    kind: CorrectionKind
    context: str | None = None
    distance: int = 0
    similarity: float = 1.0

    def line(self, source: str) -> int:
        """1-based line number of the correction within source."""
        return source.count("\n", 0, self.start) + 1

    def column(self, source: str) -> int:
        """1-based column of the correction within source."""
        return self.start - (source.rfind("\n", 0, self.start) + 1) + 1

    @property
    def label(self) -> str:
        return f"{self.original} → {self.corrected}"


@dataclass
class AnalysisResult:
    """Corrections found in a script, both sorted by descending start offset.

    Attributes:
        corrections: High/medium confidence corrections (applied)
        suggestions: Low confidence corrections (reported only)
    """

    corrections: list[Correction] = field(default_factory=list)
    suggestions: list[Correction] = field(default_factory=list)


@dataclass
class FuzzyCorrectionResult:
    """Output of a fuzzy correction run.

    Attributes:
        processed: Text after auto-fix corrections were applied
        fixes: De-duplicated summaries of applied corrections, grouped by tier
        suggestions: One "did you mean" message per low confidence candidate
        analysis: Underlying corrections and suggestions
    """

    processed: str
    fixes: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    analysis: AnalysisResult = field(default_factory=AnalysisResult)
