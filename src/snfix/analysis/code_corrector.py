"""Typo detection and correction for ServiceNow scripts.

The corrector scans raw text for two shapes:

    new <ClassName>(            class instantiation
    <receiver>.<method>(        method call

Each identifier that is not valid in its dictionary is run through the
FuzzyMatcher. Corrections are collected first and applied afterwards in
descending offset order, so that splicing one never moves another.
"""

import logging
import re

from snfix.analysis.dictionary import ApiDictionary, default_dictionary
from snfix.analysis.fuzzy_matcher import FuzzyMatcher
from snfix.analysis.match_types import (
    AnalysisResult,
    ConfidenceTier,
    Correction,
    CorrectionKind,
    FuzzyCorrectionResult,
    MatchResult,
)
from snfix.analysis.matcher_config import MatcherConfig
from snfix.analysis.type_inference import get_receiver_type, infer_variable_types

logger = logging.getLogger(__name__)

CLASS_PATTERN = re.compile(r"\bnew\s+([A-Z]\w*)\s*\(")
METHOD_PATTERN = re.compile(r"(?<![\w$])([\w$]+)\.(\w+)\s*\(")


class CodeCorrector:
    """Finds and applies fuzzy typo corrections in script text.

    A corrector holds only read-only configuration; every call builds its own
    type map and correction list, so one instance can be shared freely.
    """

    def __init__(
        self,
        dictionary: ApiDictionary | None = None,
        config: MatcherConfig | None = None,
    ) -> None:
        """Initialize CodeCorrector.

        Args:
            dictionary: API dictionary (defaults to the bundled ServiceNow dictionary)
            config: Matcher thresholds (defaults to MatcherConfig())
        """
        self.dictionary = dictionary or default_dictionary()
        self.matcher = FuzzyMatcher(self.dictionary, config)

    def analyze_code(self, code: str) -> AnalysisResult:
        """Find all class and method corrections in code.

        Args:
            code: Script source

        Returns:
            AnalysisResult with auto-fixable corrections and low confidence
            suggestions, both sorted by descending start offset.

        Raises:
            TypeError: If code is not a string.
        """
        _require_text(code)
        result = AnalysisResult()
        type_map = infer_variable_types(code, self.dictionary)

        for match in CLASS_PATTERN.finditer(code):
            class_name = match.group(1)
            if self.dictionary.is_class(class_name):
                continue

            found = self.matcher.find_best_class_match(class_name)
            self._collect(
                result,
                found,
                original=class_name,
                start=match.start(1),
                kind=CorrectionKind.CLASS,
                context=None,
            )

        for match in METHOD_PATTERN.finditer(code):
            receiver, method_name = match.group(1), match.group(2)
            context = get_receiver_type(receiver, type_map, self.dictionary)
            if self.dictionary.is_valid_method(method_name, context):
                continue

            found = self.matcher.find_best_method_match(method_name, context)
            self._collect(
                result,
                found,
                original=method_name,
                start=match.start(2),
                kind=CorrectionKind.METHOD,
                context=context,
            )

        result.corrections.sort(key=lambda c: c.start, reverse=True)
        result.suggestions.sort(key=lambda c: c.start, reverse=True)
        return result

    def fuzzy_correct_code(self, code: str) -> FuzzyCorrectionResult:
        """Analyze code, apply auto-fix corrections and describe what happened.

        Args:
            code: Script source

        Returns:
            FuzzyCorrectionResult with corrected text, fix summaries and
            "did you mean" suggestions.
        """
        analysis = self.analyze_code(code)
        processed = apply_corrections(code, analysis.corrections)

        return FuzzyCorrectionResult(
            processed=processed,
            fixes=format_fix_messages(analysis.corrections),
            suggestions=format_suggestion_messages(analysis.suggestions),
            analysis=analysis,
        )

    def _collect(
        self,
        result: AnalysisResult,
        found: MatchResult,
        original: str,
        start: int,
        kind: CorrectionKind,
        context: str | None,
    ) -> None:
        if not found.is_correction:
            return

        correction = Correction(
            original=original,
            corrected=found.match,
            start=start,
            end=start + len(original),
            confidence=found.confidence,
            kind=kind,
            context=context,
            distance=found.distance,
            similarity=found.similarity,
        )
        logger.debug(
            f"{kind.value} {original!r} -> {found.match!r} "
            f"({found.confidence.value}, context={context}, similarity={found.similarity:.3f})"
        )

        if found.should_auto_fix:
            result.corrections.append(correction)
        else:
            result.suggestions.append(correction)


def apply_corrections(code: str, corrections: list[Correction]) -> str:
    """Splice corrections into code in the given order.

    Corrections must be sorted by descending start offset (as returned by
    CodeCorrector.analyze_code) and should only contain auto-fixable entries.
    """
    result = code
    for correction in corrections:
        result = result[: correction.start] + correction.corrected + result[correction.end :]
    return result


def format_fix_messages(corrections: list[Correction]) -> list[str]:
    """Summarize applied corrections, one message per tier."""
    messages = []

    high = [c for c in corrections if c.confidence is ConfidenceTier.HIGH]
    if high:
        messages.append(f"Fixed {len(high)} typo(s): {_unique_labels(high)}")

    medium = [c for c in corrections if c.confidence is ConfidenceTier.MEDIUM]
    if medium:
        messages.append(f"Auto-corrected {len(medium)} likely typo(s): {_unique_labels(medium)}")

    return messages


def format_suggestion_messages(suggestions: list[Correction]) -> list[str]:
    return [
        f'Possible typo: "{s.original}" - did you mean "{s.corrected}"?' for s in suggestions
    ]


def analyze_code(code: str, dictionary: ApiDictionary | None = None) -> AnalysisResult:
    """Find corrections in code using the given (or bundled) dictionary."""
    return CodeCorrector(dictionary).analyze_code(code)


def fuzzy_correct_code(
    code: str,
    dictionary: ApiDictionary | None = None,
    config: MatcherConfig | None = None,
) -> FuzzyCorrectionResult:
    """Correct typos in code using the given (or bundled) dictionary."""
    return CodeCorrector(dictionary, config).fuzzy_correct_code(code)


def _unique_labels(corrections: list[Correction]) -> str:
    return ", ".join(dict.fromkeys(c.label for c in corrections))


def _require_text(code: object) -> None:
    if not isinstance(code, str):
        raise TypeError(f"code must be str, got {type(code).__name__}")
