"""Analysis modules for fuzzy typo correction.

This package provides the correction engine:
- Edit distance and similarity (restricted Damerau-Levenshtein)
- The ServiceNow API dictionary
- Receiver type inference
- Fuzzy matching with confidence tiers
- Scanning and correcting scripts
"""

from snfix.analysis.code_corrector import (
    CodeCorrector,
    analyze_code,
    apply_corrections,
    fuzzy_correct_code,
)
from snfix.analysis.dictionary import ApiDictionary, default_dictionary, load_dictionary
from snfix.analysis.fuzzy_matcher import FuzzyMatcher
from snfix.analysis.match_types import (
    AnalysisResult,
    ConfidenceTier,
    Correction,
    CorrectionKind,
    FuzzyCorrectionResult,
    MatchResult,
)
from snfix.analysis.matcher_config import MatcherConfig, TierThreshold
from snfix.analysis.similarity import damerau_levenshtein_distance, similarity_score
from snfix.analysis.type_inference import get_receiver_type, infer_variable_types

__all__ = [
    "AnalysisResult",
    "ApiDictionary",
    "CodeCorrector",
    "ConfidenceTier",
    "Correction",
    "CorrectionKind",
    "FuzzyCorrectionResult",
    "FuzzyMatcher",
    "MatchResult",
    "MatcherConfig",
    "TierThreshold",
    "analyze_code",
    "apply_corrections",
    "damerau_levenshtein_distance",
    "default_dictionary",
    "fuzzy_correct_code",
    "get_receiver_type",
    "infer_variable_types",
    "load_dictionary",
    "similarity_score",
]
