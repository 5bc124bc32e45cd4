"""Correction pipeline: coarse rewrite rules followed by fuzzy typo correction."""

from dataclasses import dataclass, field
import logging
from pathlib import Path

from snfix.analysis.code_corrector import CodeCorrector
from snfix.analysis.dictionary import ApiDictionary, default_dictionary, load_dictionary
from snfix.analysis.match_types import AnalysisResult
from snfix.core.config import MatcherConfig, load_config
from snfix.rules import RewriteRule, RuleApplicator, get_rules

logger = logging.getLogger(__name__)


@dataclass
class CorrectionOutput:
    """Final output of correct_script.

    Attributes:
        processed: Corrected script text
        fixes: Messages for every change that was applied (rules first)
        suggestions: "Possible typo" messages for changes that were not applied
        analysis: Fuzzy corrections/suggestions with offsets into the text the
            fuzzy pass ran on (the output of the rewrite rules)
    """

    processed: str
    fixes: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    analysis: AnalysisResult = field(default_factory=AnalysisResult)


def correct_script(
    code: str,
    *,
    dictionary: ApiDictionary | None = None,
    config: MatcherConfig | None = None,
    rules: list[RewriteRule] | None = None,
    fuzzy: bool = True,
) -> CorrectionOutput:
    """Correct a ServiceNow script.

    Rewrite rules run first; the fuzzy typo pass then runs on their output.

    Args:
        code: Script source
        dictionary: API dictionary (defaults to the bundled one)
        config: Matcher thresholds
        rules: Rewrite rules to apply (None = all registered rules, [] = none)
        fuzzy: Run the fuzzy typo pass

    Returns:
        CorrectionOutput

    Raises:
        TypeError: If code is not a string.
    """
    if not isinstance(code, str):
        raise TypeError(f"code must be str, got {type(code).__name__}")

    if rules is None:
        rules = get_rules()

    rewritten = RuleApplicator().apply_rules(code, rules)
    output = CorrectionOutput(processed=rewritten.processed, fixes=list(rewritten.fixes))

    if fuzzy:
        corrected = CodeCorrector(dictionary, config).fuzzy_correct_code(rewritten.processed)
        output.processed = corrected.processed
        output.fixes.extend(corrected.fixes)
        output.suggestions.extend(corrected.suggestions)
        output.analysis = corrected.analysis

    logger.debug(
        f"Pipeline finished: {len(output.fixes)} fix message(s), "
        f"{len(output.suggestions)} suggestion(s)"
    )
    return output


def load_settings(
    config_path: Path | None = None, dictionary_path: Path | None = None
) -> tuple[ApiDictionary, MatcherConfig]:
    """Resolve the dictionary and matcher thresholds for a command run.

    An explicit dictionary_path wins over Config.dictionary_path; without
    either the bundled dictionary is used.

    Raises:
        FileNotFoundError: If an explicit config or dictionary file is missing
        ValueError: If a file content is invalid
    """
    config = load_config(config_path)
    dictionary_path = dictionary_path or config.dictionary_path

    if dictionary_path is None:
        dictionary = default_dictionary()
    else:
        dictionary = load_dictionary(dictionary_path)

    return dictionary, config.matcher
