"""Coarse rewrite rules applied before fuzzy typo correction."""

from snfix.rules.applicator import RuleApplicationResult, RuleApplicator
from snfix.rules.base import RegexRewriteRule, RewriteResult, RewriteRule
from snfix.rules.registry import RuleRegistry, get_rules

__all__ = [
    "RegexRewriteRule",
    "RewriteResult",
    "RewriteRule",
    "RuleApplicationResult",
    "RuleApplicator",
    "RuleRegistry",
    "get_rules",
]
