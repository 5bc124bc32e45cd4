"""Rule applicator for the coarse rewrite pass."""

from dataclasses import dataclass, field
import logging

from snfix.rules.base import RewriteRule

logger = logging.getLogger(__name__)


@dataclass
class RuleApplicationResult:
    """Result of running a sequence of rewrite rules.

    Attributes:
        processed: Text after every rule ran
        fixes: Messages of the rules that changed something, in order
    """

    processed: str
    fixes: list[str] = field(default_factory=list)


class RuleApplicator:
    """Apply rewrite rules to script text, each rule on the previous rule's output."""

    def apply_rules(self, code: str, rules: list[RewriteRule]) -> RuleApplicationResult:
        """Apply rules in order.

        Args:
            code: Script source
            rules: List of RewriteRule instances to apply

        Returns:
            RuleApplicationResult with the rewritten text and fix messages
        """
        result = RuleApplicationResult(processed=code)

        for rule in rules:
            outcome = rule.apply(result.processed)
            if not outcome.changed:
                continue

            logger.debug(f"Rule {rule.rule_name} made {outcome.count} replacement(s)")
            result.processed = outcome.code
            if outcome.message:
                result.fixes.append(outcome.message)

        return result
