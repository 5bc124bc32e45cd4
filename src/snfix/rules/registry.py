"""Rule registry for managing rewrite rules."""

from snfix.rules.base import RewriteRule


class RuleRegistry:
    """Central registry for all rewrite rules, in application order."""

    _rules: list[RewriteRule] | None = None

    @classmethod
    def _load_rules(cls) -> list[RewriteRule]:
        """Lazy load all rule instances."""
        if cls._rules is None:
            from snfix.rules.generic import (
                BlankLineRule,
                BooleanComparisonRule,
                EmptyStatementRule,
                KeywordSpacingRule,
                LineEndingRule,
                MultipleSemicolonRule,
                TrailingWhitespaceRule,
            )
            from snfix.rules.servicenow import (
                AddQueryConcatenationRule,
                GsNowDateTimeRule,
                GsNowRule,
                GsPrintRule,
                SimpleEncodedQueryRule,
                StrictStringEqualityRule,
                SysIdValueRule,
            )

            cls._rules = [
                LineEndingRule(),
                TrailingWhitespaceRule(),
                MultipleSemicolonRule(),
                EmptyStatementRule(),
                KeywordSpacingRule(),
                BlankLineRule(),
                BooleanComparisonRule(),
                GsNowRule(),
                GsNowDateTimeRule(),
                SysIdValueRule(),
                GsPrintRule(),
                AddQueryConcatenationRule(),
                SimpleEncodedQueryRule(),
                StrictStringEqualityRule(),
            ]
        return cls._rules

    @classmethod
    def get_all(cls) -> list[RewriteRule]:
        """Get all available rules."""
        return list(cls._load_rules())

    @classmethod
    def get_by_names(cls, names: list[str]) -> list[RewriteRule]:
        """Get rules by their names.

        Rules are returned in registry order, not in the order given.

        Args:
            names: List of rule names

        Returns:
            List of matching rule instances

        Raises:
            ValueError: If any rule name is not found
        """
        all_rules = cls._load_rules()
        rule_dict = {rule.rule_name: rule for rule in all_rules}

        unknown = set(names) - set(rule_dict.keys())
        if unknown:
            available = ", ".join(sorted(rule_dict.keys()))
            raise ValueError(f"Unknown rules: {unknown}. Available: {available}")

        return [rule for rule in all_rules if rule.rule_name in names]


def get_rules(names: str | list[str] | None = None) -> list[RewriteRule]:
    """Get rewrite rules.

    Args:
        names: Rule names to filter. Can be:
            - None: Return all rules
            - str: Comma-separated rule names (e.g., "gs_print,gs_now")
            - list[str]: List of rule names (e.g., ["gs_print", "gs_now"])

    Returns:
        List of rule instances

    Raises:
        ValueError: If any rule name is not found

    Examples:
        >>> get_rules()  # All rules
        >>> get_rules("gs_print,gs_now")  # Specific rules
        >>> get_rules(["gs_print", "gs_now"])  # List format
    """
    if names is None:
        return RuleRegistry.get_all()

    if isinstance(names, str):
        names = [name.strip() for name in names.split(",") if name.strip()]

    return RuleRegistry.get_by_names(names)
