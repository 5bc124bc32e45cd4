"""Tests for the rule registry and applicator."""

import pytest

from snfix.rules import RuleApplicator, RuleRegistry, get_rules
from snfix.rules.generic import MultipleSemicolonRule
from snfix.rules.servicenow import GsPrintRule


class TestRuleRegistry:
    """Test rule lookup."""

    def test_all_rules(self):
        """Test every rule is registered with a unique name."""
        rules = get_rules()
        names = [rule.rule_name for rule in rules]
        assert len(names) == 14
        assert len(set(names)) == len(names)
        assert names[0] == "line_endings"

    def test_get_all_returns_copy(self):
        """Test callers cannot change the registry."""
        RuleRegistry.get_all().clear()
        assert len(RuleRegistry.get_all()) == 14

    def test_by_comma_separated_names(self):
        """Test string selection returns registry order."""
        rules = get_rules("gs_print, multiple_semicolons")
        assert [rule.rule_name for rule in rules] == ["multiple_semicolons", "gs_print"]

    def test_by_list(self):
        """Test list selection."""
        rules = get_rules(["gs_now"])
        assert [rule.rule_name for rule in rules] == ["gs_now"]

    def test_unknown_rule(self):
        """Test unknown names raise ValueError listing available rules."""
        with pytest.raises(ValueError, match="Unknown rules"):
            get_rules("gs_print,nope")


class TestRuleApplicator:
    """Test applying several rules in sequence."""

    def test_rules_chain(self):
        """Test each rule sees the previous rule's output."""
        result = RuleApplicator().apply_rules(
            "gs.print('a');;", [MultipleSemicolonRule(), GsPrintRule()]
        )
        assert result.processed == "gs.info('a');"
        assert result.fixes == [
            "Fixed 1 multiple semicolons",
            "Replaced 1 gs.print() with gs.info()",
        ]

    def test_no_rules(self):
        """Test an empty rule list is a no-op."""
        result = RuleApplicator().apply_rules("x;;", [])
        assert result.processed == "x;;"
        assert result.fixes == []
