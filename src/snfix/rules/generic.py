"""Generic JavaScript clean-up rules, not specific to ServiceNow."""

import re

from snfix.rules.base import RegexRewriteRule


class LineEndingRule(RegexRewriteRule):
    """Normalize Windows CRLF line endings to LF."""

    pattern = re.compile(r"\r\n")
    replacement = "\n"
    message = "Normalized line endings to LF"

    @property
    def rule_name(self) -> str:
        return "line_endings"

    @property
    def description(self) -> str:
        return "Normalize CRLF line endings to LF"


class TrailingWhitespaceRule(RegexRewriteRule):
    """Strip spaces and tabs at the end of lines."""

    pattern = re.compile(r"[ \t]+$", re.MULTILINE)
    message = "Removed trailing whitespace from {count} lines"

    @property
    def rule_name(self) -> str:
        return "trailing_whitespace"

    @property
    def description(self) -> str:
        return "Remove trailing whitespace"


class MultipleSemicolonRule(RegexRewriteRule):
    pattern = re.compile(r";{2,}")
    replacement = ";"
    message = "Fixed {count} multiple semicolons"

    @property
    def rule_name(self) -> str:
        return "multiple_semicolons"

    @property
    def description(self) -> str:
        return "Collapse ';;' (or more) into a single ';'"


class EmptyStatementRule(RegexRewriteRule):
    """Remove lines holding nothing but a semicolon."""

    pattern = re.compile(r"^\s*;\s*$", re.MULTILINE)
    message = "Removed empty statements"

    @property
    def rule_name(self) -> str:
        return "empty_statements"

    @property
    def description(self) -> str:
        return "Remove standalone semicolons"


class KeywordSpacingRule(RegexRewriteRule):
    pattern = re.compile(r"\b(if|for|while|switch|catch|typeof)\(")
    replacement = r"\1 ("
    message = "Fixed spacing after keywords"

    @property
    def rule_name(self) -> str:
        return "keyword_spacing"

    @property
    def description(self) -> str:
        return "Insert a space between control flow keywords and '('"


class BlankLineRule(RegexRewriteRule):
    """Reduce runs of 4+ newlines to at most two blank lines."""

    pattern = re.compile(r"\n{4,}")
    replacement = "\n\n\n"
    message = "Reduced excessive blank lines"

    @property
    def rule_name(self) -> str:
        return "blank_lines"

    @property
    def description(self) -> str:
        return "Reduce excessive blank lines"


class BooleanComparisonRule(RegexRewriteRule):
    """Drop redundant '== true' / '=== true' comparisons.

    '!= true' and '!== true' negate the test and are left alone.
    """

    pattern = re.compile(r"\s*(?<![!=<>])===?\s*true\b")
    message = "Simplified boolean comparisons (removed == true)"

    @property
    def rule_name(self) -> str:
        return "boolean_comparison"

    @property
    def description(self) -> str:
        return "Remove '== true' comparisons"
