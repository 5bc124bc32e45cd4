"""ServiceNow best-practice rewrite rules.

These replace deprecated or fragile API usage with the recommended form,
e.g. ``gs.now()`` with ``new GlideDateTime().getDisplayValue()``.
"""

import re

from snfix.rules.base import RegexRewriteRule

# Encoded query operators that cannot be expressed as addQuery(field, value)
ENCODED_QUERY_OPERATORS = (
    "^",
    "!=",
    "LIKE",
    "IN",
    "STARTSWITH",
    "ENDSWITH",
    "CONTAINS",
    "ORDERBY",
    "NULL",
)


class GsNowRule(RegexRewriteRule):
    pattern = re.compile(r"\bgs\.now\s*\(\s*\)")
    replacement = "new GlideDateTime().getDisplayValue()"
    message = "Replaced {count} gs.now() with GlideDateTime"

    @property
    def rule_name(self) -> str:
        return "gs_now"

    @property
    def description(self) -> str:
        return "Replace gs.now() with new GlideDateTime().getDisplayValue()"


class GsNowDateTimeRule(RegexRewriteRule):
    pattern = re.compile(r"\bgs\.nowDateTime\s*\(\s*\)")
    replacement = "new GlideDateTime().getValue()"
    message = "Replaced {count} gs.nowDateTime() with GlideDateTime"

    @property
    def rule_name(self) -> str:
        return "gs_now_date_time"

    @property
    def description(self) -> str:
        return "Replace gs.nowDateTime() with new GlideDateTime().getValue()"


class SysIdValueRule(RegexRewriteRule):
    pattern = re.compile(r"""\.getValue\s*\(\s*['"]sys_id['"]\s*\)""")
    replacement = ".getUniqueValue()"
    message = "Replaced {count} getValue('sys_id') with getUniqueValue()"

    @property
    def rule_name(self) -> str:
        return "sys_id_value"

    @property
    def description(self) -> str:
        return "Replace getValue('sys_id') with getUniqueValue()"


class GsPrintRule(RegexRewriteRule):
    pattern = re.compile(r"\bgs\.print\s*\(")
    replacement = "gs.info("
    message = "Replaced {count} gs.print() with gs.info()"

    @property
    def rule_name(self) -> str:
        return "gs_print"

    @property
    def description(self) -> str:
        return "Replace gs.print() with gs.info()"


class AddQueryConcatenationRule(RegexRewriteRule):
    """Rewrite addQuery('field=' + value) as addQuery('field', value)."""

    pattern = re.compile(r"""\.addQuery\s*\(\s*['"](\w+)=['"]\s*\+\s*(\w+)\s*\)""")
    replacement = r".addQuery('\1', \2)"
    message = "Fixed {count} string concatenation in addQuery() calls"

    @property
    def rule_name(self) -> str:
        return "add_query_concatenation"

    @property
    def description(self) -> str:
        return "Split 'field=' + value concatenation in addQuery() into two arguments"


class SimpleEncodedQueryRule(RegexRewriteRule):
    """Rewrite addEncodedQuery('field=value') as addQuery('field', 'value').

    Only plain equality is rewritten; any encoded query operator in the value
    leaves the call untouched.
    """

    pattern = re.compile(r"""\.addEncodedQuery\s*\(\s*['"](\w+)=([^'^"]+)['"]\s*\)""")
    message = "Simplified {count} addEncodedQuery() to addQuery()"

    def replace(self, match: re.Match[str]) -> str:
        field, value = match.group(1), match.group(2)
        if any(operator in value for operator in ENCODED_QUERY_OPERATORS):
            return match.group(0)
        return f".addQuery('{field}', '{value}')"

    @property
    def rule_name(self) -> str:
        return "simple_encoded_query"

    @property
    def description(self) -> str:
        return "Replace single-condition addEncodedQuery() with addQuery()"


class StrictStringEqualityRule(RegexRewriteRule):
    pattern = re.compile(r"""(['"][^'"]*['"])\s*==\s*(['"][^'"]*['"])""")
    replacement = r"\1 === \2"
    message = "Converted {count} string comparison(s) to strict equality (===)"

    @property
    def rule_name(self) -> str:
        return "strict_string_equality"

    @property
    def description(self) -> str:
        return "Use === when comparing two string literals"
