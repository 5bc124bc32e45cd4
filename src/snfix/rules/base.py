"""Base classes for coarse rewrite rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import re


@dataclass
class RewriteResult:
    """Outcome of applying one rule.

    Attributes:
        code: Text after the rewrite
        count: Number of replacements made
        message: Human-readable fix description, or None if nothing changed
    """

    code: str
    count: int
    message: str | None = None

    @property
    def changed(self) -> bool:
        return self.count > 0


class RewriteRule(ABC):
    """Abstract base class for rewrite rules.

    Each rule performs one textual clean-up on a script before fuzzy typo
    correction runs. Subclasses must implement rule_name, description, and apply.

    Example:
        >>> class SemicolonRule(RewriteRule):
        ...     @property
        ...     def rule_name(self) -> str:
        ...         return "semicolons"
        ...
        ...     @property
        ...     def description(self) -> str:
        ...         return "Collapse repeated semicolons"
        ...
        ...     def apply(self, code: str) -> RewriteResult:
        ...         new_code, count = re.subn(";{2,}", ";", code)
        ...         return RewriteResult(new_code, count, f"Fixed {count} semicolons")
    """

    @property
    @abstractmethod
    def rule_name(self) -> str:
        """Return unique rule identifier (e.g., "gs_print").

        Used to select rules on the command line. Use snake_case.
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return human-readable description of what this rule rewrites."""
        pass

    @abstractmethod
    def apply(self, code: str) -> RewriteResult:
        """Apply this rule to script text.

        Args:
            code: Script source

        Returns:
            RewriteResult with the rewritten text
        """
        pass

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}(name='{self.rule_name}')"


class RegexRewriteRule(RewriteRule):
    """Rule that replaces every match of a single pattern.

    Subclasses set pattern, replacement (a ``re`` template) and message
    (formatted with ``count``), or override replace() for conditional rewrites.
    A match that replace() returns unchanged is not counted.
    """

    pattern: re.Pattern[str]
    replacement: str = ""
    message: str

    def replace(self, match: re.Match[str]) -> str:
        return match.expand(self.replacement)

    def apply(self, code: str) -> RewriteResult:
        count = 0

        def substitute(match: re.Match[str]) -> str:
            nonlocal count
            new_text = self.replace(match)
            if new_text != match.group(0):
                count += 1
            return new_text

        new_code = self.pattern.sub(substitute, code)
        if count == 0:
            return RewriteResult(code=code, count=0)
        return RewriteResult(code=new_code, count=count, message=self.message.format(count=count))
