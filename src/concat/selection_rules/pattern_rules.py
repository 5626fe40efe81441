"""Selection rules based on wildcard patterns matched against the full path."""

from typing import Iterable, List

from .base_rules import BaseSelectionRule
from .wildcard import matches


class PatternRule(BaseSelectionRule):
    """Common storage for rules driven by an ordered list of wildcard patterns.

    Patterns are evaluated in the order given.

    Attributes:
        patterns (List[str]): The configured patterns, in order.
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: List[str] = list(patterns)

    def any_match(self, path: str) -> bool:
        """Check whether any configured pattern matches the path.

        Args:
            path: Full path string to match.

        Returns:
            True if at least one pattern matches.
        """
        return any(matches(pattern, path) for pattern in self.patterns)

    def is_active(self) -> bool:
        return bool(self.patterns)


class IncludePatternRule(PatternRule):
    """Rejects paths that match none of the include patterns.

    With no patterns configured the rule accepts everything.

    Example:
        >>> rule = IncludePatternRule(["*.rs", "*/Cargo.toml"])
        >>> rule.exclude("./src/main.rs")
        False
        >>> rule.exclude("./README.md")
        True
        >>> IncludePatternRule().exclude("./README.md")
        False
    """

    def exclude(self, path: str) -> bool:
        if not self.patterns:
            return False
        return not self.any_match(path)


class ExcludePatternRule(PatternRule):
    """Rejects paths that match any of the exclude patterns.

    Example:
        >>> rule = ExcludePatternRule(["*/target/*"])
        >>> rule.exclude("./target/debug/build.rs")
        True
        >>> rule.exclude("./src/main.rs")
        False
    """

    def exclude(self, path: str) -> bool:
        return self.any_match(path)
