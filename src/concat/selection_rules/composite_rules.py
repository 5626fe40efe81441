"""Composite selection rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseSelectionRule


class CompositeSelectionRules(BaseSelectionRule):
    """Composite selection rules that combine multiple rule types.

    A path is rejected if ANY of the constituent rules rejects it. Rules are evaluated
    in the order provided and evaluation stops at the first rejection, so the order
    only affects how quickly a decision is reached, never the decision itself.

    Attributes:
        rules (List[BaseSelectionRule]): List of constituent selection rules.

    Example:
        >>> from concat.selection_rules.name_rules import ExtensionRule, HiddenFileRule
        >>> composite = CompositeSelectionRules([HiddenFileRule(), ExtensionRule(["py"])])
        >>> composite.exclude("pkg/module.py")
        False
        >>> composite.exclude("pkg/.secret.py")
        True
        >>> composite.exclude("pkg/notes.txt")
        True
    """

    def __init__(self, rules: Sequence[BaseSelectionRule]):
        """Initialize composite selection rules.

        Args:
            rules: Sequence of selection rules to combine. Each rule must implement
                  the BaseSelectionRule interface.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseSelectionRule.
        """
        if not rules:
            raise ValueError("At least one selection rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseSelectionRule):
                raise TypeError(f"Rule at index {i} must implement BaseSelectionRule, " f"got {type(rule)}")

        self.rules: List[BaseSelectionRule] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be rejected by any constituent rule.

        Args:
            path: File path to check.

        Returns:
            True if ANY of the constituent rules rejects the path, False if ALL rules
            accept it.
        """
        return any(rule.exclude(path) for rule in self.rules)

