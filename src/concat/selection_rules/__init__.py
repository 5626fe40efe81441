"""Selection rules for filtering gathered files."""

from .base_rules import BaseSelectionRule
from .composite_rules import CompositeSelectionRules
from .name_rules import ExtensionRule, HiddenFileRule
from .pattern_rules import ExcludePatternRule, IncludePatternRule
from .wildcard import matches

__all__ = [
    "BaseSelectionRule",
    "CompositeSelectionRules",
    "ExcludePatternRule",
    "ExtensionRule",
    "HiddenFileRule",
    "IncludePatternRule",
    "matches",
]
