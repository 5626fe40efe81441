"""Accept/reject decision for gathered files.

The filter composes four rules, applied in order and each a hard reject:

1. hidden files (base name starting with ".") unless hidden files are included,
2. files whose extension is not among the configured extensions,
3. files matching none of the include patterns, when any are configured,
4. files matching any exclude pattern; this check always runs and always wins.
"""

from typing import List

from concat.options import Options
from concat.selection_rules.base_rules import BaseSelectionRule
from concat.selection_rules.composite_rules import CompositeSelectionRules
from concat.selection_rules.name_rules import ExtensionRule, HiddenFileRule
from concat.selection_rules.pattern_rules import ExcludePatternRule, IncludePatternRule


def build_selection_rules(options: Options) -> CompositeSelectionRules:
    """Assemble the selection rules described by the options.

    Rules whose option is empty accept every path and are left out. The exclude rule
    is always kept, so the composite is never empty.

    Args:
        options: Resolved run configuration.

    Returns:
        Composite rules rejecting a path as soon as any constituent rule rejects it.

    Example:
        >>> rules = build_selection_rules(Options(extensions=["rs"], exclude_patterns=["*/target/*"]))
        >>> [type(rule).__name__ for rule in rules.rules]
        ['HiddenFileRule', 'ExtensionRule', 'ExcludePatternRule']
        >>> rules.exclude("./target/main.rs")
        True
    """
    filters: List[BaseSelectionRule] = [
        HiddenFileRule(options.include_hidden),
        ExtensionRule(options.extensions),
        IncludePatternRule(options.include_patterns),
    ]
    active = [rule for rule in filters if rule.is_active()]
    return CompositeSelectionRules(active + [ExcludePatternRule(options.exclude_patterns)])


def should_include(path: str, options: Options) -> bool:
    """Decide whether a file belongs in the output.

    Args:
        path: Full path string of the file, as built during traversal.
        options: Resolved run configuration.

    Returns:
        True if the file passes every selection rule.

    Example:
        >>> options = Options(extensions=["rs"])
        >>> should_include("a/b.rs", options)
        True
        >>> should_include("a/b.txt", options)
        False
        >>> should_include(".env", Options())
        False
        >>> should_include(".env", Options(include_hidden=True))
        True
    """
    return not build_selection_rules(options).exclude(path)
