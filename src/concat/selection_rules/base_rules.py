from abc import ABC, abstractmethod


class BaseSelectionRule(ABC):
    """
    Abstract base class defining the interface for file selection rules.

    Each rule answers a single question about a file path: should this file be left out
    of the output? Concrete rules cover hidden files, extensions and include/exclude
    wildcard patterns; ``CompositeSelectionRules`` combines them so that a file is
    rejected as soon as any rule rejects it.

    Rules are pure: they look only at the path string they are given and at their own
    configuration, never at the filesystem.

    Example:
        >>> class TmpFileRule(BaseSelectionRule):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.tmp')
        >>> rule = TmpFileRule()
        >>> rule.exclude("build/temp.tmp")
        True
        >>> rule.exclude("main.py")
        False
        >>> rule.is_active()
        True
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given file path should be rejected.

        Args:
            path (str): The file path to check, exactly as built during traversal
                (platform-native separators, prefixed by the root it was found under).

        Returns:
            bool: True if the file should be rejected, False if this rule accepts it.
        """
        pass

    def is_active(self) -> bool:
        """
        Check whether this rule is configured to reject anything at all.

        Rules whose governing option is empty (no extensions, no patterns) are inactive
        and accept every path. The default implementation assumes the rule is active.

        Returns:
            bool: True if the rule can reject paths, False if it accepts everything.
        """
        return True
