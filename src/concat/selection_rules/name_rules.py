"""Selection rules based on a file's base name."""

import os
from typing import AbstractSet, Iterable, Optional

from .base_rules import BaseSelectionRule


def file_extension(path: str) -> Optional[str]:
    """Return the extension of a path's base name, without the leading dot.

    The extension is the text after the last "." of the base name. A name without a
    "." has no extension, and neither does a name whose only "." is its first
    character (such as ``.bashrc``). A name ending in "." has an empty extension.

    Args:
        path: File path to inspect.

    Returns:
        The extension, or None if the base name has none.

    Example:
        >>> file_extension("src/main.rs")
        'rs'
        >>> file_extension("archive.tar.gz")
        'gz'
        >>> file_extension("Makefile") is None
        True
        >>> file_extension(".bashrc") is None
        True
    """
    name = os.path.basename(path)
    index = name.rfind(".")
    if index <= 0:
        return None
    return name[index + 1 :]  # noqa: E203


class HiddenFileRule(BaseSelectionRule):
    """Rejects files whose base name starts with ".".

    Only the file's own name is considered; files inside hidden directories are not
    hidden by this definition.

    Example:
        >>> rule = HiddenFileRule()
        >>> rule.exclude("./.env")
        True
        >>> rule.exclude("./.config/settings.toml")
        False
        >>> HiddenFileRule(include_hidden=True).exclude("./.env")
        False
    """

    def __init__(self, include_hidden: bool = False) -> None:
        self.include_hidden = include_hidden

    def exclude(self, path: str) -> bool:
        if self.include_hidden:
            return False
        return os.path.basename(path).startswith(".")

    def is_active(self) -> bool:
        return not self.include_hidden


class ExtensionRule(BaseSelectionRule):
    """Rejects files whose extension is not one of the accepted extensions.

    Comparison is exact and case-sensitive. When at least one extension is configured,
    files without an extension are always rejected. With no extensions configured the
    rule accepts everything.

    Attributes:
        extensions (FrozenSet[str]): Accepted extensions, without leading dots.

    Example:
        >>> rule = ExtensionRule(["rs"])
        >>> rule.exclude("a/b.rs")
        False
        >>> rule.exclude("a/b.txt")
        True
        >>> rule.exclude("a/b")
        True
        >>> ExtensionRule([]).exclude("a/b")
        False
    """

    def __init__(self, extensions: Iterable[str]) -> None:
        self.extensions: AbstractSet[str] = frozenset(extensions)

    def exclude(self, path: str) -> bool:
        if not self.extensions:
            return False
        extension = file_extension(path)
        return extension is None or extension not in self.extensions

    def is_active(self) -> bool:
        return bool(self.extensions)
