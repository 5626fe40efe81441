"""Resolved run configuration.

The CLI layer turns command-line arguments into a single immutable ``Options``
value which is then handed to the traversal, tree and serialization components.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

DEFAULT_ROOT = "."
DEFAULT_OUTPUT_BASENAME = "_concat-output"


@dataclass(frozen=True)
class Options:
    """Immutable configuration for a single concatenation run.

    Collections are normalized on construction: ``extensions`` becomes a frozenset and the
    pattern and root sequences become tuples, so an ``Options`` value cannot be changed
    once traversal begins. An empty ``roots`` sequence is replaced by the current
    directory.

    Attributes:
        extensions: Accepted file extensions without the leading dot. Empty accepts any.
        include_patterns: Wildcard patterns of which at least one must match the path.
        exclude_patterns: Wildcard patterns of which none may match the path.
        include_hidden: Whether files whose base name starts with "." are accepted.
        include_tree: Whether a directory tree of the first root is appended.
        plain_text: Plain-text output instead of the default XML.
        output_path: Output file path, or None for the mode-specific default.
        roots: Files and directories to gather from, in order.
        recursive: Whether directory roots are descended into below their first level.

    Example:
        >>> options = Options(extensions=["rs"])
        >>> options.roots
        ('.',)
        >>> options.resolved_output_path
        '_concat-output.xml'
        >>> Options(plain_text=True, output_path="out.txt").resolved_output_path
        'out.txt'
    """

    extensions: FrozenSet[str] = field(default_factory=frozenset)
    include_patterns: Tuple[str, ...] = ()
    exclude_patterns: Tuple[str, ...] = ()
    include_hidden: bool = False
    include_tree: bool = False
    plain_text: bool = False
    output_path: Optional[str] = None
    roots: Tuple[str, ...] = (DEFAULT_ROOT,)
    recursive: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "extensions", frozenset(self.extensions))
        object.__setattr__(self, "include_patterns", tuple(self.include_patterns))
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))
        roots: Iterable[str] = self.roots or (DEFAULT_ROOT,)
        object.__setattr__(self, "roots", tuple(str(root) for root in roots))

    @property
    def output_format(self) -> str:
        """Name of the selected output format ("text" or "xml")."""
        return "text" if self.plain_text else "xml"

    @property
    def resolved_output_path(self) -> str:
        """Output path to write, falling back to the default name for the selected format."""
        if self.output_path:
            return self.output_path
        return DEFAULT_OUTPUT_BASENAME + (".txt" if self.plain_text else ".xml")
