from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import List, NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of filesystem entry types that traversal acts on.

    Entries of any other kind (symlinks, devices, sockets) are skipped.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FileEntry:
    """A regular file accepted by the selection rules.

    Only the path is retained. The path is kept exactly as it was built during
    traversal (the root joined with each entry name, using platform-native
    separators), because that string is what the wildcard patterns are matched
    against and what appears in the output.

    Attributes:
        path: Path of the accepted file.

    Example:
        >>> FileEntry("./src/main.rs").path
        './src/main.rs'
    """

    path: str


class TreeEntry(NamedTuple):
    """A single line of a directory tree listing.

    Attributes:
        depth: Nesting level, where the immediate children of the root are at depth 0.
        name: Base name of the file or directory.
    """

    depth: int
    name: str


# Ordered, depth-first listing of a directory subtree
TreeListing = List[TreeEntry]
