"""Sorted tree listing of a directory.

This module provides the FileSystemTree class, which builds an anytree-based tree of
everything below a root directory and renders it as an indented text listing.
"""

import os
from pathlib import Path
from typing import Iterator, List

from anytree import PreOrderIter

from concat.exceptions import RootNotFoundError, TraversalError
from concat.file_system_tree.file_system_node import FileSystemNode
from concat.types import PathType, TreeEntry, TreeListing

TREE_HEADER = "Directory tree:"
INDENT = "  "


class FileSystemTree:
    """A tree representation of a directory structure.

    Entries within each directory are sorted lexicographically by their full path, so
    the listing is reproducible across runs and platforms for the same filesystem state.
    Every entry is included, hidden or not and whatever its extension. Symbolic links are
    listed under their own name but never descended into.

    Nothing is cached: each listing is built from the filesystem at the time it is
    requested.

    Attributes:
        root_path (Path): The root directory.

    Example:
        >>> tree = FileSystemTree("project")  # doctest: +SKIP
        >>> print("\\n".join(tree.stream_tree_representation()))  # doctest: +SKIP
        Directory tree:
        README.md
        src
          main.rs
    """

    def __init__(self, root_path: PathType) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
        """
        self.root_path = Path(root_path)

    def get_tree(self) -> FileSystemNode:
        """Build the filesystem tree from the current contents of the root directory.

        Returns:
            The root node of a freshly built tree.

        Raises:
            RootNotFoundError: If the root path doesn't exist.
            TraversalError: If the root path isn't a directory or a directory can't be read.
        """
        if not self.root_path.exists():
            raise RootNotFoundError(str(self.root_path))
        if not self.root_path.is_dir():
            raise TraversalError(str(self.root_path), "Not a directory")

        root = FileSystemNode(self.root_path.name or str(self.root_path), is_dir=True)
        self._add_children(root, str(self.root_path))
        return root

    def _add_children(self, node: FileSystemNode, directory: str) -> None:
        """Recursively create child nodes for a directory in sorted order."""
        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.path)
        except OSError as e:
            raise TraversalError(directory, e.strerror or str(e)) from e

        for entry in entries:
            # Symlinks to directories are listed as leaves
            child = FileSystemNode(entry.name, parent=node, is_dir=entry.is_dir(follow_symlinks=False))
            if child.is_dir:
                self._add_children(child, entry.path)

    def get_listing(self) -> TreeListing:
        """Get the depth-first, sorted listing of all entries below the root.

        Returns:
            One TreeEntry per file or directory, excluding the root itself.
        """
        root = self.get_tree()
        return [TreeEntry(node.depth - 1, node.name) for node in PreOrderIter(root) if node is not root]

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree listing one line at a time.

        The first line is always the fixed header. Each following line is an entry's
        base name indented by two spaces per nesting level.

        Yields:
            Lines of the tree listing, without line terminators.
        """
        listing = self.get_listing()
        yield TREE_HEADER
        for entry in listing:
            yield f"{INDENT * entry.depth}{entry.name}"


def render_tree(root: PathType) -> List[str]:
    """Render the tree listing of a directory.

    Args:
        root: Directory to list.

    Returns:
        The header line followed by one indented line per entry.

    Raises:
        RootNotFoundError: If the root doesn't exist.
        TraversalError: If the root isn't a directory or a directory can't be read.
    """
    return list(FileSystemTree(root).stream_tree_representation())
