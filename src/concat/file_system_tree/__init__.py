"""Directory tree listing of a single root.

This package builds a sorted tree of a directory's contents and renders it as an
indented text listing. The listing is a structural map: it is not affected by the
selection rules used to choose which file contents are concatenated.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree, render_tree

__all__ = ["FileSystemNode", "FileSystemTree", "render_tree"]
