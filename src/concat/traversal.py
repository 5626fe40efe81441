"""Recursive collection of the files to concatenate.

Traversal visits each root in the order given. A root that is a regular file is
checked against the selection rules directly. A root that is a directory is walked
depth-first: entries are taken in the order the filesystem yields them (no sorting),
and each subdirectory is fully processed before its next sibling. Symbolic links and
other non-regular entries inside a directory are skipped without descending.

The resulting order depends on raw directory enumeration order and is therefore
platform-dependent, but repeated runs over the same filesystem state produce the same
list. The tree listing uses a different, sorted order (see ``file_system_tree``).
"""

import logging
import os
from typing import Iterator, List, Optional, Sequence

from concat.exceptions import RootNotFoundError, TraversalError
from concat.file_filter import build_selection_rules
from concat.options import Options
from concat.selection_rules.base_rules import BaseSelectionRule
from concat.types import FileEntry, FileType

logger = logging.getLogger(__name__)


class FileGatherer:
    """Walks the configured roots and yields the files accepted by the selection rules.

    Attributes:
        options (Options): Resolved run configuration.
        selection_rules (BaseSelectionRule): Rules deciding which files are rejected.
            Built from the options unless supplied explicitly.

    Example:
        >>> gatherer = FileGatherer(Options(extensions=["py"], roots=["src"]))  # doctest: +SKIP
        >>> [entry.path for entry in gatherer.gather()]  # doctest: +SKIP
        ['src/concat/__init__.py', 'src/concat/options.py']
    """

    def __init__(self, options: Options, selection_rules: Optional[BaseSelectionRule] = None) -> None:
        self.options = options
        self.selection_rules = selection_rules if selection_rules is not None else build_selection_rules(options)

    def gather(self, roots: Optional[Sequence[str]] = None) -> List[FileEntry]:
        """Collect the accepted files of all roots into one ordered list.

        Args:
            roots: Roots to walk. Defaults to the roots of the options.

        Returns:
            Accepted files, ordered root by root in the order the roots were given.

        Raises:
            RootNotFoundError: If a root is neither a regular file nor a directory.
            TraversalError: If a directory cannot be read.
        """
        return list(self.iterate_files(roots))

    def iterate_files(self, roots: Optional[Sequence[str]] = None) -> Iterator[FileEntry]:
        """Yield the accepted files of all roots in traversal order.

        Args:
            roots: Roots to walk. Defaults to the roots of the options.

        Yields:
            One FileEntry per accepted file.

        Raises:
            RootNotFoundError: If a root is neither a regular file nor a directory.
            TraversalError: If a directory cannot be read.
        """
        for root in self.options.roots if roots is None else roots:
            root = os.fspath(root)
            if os.path.isfile(root):
                if self._accept(root):
                    yield FileEntry(root)
            elif os.path.isdir(root):
                yield from self._walk(root)
            else:
                raise RootNotFoundError(root)

    def _walk(self, directory: str) -> Iterator[FileEntry]:
        """Recursive helper for iterate_files."""
        try:
            with os.scandir(directory) as iterator:
                entries = [(entry.path, self._entry_type(entry)) for entry in iterator]
        except OSError as e:
            raise TraversalError(directory, e.strerror or str(e)) from e

        for path, entry_type in entries:
            if entry_type is FileType.DIRECTORY:
                if self.options.recursive:
                    yield from self._walk(path)
            elif entry_type is FileType.FILE:
                if self._accept(path):
                    yield FileEntry(path)
            else:
                logger.debug("Skipped non-regular entry: %s", path)

    @staticmethod
    def _entry_type(entry: "os.DirEntry[str]") -> Optional[FileType]:
        # Symlinks are never followed, so a link to a directory is neither type
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.FILE
        return None

    def _accept(self, path: str) -> bool:
        if self.selection_rules.exclude(path):
            logger.debug("Skipped file: %s", path)
            return False
        logger.info("Matched file: %s", path)
        return True


def gather(roots: Sequence[str], options: Options) -> List[FileEntry]:
    """Collect the accepted files under the given roots.

    Args:
        roots: Files and directories to walk, in order.
        options: Resolved run configuration supplying the selection rules.

    Returns:
        Accepted files in traversal order.

    Raises:
        RootNotFoundError: If a root is neither a regular file nor a directory.
        TraversalError: If a directory cannot be read.
    """
    return FileGatherer(options).gather(roots)
