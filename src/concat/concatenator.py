"""Orchestration of a complete concatenation run.

This module ties the components together: it gathers the files selected by the
options, renders the tree listing of the first root when requested, and serializes
both into a destination while keeping content metrics.
"""

import logging
import os
from typing import List, Optional, Sequence

from concat.content_counter import ContentCounter
from concat.file_system_tree.file_system_tree import render_tree
from concat.options import Options
from concat.output_strategies import create_strategy
from concat.serializer import ContentSerializer, Destination
from concat.traversal import FileGatherer
from concat.types import FileEntry

logger = logging.getLogger(__name__)


class Concatenator:
    """Runs traversal, tree rendering and serialization for one set of options.

    Metrics are updated as content is written and reflect only the files written
    so far.

    Attributes:
        options (Options): Resolved run configuration.

    Example:
        >>> concatenator = Concatenator(Options(extensions=["rs"], roots=["project"]))  # doctest: +SKIP
        >>> with open("out.xml", "w", encoding="utf-8") as f:  # doctest: +SKIP
        ...     concatenator.write(f)
        >>> concatenator.file_count  # doctest: +SKIP
        1

    Raises:
        TokenizerNotAvailableError: If a tokenizer model is given but tiktoken is not installed.
    """

    def __init__(self, options: Options, *, tokenizer_model: Optional[str] = None) -> None:
        """Initialize a concatenation run.

        Args:
            options: Resolved run configuration.
            tokenizer_model: Model whose tokenizer is used to count tokens. If None,
                token counting is disabled.
        """
        self.options = options
        self._gatherer = FileGatherer(options)
        self._counter = ContentCounter(model=tokenizer_model)
        self._serializer = ContentSerializer(create_strategy(options.plain_text), counter=self._counter)
        self._output_realpath = os.path.realpath(options.resolved_output_path)

    def gather_files(self) -> List[FileEntry]:
        """Collect the files selected by the options.

        Raises:
            RootNotFoundError: If a root is neither a regular file nor a directory.
            TraversalError: If a directory cannot be read.
        """
        entries = [entry for entry in self._gatherer.gather() if not self._is_output_file(entry)]
        logger.info("Total matched files: %d", len(entries))
        return entries

    def _is_output_file(self, entry: FileEntry) -> bool:
        # A previous run's output must not be concatenated into the new one
        if os.path.realpath(entry.path) == self._output_realpath:
            logger.info("Skipped file: %s (is the output file)", entry.path)
            return True
        return False

    def render_tree(self) -> List[str]:
        """Render the tree listing of the first root only.

        Raises:
            RootNotFoundError: If the first root doesn't exist.
            TraversalError: If the first root isn't a readable directory.
        """
        root = self.options.roots[0]
        logger.info("Generating directory tree for %s", root)
        return render_tree(root)

    def write(self, destination: Destination, entries: Optional[Sequence[FileEntry]] = None) -> None:
        """Write the complete document to the destination.

        Args:
            destination: Where the document is written.
            entries: Previously gathered files. Gathered now if not given.

        Raises:
            ConcatError: If traversal, tree rendering or reading a file fails.
        """
        if entries is None:
            entries = self.gather_files()
        tree_lines = self.render_tree() if self.options.include_tree else None
        self._serializer.write(destination, entries, tree_lines)

    @property
    def file_count(self) -> int:
        """Number of files written."""
        return self._counter.file_count

    @property
    def line_count(self) -> int:
        """Number of lines written, counted as newline characters in file content."""
        return self._counter.line_count

    @property
    def character_count(self) -> int:
        """Number of characters of file content written, before escaping."""
        return self._counter.character_count

    @property
    def token_count(self) -> Optional[int]:
        """Number of tokens of file content written, or None if token counting is disabled."""
        return self._counter.token_count
