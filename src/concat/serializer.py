"""Serialization of gathered files and the optional tree listing.

File contents are read lazily, one file at a time, as strict UTF-8 with newline
translation disabled, so each file's bytes reach the output unchanged apart from the
escaping applied by the output strategy.
"""

import logging
from typing import Iterable, Optional, Protocol, Sequence

from concat.content_counter import ContentCounter
from concat.exceptions import FileReadError
from concat.output_strategies import create_strategy
from concat.output_strategies.base_strategy import OutputStrategy
from concat.types import FileEntry

logger = logging.getLogger(__name__)


class Destination(Protocol):
    """Anything text can be written to, such as an open file or an OutputWriter."""

    def write(self, data: str) -> object: ...


def read_content(entry: FileEntry) -> str:
    """Read a gathered file's complete content.

    Args:
        entry: The file to read.

    Returns:
        The file's text, with line endings preserved exactly.

    Raises:
        FileReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        with open(entry.path, "r", encoding="utf-8", errors="strict", newline="") as file:
            return file.read()
    except UnicodeDecodeError as e:
        raise FileReadError(entry.path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise FileReadError(entry.path, e.strerror or str(e)) from e


class ContentSerializer:
    """Writes file contents and the tree listing through an output strategy.

    Attributes:
        output_strategy (OutputStrategy): Strategy formatting the document.
        counter (Optional[ContentCounter]): Counter updated with each file's content.

    Example:
        >>> import io
        >>> from concat.output_strategies import TextOutputStrategy
        >>> buffer = io.StringIO()
        >>> ContentSerializer(TextOutputStrategy()).write(buffer, [], ["Directory tree:", "a.txt"])
        >>> buffer.getvalue()
        'Directory tree:\\na.txt\\n'
    """

    def __init__(self, output_strategy: OutputStrategy, counter: Optional[ContentCounter] = None) -> None:
        self.output_strategy = output_strategy
        self.counter = counter

    def write(
        self,
        destination: Destination,
        entries: Iterable[FileEntry],
        tree_lines: Optional[Sequence[str]] = None,
    ) -> None:
        """Write the complete document.

        Args:
            destination: Where the document is written.
            entries: Files to include, in output order.
            tree_lines: Tree listing to append, or None to omit the tree.

        Raises:
            FileReadError: If a file cannot be read or is not valid UTF-8.
        """
        strategy = self.output_strategy
        destination.write(strategy.format_header())
        for entry in entries:
            content = read_content(entry)
            if self.counter is not None:
                self.counter.count(content)
            destination.write(strategy.format_start(entry.path))
            destination.write(strategy.format_content(content))
            destination.write(strategy.format_end())
            logger.debug("Wrote %s (%d characters)", entry.path, len(content))
        if tree_lines is not None:
            destination.write(strategy.format_tree(tree_lines))
        destination.write(strategy.format_footer())


def serialize(
    entries: Iterable[FileEntry],
    tree_lines: Optional[Sequence[str]],
    plain_text: bool,
    destination: Destination,
) -> None:
    """Write gathered files and an optional tree listing in the requested format.

    Args:
        entries: Files to include, in output order.
        tree_lines: Tree listing to append, or None to omit the tree.
        plain_text: True for plain-text output, False for XML.
        destination: Where the document is written.

    Raises:
        FileReadError: If a file cannot be read or is not valid UTF-8.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> serialize([], None, False, buffer)
        >>> buffer.getvalue()
        '<files>\\n</files>\\n'
    """
    ContentSerializer(create_strategy(plain_text)).write(destination, entries, tree_lines)
