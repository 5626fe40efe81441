"""Output file writing for the concat CLI.

This module provides a buffered writer for the single output file that converts
I/O failures into OutputWriteError.
"""

import types
from pathlib import Path
from typing import Optional, TextIO, Type

from concat.exceptions import OutputWriteError
from concat.types import PathType


class OutputWriter:
    """Buffered writer for the output file.

    The file is created (or truncated) when the writer is constructed, written through
    a buffered text stream and flushed when the writer is closed. The parent directory
    must already exist. If a run fails part-way, the partially written file is
    closed but left on disk.

    Attributes:
        path: The output file path.

    Example:
        >>> with OutputWriter("out.xml") as writer:  # doctest: +SKIP
        ...     writer.write("<files>\\n</files>\\n")
    """

    def __init__(self, path: PathType):
        """Create or truncate the output file.

        Args:
            path: Path of the output file.

        Raises:
            OutputWriteError: If the file cannot be created, for example because its parent
                directory does not exist.
        """
        self.path = Path(path)
        self._closed = False

        try:
            # newline="" keeps "\n" untranslated so file contents pass through unchanged
            self._file_obj: TextIO = self.path.open("w", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputWriteError(str(self.path), e.strerror or str(e)) from e

    def write(self, data: str) -> None:
        """Write data to the output file.

        Args:
            data: String data to write.

        Raises:
            OutputWriteError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed OutputWriter")

        try:
            self._file_obj.write(data)
        except OSError as e:
            raise OutputWriteError(str(self.path), e.strerror or str(e)) from e

    def close(self) -> None:
        """Flush and close the output file.

        Raises:
            OutputWriteError: If flushing buffered data fails.
        """
        if self._closed:
            return

        self._closed = True
        try:
            self._file_obj.close()
        except OSError as e:
            raise OutputWriteError(str(self.path), e.strerror or str(e)) from e

    def __enter__(self) -> "OutputWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Exit the context manager and close the file.

        If closing fails while an exception is already propagating, the original
        exception is prioritized.
        """
        try:
            self.close()
        except OutputWriteError:
            if exc_type is None:
                raise
