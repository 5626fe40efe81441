"""Output strategy base class defining the interface for document formatting.

This module provides the abstract base class that defines how the concatenated
document is laid out. Concrete strategies decide how the document is opened and
closed, how each file's content is wrapped and escaped, and how the directory tree
listing is embedded.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class OutputStrategy(ABC):
    """Abstract base class defining the interface for output formatting strategies.

    This class implements the Strategy pattern for formatting the concatenated document
    in different formats (plain text, XML). The serializer drives a strategy through
    these phases:

    1. Header - opens the document
    2. Files - for each file, start wrapper, formatted content, end wrapper
    3. Tree - the optional directory tree listing
    4. Footer - closes the document

    Example:
        >>> class MarkdownStrategy(OutputStrategy):
        ...     def format_header(self) -> str:
        ...         return ""
        ...
        ...     def format_start(self, path: str) -> str:
        ...         return f"## {path}\\n```\\n"
        ...
        ...     def format_content(self, content: str) -> str:
        ...         return content
        ...
        ...     def format_end(self) -> str:
        ...         return "\\n```\\n"
        ...
        ...     def format_tree(self, lines: Sequence[str]) -> str:
        ...         return "".join(line + "\\n" for line in lines)
        ...
        ...     def format_footer(self) -> str:
        ...         return ""
        >>> strategy = MarkdownStrategy()
        >>> strategy.format_start("main.rs") + strategy.format_content("fn main() {}") + strategy.format_end()
        '## main.rs\\n```\\nfn main() {}\\n```\\n'
    """

    @abstractmethod
    def format_header(self) -> str:
        """Format the opening of the document.

        Returns:
            The text written before any file content.
        """
        pass

    @abstractmethod
    def format_start(self, path: str) -> str:
        """Format the opening wrapper for a file's content.

        Args:
            path: The path of the file, exactly as gathered.

        Returns:
            The formatted opening wrapper string.
        """
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        """Format a file's content, escaping it as the output format requires.

        Args:
            content: The file's complete text content.

        Returns:
            The formatted content string.
        """
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper for a file's content.

        Returns:
            The formatted closing wrapper string.
        """
        pass

    @abstractmethod
    def format_tree(self, lines: Sequence[str]) -> str:
        """Format the directory tree listing.

        Args:
            lines: Lines of the tree listing, without line terminators.

        Returns:
            The formatted tree block.
        """
        pass

    @abstractmethod
    def format_footer(self) -> str:
        """Format the closing of the document.

        Returns:
            The text written after all file content and the tree.
        """
        pass
