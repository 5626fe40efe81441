"""Plain-text output strategy for the concatenated document."""

from typing import Sequence

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Output strategy that writes raw file contents with no wrapping or escaping.

    Each file's content is followed by a single newline. The tree listing, when
    requested, is written verbatim after all file contents, one line per entry.

    Example:
        >>> strategy = TextOutputStrategy()
        >>> strategy.format_start("main.rs") + strategy.format_content("a < b") + strategy.format_end()
        'a < b\\n'
        >>> strategy.format_tree(["Directory tree:", "main.rs"])
        'Directory tree:\\nmain.rs\\n'
    """

    def format_header(self) -> str:
        return ""

    def format_start(self, path: str) -> str:
        return ""

    def format_content(self, content: str) -> str:
        return content

    def format_end(self) -> str:
        return "\n"

    def format_tree(self, lines: Sequence[str]) -> str:
        return "".join(line + "\n" for line in lines)

    def format_footer(self) -> str:
        return ""
