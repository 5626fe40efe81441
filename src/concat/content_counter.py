"""Running totals of files, lines, characters and tokens written to the output.

Token counting uses OpenAI's tiktoken library, an optional dependency installed with
the ``token_counting`` extra. Without a tokenizer model only files, lines and
characters are counted.
"""

import importlib.util
from typing import Any, NamedTuple, Optional

from concat.exceptions import TokenizationError, TokenizerNotAvailableError


class CountResult(NamedTuple):
    """Counts for a single piece of content."""

    lines: int
    tokens: Optional[int]
    characters: int


def check_tiktoken_available() -> bool:
    """Check if the tiktoken library is available.

    Returns:
        True if tiktoken is installed, False otherwise.
    """
    return importlib.util.find_spec("tiktoken") is not None


class ContentCounter:
    """Counter for files, lines, characters and optionally tokens in file content.

    Attributes:
        model (Optional[str]): Name of the model whose tokenizer to use, or None if
            token counting is disabled.
        encoder (Optional[Any]): The tiktoken encoder if token counting is enabled.

    Example:
        >>> counter = ContentCounter()
        >>> counter.count("fn main() {}\\n")
        CountResult(lines=1, tokens=None, characters=13)
        >>> counter.count("a\\nb")
        CountResult(lines=1, tokens=None, characters=3)
        >>> counter.file_count, counter.line_count, counter.character_count
        (2, 2, 16)
        >>> print(counter.token_count)
        None

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If the model's tokenizer cannot be loaded.
    """

    def __init__(self, model: Optional[str] = None) -> None:
        self.model = model
        self.encoder: Optional[Any] = None
        if model is not None:
            if not check_tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(model)
        self.reset_counts()

    @staticmethod
    def _get_encoder(model: str) -> Any:
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a "
                "well-supported model like 'gpt-4' (cl100k_base encoding) for token counting."
            )

    def count(self, content: str) -> CountResult:
        """Count one file's content and add it to the running totals.

        Lines are counted as newline characters.

        Args:
            content: The complete text content of one file.

        Returns:
            The counts for this content alone.

        Raises:
            TokenizationError: If token counting is enabled but fails.
        """
        lines = content.count("\n")
        characters = len(content)
        tokens = None

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(content))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}")
            self._token_count = (self._token_count or 0) + tokens

        self._file_count += 1
        self._line_count += lines
        self._character_count += characters
        return CountResult(lines=lines, tokens=tokens, characters=characters)

    @property
    def file_count(self) -> int:
        return self._file_count

    @property
    def line_count(self) -> int:
        return self._line_count

    @property
    def character_count(self) -> int:
        return self._character_count

    @property
    def token_count(self) -> Optional[int]:
        """Total tokens counted so far, or None when token counting is disabled."""
        return self._token_count

    def reset_counts(self) -> None:
        """Reset all running totals while keeping the tokenizer configuration."""
        self._file_count = 0
        self._line_count = 0
        self._character_count = 0
        self._token_count: Optional[int] = None if self.encoder is None else 0
