class ConcatError(Exception):
    """
    Base class for all errors raised while gathering, rendering or writing content.

    Every failure in a run is propagated immediately and terminates it; the CLI reports
    the message and exits with a non-zero status. There is no retry and no partial-result
    recovery.

    Example:
        >>> error = ConcatError("something went wrong")
        >>> str(error)
        'something went wrong'
    """

    pass


class TraversalError(ConcatError):
    """
    Exception raised when a directory cannot be read during traversal or tree rendering.

    Attributes:
        path (str): The path that could not be read.

    Example:
        >>> error = TraversalError("/root/secret", "Permission denied")
        >>> str(error)
        'Cannot read directory /root/secret: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the failing path and the underlying reason.

        Args:
            path (str): The directory that could not be read.
            reason (str): Description of the underlying failure.
        """
        self.path = path
        super().__init__(f"Cannot read directory {path}: {reason}")


class RootNotFoundError(TraversalError):
    """
    Exception raised when a configured root is neither a regular file nor a directory.

    Example:
        >>> error = RootNotFoundError("missing/dir")
        >>> str(error)
        'Input path not found: missing/dir'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the missing root.

        Args:
            path (str): The root that does not exist.
        """
        self.path = path
        ConcatError.__init__(self, f"Input path not found: {path}")


class FileReadError(ConcatError):
    """
    Exception raised when a selected file cannot be read or is not valid UTF-8 text.

    Attributes:
        file_path (str): Path to the file that could not be read.

    Example:
        >>> error = FileReadError("data.bin", "invalid start byte")
        >>> str(error)
        'Cannot read file data.bin: invalid start byte'
    """

    def __init__(self, file_path: str, reason: str) -> None:
        """
        Initialize the exception with the failing file and the underlying reason.

        Args:
            file_path (str): Path to the file that could not be read.
            reason (str): Description of the underlying failure.
        """
        self.file_path = file_path
        super().__init__(f"Cannot read file {file_path}: {reason}")


class OutputWriteError(ConcatError):
    """
    Exception raised when the output file cannot be created or written.

    Example:
        >>> error = OutputWriteError("/read-only/out.xml", "Read-only file system")
        >>> str(error)
        'Cannot write output file /read-only/out.xml: Read-only file system'
    """

    def __init__(self, output_path: str, reason: str) -> None:
        self.output_path = output_path
        super().__init__(f"Cannot write output file {output_path}: {reason}")


class TokenizerNotAvailableError(ConcatError):
    """
    Exception raised when attempting to use token counting without the required tokenizer package.

    This exception is raised when the `tiktoken` package is not installed but token counting
    was requested for the summary report. The tiktoken package is an optional dependency that
    must be explicitly installed using the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        """
        Initialize the exception with an informative error message.

        Args:
            message (str, optional): Base error message. Defaults to "Tokenizer (tiktoken) is not installed."
                Installation instructions will be appended to this message.
        """
        self.message = (
            f"{message} To enable token counting, install concat with the 'token_counting' "
            "extra: 'pip install concat[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(ConcatError):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass
