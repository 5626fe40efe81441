"""Command-line interface for concat.

This module provides the command-line entry point, which resolves arguments into
Options, gathers and writes the selected files, and reports failures.

Exit Codes:
    0: Successful completion (including --help and --version)
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied

Example:
    # Concatenate all Python files below src/ with a directory tree
    $ concat -x py -t src

    # Display version information
    $ concat --version
"""

import logging
import sys
from collections.abc import Mapping
from typing import Optional

from concat.cli.argparser import build_options, create_parser, validate_args
from concat.cli.output_writer import OutputWriter
from concat.concatenator import Concatenator
from concat.exceptions import ConcatError, TokenizerNotAvailableError
from concat.options import Options

logger = logging.getLogger("concat")


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.

    Example:
        >>> print(format_counts({"files": 2, "lines": 10, "characters": 200, "tokens": None}))
        Files: 2
        Lines: 10
        Characters: 200
    """
    result = [
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.insert(2, f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr, at INFO level when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )


def log_configuration(options: Options) -> None:
    logger.info("Inputs: %s", " ".join(options.roots))
    logger.info("Output file: %s", options.resolved_output_path)
    logger.info("Format: %s", options.output_format)
    logger.info("Recursive: %s", options.recursive)
    logger.info("Include hidden: %s", options.include_hidden)
    logger.info("Show tree: %s", options.include_tree)
    logger.info("Include extensions: %s", " ".join(sorted(options.extensions)) or "All")
    logger.info("Include patterns: %s", " ".join(options.include_patterns) or "All")
    logger.info("Exclude patterns: %s", " ".join(options.exclude_patterns) or "None")


def _is_permission_error(error: BaseException) -> bool:
    return isinstance(error, PermissionError) or isinstance(error.__cause__, PermissionError)


def main() -> None:
    """Main entry point for the concat command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors and sys.exit(0) for --help/--version
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)
    options = build_options(args)
    log_configuration(options)

    try:
        concatenator = Concatenator(options, tokenizer_model=args.tokenizer)
        entries = concatenator.gather_files()

        with OutputWriter(options.resolved_output_path) as writer:
            concatenator.write(writer, entries)

        logger.info("Concatenation complete. Output written to %s", options.resolved_output_path)

        if args.summary:
            counts = {
                "files": concatenator.file_count,
                "lines": concatenator.line_count,
                "tokens": concatenator.token_count,
                "characters": concatenator.character_count,
            }
            print(format_counts(counts), file=sys.stderr)

    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("To enable token counting, install concat with the 'token_counting' extra:", file=sys.stderr)
        print('    pip install "concat[token_counting]"', file=sys.stderr)
        sys.exit(1)
    except (ConcatError, OSError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if _is_permission_error(e) else 1)


if __name__ == "__main__":
    main()
