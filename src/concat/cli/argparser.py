"""Command-line argument parsing for concat.

This module defines the command-line interface for concat, handling argument
parsing, validation, and resolution of the parsed arguments into Options.
"""

import argparse

from concat import __version__
from concat.options import Options


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with concat's options.
    """
    description = """
    concat: merge the contents of many files into a single document.

    Files are gathered from the given files and directories (the current directory if
    none are given), filtered by extension and wildcard patterns, and written to one
    output file as XML (default) or plain text, optionally followed by a directory tree.

    Patterns use "*" as their only wildcard and are matched against the full path as
    it is built from the input, e.g. "./src/main.rs" when the input is ".".
    """

    epilog = """
    Examples:
      # Concatenate every non-hidden file below the current directory
      concat

      # Only Rust sources, with a directory tree, as plain text
      concat -x rs -t --text src

      # Include only matching paths, then exclude build output
      concat -i "*.py" -e "*/build/*" .

      # Write to a specific file and print a summary to stderr
      concat -o bundle.xml -s project/

      # Count tokens in the summary (requires the token_counting extra)
      concat -s --tokenizer gpt-4 project/
    """

    parser = argparse.ArgumentParser(
        prog="concat",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"concat {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "roots",
        nargs="*",
        metavar="PATH",
        help="Files or directories to process, in order (default: the current directory).",
    )
    parser.add_argument(
        "-x",
        "--ext",
        dest="extensions",
        action="append",
        default=[],
        metavar="EXT",
        help="Only include files with this extension, without the dot (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--include",
        dest="include_patterns",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Only include files whose path matches this pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        dest="exclude_patterns",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude files whose path matches this pattern; always wins over --include.",
    )
    parser.add_argument(
        "--hidden",
        dest="include_hidden",
        action="store_true",
        help="Include hidden files (names starting with '.').",
    )
    parser.add_argument(
        "-t",
        "--tree",
        dest="include_tree",
        action="store_true",
        help="Append a directory tree of the first input to the output.",
    )
    parser.add_argument(
        "--text",
        dest="plain_text",
        action="store_const",
        const=True,
        default=False,
        help="Write plain text output.",
    )
    parser.add_argument(
        "--xml",
        dest="plain_text",
        action="store_const",
        const=False,
        default=False,
        help="Write XML output (default).",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file path (default: _concat-output.xml, or _concat-output.txt with --text).",
    )
    parser.add_argument(
        "-n",
        "--no-recursive",
        dest="recursive",
        action="store_false",
        help="Only include files directly inside the given directories.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print a summary of files, lines and characters written to stderr.",
    )
    parser.add_argument(
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model used to count tokens for the summary (e.g., gpt-4).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report the configuration and every matched file on stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    for extension in args.extensions:
        if not extension.lstrip("."):
            raise ValueError("--ext requires a non-empty extension")
    if args.output is not None and not args.output.strip():
        raise ValueError("--output requires a non-empty file name")


def build_options(args: argparse.Namespace) -> Options:
    """Resolve parsed arguments into run options.

    A single leading dot is stripped from each extension, so ``-x .py`` and
    ``-x py`` are equivalent.

    Args:
        args: Parsed and validated command-line arguments.

    Returns:
        The immutable run configuration.

    Example:
        >>> args = create_parser().parse_args(["-x", ".rs", "--text", "--xml", "src"])
        >>> options = build_options(args)
        >>> sorted(options.extensions), options.plain_text, options.roots
        (['rs'], False, ('src',))
    """
    extensions = frozenset(extension[1:] if extension.startswith(".") else extension for extension in args.extensions)
    return Options(
        extensions=extensions,
        include_patterns=tuple(args.include_patterns),
        exclude_patterns=tuple(args.exclude_patterns),
        include_hidden=args.include_hidden,
        include_tree=args.include_tree,
        plain_text=args.plain_text,
        output_path=args.output,
        roots=tuple(args.roots),
        recursive=args.recursive,
    )
