"""File content aggregation utilities.

This package collects files from one or more filesystem roots, filters them by
extension and wildcard patterns, and concatenates their contents (optionally
with a directory tree listing) into a single plain-text or XML document.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("concat")
except PackageNotFoundError:
    __version__ = "unknown"
