"""Command-line interface for concat."""
