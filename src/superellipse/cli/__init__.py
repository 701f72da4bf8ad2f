"""Command-line interface for superellipse.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Path output on stdout for piping into other tools
- Metrics as a table or JSON
- Parallel batch processing with a progress bar
- Error messages with recovery hints
"""

from superellipse.cli.app import cli, main

__all__ = ["cli", "main"]
