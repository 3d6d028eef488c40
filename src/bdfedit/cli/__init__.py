"""Command-line interface for bdfedit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font summaries with property and glyph tables
- Glyph bitmap dumps
- Canonical rewriting of irregular files
- Creation of new empty fonts
"""

from bdfedit.cli.app import cli, main

__all__ = ["cli", "main"]
