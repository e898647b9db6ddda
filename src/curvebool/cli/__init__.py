"""Command-line interface for curvebool.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Union, intersection and difference of two curves from a JSON document
- Solver tolerance and flattening controls
- Verbose/quiet output modes
- Detailed error reporting
"""

from curvebool.cli.app import cli, main

__all__ = ["cli", "main"]
