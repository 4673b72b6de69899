"""Command-line interface for polyaffine.

This module provides the CLI using Typer with rich output.

Key features:
- Console listing of every transformed polygon
- Naive vs inverse-transpose normal comparison
- Interactive window (matplotlib) and animated HTML export
"""

from polyaffine.cli.app import cli, main

__all__ = ["cli", "main"]
