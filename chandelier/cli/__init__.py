"""CLI commands for Chandelier.

This package provides the command-line interface for running pattern
scans and inspecting pairs.
"""

from chandelier.cli.main import cli, main

__all__ = ["cli", "main"]
