"""Command-line entry point."""

from .runner import run_cli

__all__ = ["run_cli"]
