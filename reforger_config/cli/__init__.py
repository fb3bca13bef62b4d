"""Command-line interface for reforger-config."""

from .main import cli, main
from .reporter import Reporter

__all__ = ["Reporter", "cli", "main"]
