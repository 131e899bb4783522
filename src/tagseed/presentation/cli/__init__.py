"""Command-line interface."""

from tagseed.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
