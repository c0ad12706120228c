"""Command line interface for aix."""

from aix.cli.app import app

__all__ = ["app"]
