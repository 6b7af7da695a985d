"""Command-line interface for gosprout."""

from gosprout.cli.app import app

__all__ = ["app"]
