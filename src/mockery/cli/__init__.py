"""Mockery CLI."""

from mockery.cli.main import cli

__all__ = ["cli"]
