"""Command line entry points."""

from .main import cli
from .web import web

cli.add_command(web)

__all__ = ["cli", "web"]
