"""CLI package for statreport.

This package contains the Typer application behind the ``stat`` command.
"""

from statreport.cli.main import app

__all__ = ["app"]
