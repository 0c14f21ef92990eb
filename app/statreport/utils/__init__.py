"""Utility modules for statreport.

This module exports commonly used utility functions.
"""

from statreport.utils.formatting import (
    err_console,
    print_error,
    print_warning,
)
from statreport.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "err_console",
    "print_error",
    "print_warning",
]
