"""statreport - Report filesystem metadata for a single file."""

__version__ = "0.1.0"
