"""Bundled data files for statreport."""
