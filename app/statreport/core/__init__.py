"""Stat retrieval and reporting.

Submodules: models (FileStatus, EntryType, ExitCode), host (the host
filesystem collaborator), checksum, reporter (StatReporter), config,
paths and theme.
"""
