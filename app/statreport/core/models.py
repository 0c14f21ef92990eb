"""File status domain models.

This module defines the immutable metadata record reported for a single
filesystem entry, the entry type classification and the process exit
codes of the ``stat`` command.
"""

import stat as stat_mode
from dataclasses import dataclass
from enum import IntEnum


class EntryType(IntEnum):
    """Kind of filesystem entry.

    The first three values keep the numbering of the classic Unix teaching
    kernels (directory, file, device); the remaining kinds extend it for
    entries a host filesystem can also hold.

    Attributes:
        DIRECTORY: Directory.
        FILE: Regular file.
        DEVICE: Character or block device.
        SYMLINK: Symbolic link.
        FIFO: Named pipe.
        SOCKET: Unix domain socket.
    """

    DIRECTORY = 1
    FILE = 2
    DEVICE = 3
    SYMLINK = 4
    FIFO = 5
    SOCKET = 6

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        """Classify an ``st_mode`` value.

        Args:
            mode: Mode bits as returned in ``os.stat_result.st_mode``.

        Returns:
            The matching EntryType.

        Raises:
            ValueError: If the mode describes an unsupported entry kind.
        """
        if stat_mode.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat_mode.S_ISREG(mode):
            return cls.FILE
        if stat_mode.S_ISCHR(mode) or stat_mode.S_ISBLK(mode):
            return cls.DEVICE
        if stat_mode.S_ISLNK(mode):
            return cls.SYMLINK
        if stat_mode.S_ISFIFO(mode):
            return cls.FIFO
        if stat_mode.S_ISSOCK(mode):
            return cls.SOCKET
        msg = f"Unsupported file type in mode {mode:#o}"
        raise ValueError(msg)

    @property
    def has_content(self) -> bool:
        """Check if entries of this kind carry byte-addressable content."""
        return self == EntryType.FILE


class ExitCode(IntEnum):
    """Exit status of the ``stat`` command.

    Attributes:
        SUCCESS: Report printed.
        FAILURE: The path could not be opened or queried.
        USAGE: No path argument was given.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2


@dataclass(frozen=True, slots=True)
class FileStatus:
    """Point-in-time metadata snapshot of one filesystem entry.

    Attributes:
        type: Kind of the entry.
        dev: Identifier of the device hosting the entry.
        ino: Inode number, unique within ``dev``.
        nlink: Number of hard links referencing the entry.
        size: Byte length of the content (meaningful for regular files).
        checksum: Content-derived integrity value, opaque to the reporter.
    """

    type: EntryType
    dev: int
    ino: int
    nlink: int
    size: int
    checksum: int

    def __post_init__(self) -> None:
        """Validate status data after initialization."""
        if self.nlink < 1:
            msg = f"Link count must be at least 1, got {self.nlink}"
            raise ValueError(msg)
        for name in ("dev", "ino", "size", "checksum"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} cannot be negative, got {value}"
                raise ValueError(msg)
