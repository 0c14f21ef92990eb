"""Host filesystem access.

Wraps the two operations the reporter depends on, opening a path and
querying the status of the open handle, and turns ``OSError`` into
explicit result objects instead of letting invalid handles flow on.
"""

import logging
import os
from dataclasses import dataclass

from statreport.core.checksum import (
    DEFAULT_ALGORITHM,
    DEFAULT_CHUNK_SIZE,
    ChecksumAlgorithm,
    compute_checksum,
)
from statreport.core.models import EntryType, FileStatus

logger = logging.getLogger(__name__)

# Open modes, numbered like the classic O_RDONLY / O_WRONLY / O_RDWR flags
MODE_READ = 0
MODE_WRITE = 1
MODE_READ_WRITE = 2

_OPEN_FLAGS: dict[int, int] = {
    MODE_READ: os.O_RDONLY,
    MODE_WRITE: os.O_WRONLY,
    MODE_READ_WRITE: os.O_RDWR,
}


@dataclass(frozen=True, slots=True)
class Handle:
    """Open reference to a filesystem entry.

    Attributes:
        path: Path the handle was opened from.
        fd: Operating system file descriptor.
    """

    path: str
    fd: int


@dataclass(frozen=True, slots=True)
class OpenResult:
    """Outcome of opening a path.

    Attributes:
        path: Path that was opened.
        handle: Open handle on success, None on failure.
        error: Failure reason, None on success.
    """

    path: str
    handle: Handle | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the path was opened."""
        return self.handle is not None


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Outcome of querying the status of a handle.

    Attributes:
        status: Metadata snapshot on success, None on failure.
        error: Failure reason, None on success.
    """

    status: FileStatus | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the status was retrieved."""
        return self.status is not None


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


class HostFilesystem:
    """File status queries against the local filesystem.

    The checksum attached to each status is derived here, from the
    entry's content, so that callers can treat it as an opaque value.
    """

    def __init__(
        self,
        checksum_algorithm: ChecksumAlgorithm = DEFAULT_ALGORITHM,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.checksum_algorithm = checksum_algorithm
        self.chunk_size = chunk_size

    def open(self, path: str, mode: int = MODE_READ) -> OpenResult:
        """Acquire a handle for a path.

        Args:
            path: Filesystem path to open.
            mode: 0 for read-only, 1 for write-only, 2 for read-write.

        Returns:
            OpenResult carrying the handle or the failure reason.
        """
        flags = _OPEN_FLAGS.get(mode)
        if flags is None:
            return OpenResult(path=path, error=f"invalid open mode {mode}")
        if not path:
            return OpenResult(path=path, error="empty path")

        try:
            # Non-blocking so FIFOs without a writer report instead of hanging
            fd = os.open(path, flags | os.O_NONBLOCK | os.O_NOCTTY)
        except OSError as e:
            logger.debug("open(%r, %d) failed: %s", path, mode, e)
            return OpenResult(path=path, error=_describe(e))

        logger.debug("Opened %s as fd %d", path, fd)
        return OpenResult(path=path, handle=Handle(path=path, fd=fd))

    def query_status(self, handle: Handle) -> QueryResult:
        """Retrieve the metadata snapshot for an open handle.

        Args:
            handle: Handle returned by :meth:`open`.

        Returns:
            QueryResult carrying the FileStatus or the failure reason.
        """
        try:
            st = os.fstat(handle.fd)
        except OSError as e:
            logger.debug("fstat(%d) for %s failed: %s", handle.fd, handle.path, e)
            return QueryResult(error=_describe(e))

        try:
            entry_type = EntryType.from_mode(st.st_mode)
        except ValueError as e:
            return QueryResult(error=str(e))

        checksum = 0
        if entry_type.has_content:
            try:
                checksum = compute_checksum(
                    handle.fd, self.checksum_algorithm, self.chunk_size
                )
            except OSError as e:
                logger.debug("Reading %s for checksum failed: %s", handle.path, e)
                return QueryResult(error=_describe(e))

        try:
            status = FileStatus(
                type=entry_type,
                dev=st.st_dev,
                ino=st.st_ino,
                nlink=st.st_nlink,
                size=st.st_size,
                checksum=checksum,
            )
        except ValueError as e:
            # An entry unlinked after open reports nlink 0
            return QueryResult(error=str(e))
        return QueryResult(status=status)

    def close(self, handle: Handle) -> None:
        """Release a handle. Closing twice is harmless."""
        try:
            os.close(handle.fd)
        except OSError as e:
            logger.debug("close(%d) for %s: %s", handle.fd, handle.path, e)
