"""Single-file status report.

StatReporter validates the invocation, opens the target path, queries its
status, prints one line per field and releases the handle on every path.
"""

import logging
from collections.abc import Callable, Sequence

from statreport.core.config import StatConfig
from statreport.core.host import MODE_READ, HostFilesystem
from statreport.core.models import ExitCode, FileStatus
from statreport.utils.formatting import print_error

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Enter at pathname"


def format_report(status: FileStatus) -> list[str]:
    """Render a FileStatus as report lines.

    Fields appear in fixed order; the checksum is lowercase hex with no
    ``0x`` prefix, everything else is decimal.
    """
    return [
        f"type: {int(status.type)}",
        f"dev: {status.dev}",
        f"ino: {status.ino}",
        f"nlink: {status.nlink}",
        f"size: {status.size}",
        f"checksum: {status.checksum:x}",
    ]


class StatReporter:
    """Report the status of one filesystem entry.

    Args:
        filesystem: Host filesystem collaborator. Built from ``config`` if None.
        config: Settings used to build the default filesystem.
        out: Writer for report lines (defaults to ``print``).
        err: Writer for diagnostics (defaults to Rich ``print_error``).
    """

    def __init__(
        self,
        filesystem: HostFilesystem | None = None,
        config: StatConfig | None = None,
        out: Callable[[str], None] | None = None,
        err: Callable[[str], None] | None = None,
    ) -> None:
        if filesystem is None:
            config = config or StatConfig()
            filesystem = HostFilesystem(
                checksum_algorithm=config.checksum.algorithm,
                chunk_size=config.checksum.chunk_size,
            )
        self.filesystem = filesystem
        self._out = out or print
        self._err = err or print_error

    def run(self, args: Sequence[str]) -> ExitCode:
        """Run one report.

        Args:
            args: Command line, program name first, then the target path.

        Returns:
            ExitCode.SUCCESS after printing the report, ExitCode.USAGE when
            no path is given, ExitCode.FAILURE when the path cannot be
            opened or queried.
        """
        if len(args) < 2:
            self._out(USAGE_MESSAGE)
            return ExitCode.USAGE

        path = args[1]
        if len(args) > 2:
            logger.debug("Ignoring extra arguments: %s", list(args[2:]))

        opened = self.filesystem.open(path, MODE_READ)
        if opened.handle is None:
            self._err(f"cannot open {path}: {opened.error}")
            return ExitCode.FAILURE

        handle = opened.handle
        try:
            queried = self.filesystem.query_status(handle)
            if queried.status is None:
                self._err(f"cannot stat {path}: {queried.error}")
                return ExitCode.FAILURE

            for line in format_report(queried.status):
                self._out(line)
        finally:
            self.filesystem.close(handle)

        return ExitCode.SUCCESS
