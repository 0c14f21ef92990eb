"""Tests for file status domain models."""

import dataclasses
import stat

import pytest
from statreport.core.models import EntryType, ExitCode, FileStatus


def _make_status(**overrides: int) -> FileStatus:
    """Create a FileStatus for a 42-byte regular file."""
    fields = {"dev": 1, "ino": 17, "nlink": 1, "size": 42, "checksum": 0x1A2B}
    fields.update(overrides)
    return FileStatus(type=EntryType.FILE, **fields)


class TestEntryType:
    """Tests for EntryType enum."""

    def test_entry_type_values(self) -> None:
        """Classic kinds keep their small-integer numbering."""
        assert EntryType.DIRECTORY == 1
        assert EntryType.FILE == 2
        assert EntryType.DEVICE == 3
        assert EntryType.SYMLINK == 4
        assert EntryType.FIFO == 5
        assert EntryType.SOCKET == 6
        assert len(EntryType) == 6

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (stat.S_IFDIR | 0o755, EntryType.DIRECTORY),
            (stat.S_IFREG | 0o644, EntryType.FILE),
            (stat.S_IFCHR | 0o666, EntryType.DEVICE),
            (stat.S_IFBLK | 0o660, EntryType.DEVICE),
            (stat.S_IFLNK | 0o777, EntryType.SYMLINK),
            (stat.S_IFIFO | 0o600, EntryType.FIFO),
            (stat.S_IFSOCK | 0o755, EntryType.SOCKET),
        ],
    )
    def test_from_mode(self, mode: int, expected: EntryType) -> None:
        """from_mode classifies every supported st_mode kind."""
        assert EntryType.from_mode(mode) == expected

    def test_from_mode_unknown(self) -> None:
        """from_mode rejects modes with no recognised file type bits."""
        with pytest.raises(ValueError, match="Unsupported file type"):
            EntryType.from_mode(0o644)

    def test_only_files_have_content(self) -> None:
        """Only regular files are checksummed."""
        assert EntryType.FILE.has_content
        assert not EntryType.DIRECTORY.has_content
        assert not EntryType.DEVICE.has_content


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_exit_codes_are_distinct(self) -> None:
        """Success, failure and usage error are machine-distinguishable."""
        assert ExitCode.SUCCESS == 0
        assert ExitCode.FAILURE == 1
        assert ExitCode.USAGE == 2


class TestFileStatus:
    """Tests for FileStatus frozen dataclass."""

    def test_creation(self) -> None:
        """Create a valid FileStatus with all fields populated."""
        status = _make_status()
        assert status.type == EntryType.FILE
        assert status.dev == 1
        assert status.ino == 17
        assert status.nlink == 1
        assert status.size == 42
        assert status.checksum == 0x1A2B

    def test_frozen(self) -> None:
        """Assignment raises FrozenInstanceError."""
        status = _make_status()
        with pytest.raises(dataclasses.FrozenInstanceError):
            status.size = 0  # type: ignore[misc]

    def test_field_order(self) -> None:
        """Fields are declared in report order."""
        names = [f.name for f in dataclasses.fields(FileStatus)]
        assert names == ["type", "dev", "ino", "nlink", "size", "checksum"]

    def test_zero_links_rejected(self) -> None:
        """An entry reachable by a path has at least one link."""
        with pytest.raises(ValueError, match="Link count must be at least 1"):
            _make_status(nlink=0)

    @pytest.mark.parametrize("field", ["dev", "ino", "size", "checksum"])
    def test_negative_values_rejected(self, field: str) -> None:
        """Numeric fields cannot be negative."""
        with pytest.raises(ValueError, match=f"{field} cannot be negative"):
            _make_status(**{field: -1})

    def test_equality(self) -> None:
        """Two snapshots with the same values compare equal."""
        assert _make_status() == _make_status()
        assert _make_status() != _make_status(size=43)
