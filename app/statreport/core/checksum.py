"""Content checksums for regular files.

The checksum is computed by the host filesystem layer from the content of
an open descriptor. Reads are positional (``os.pread``) so the descriptor's
file offset is never moved.
"""

import os
import struct
import zlib
from collections.abc import Iterator
from typing import Literal

ChecksumAlgorithm = Literal["crc32", "adler32", "xor32"]

DEFAULT_ALGORITHM: ChecksumAlgorithm = "crc32"
DEFAULT_CHUNK_SIZE = 64 * 1024

_MASK32 = 0xFFFFFFFF


def iter_chunks(fd: int, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the content of an open descriptor from offset 0.

    Args:
        fd: Open file descriptor.
        chunk_size: Maximum number of bytes per read.

    Yields:
        Consecutive non-empty chunks until end of file.
    """
    offset = 0
    while True:
        chunk = os.pread(fd, chunk_size, offset)
        if not chunk:
            return
        offset += len(chunk)
        yield chunk


def xor32(chunks: Iterator[bytes]) -> int:
    """XOR the content taken as little-endian 32-bit words.

    A trailing partial word is zero-padded.
    """
    value = 0
    pending = b""
    for chunk in chunks:
        data = pending + chunk
        usable = len(data) - len(data) % 4
        for (word,) in struct.iter_unpack("<I", data[:usable]):
            value ^= word
        pending = data[usable:]
    if pending:
        value ^= int.from_bytes(pending.ljust(4, b"\0"), "little")
    return value


def compute_checksum(
    fd: int,
    algorithm: ChecksumAlgorithm = DEFAULT_ALGORITHM,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Compute the checksum of an open file.

    Args:
        fd: Open file descriptor of a regular file.
        algorithm: One of "crc32", "adler32" or "xor32".
        chunk_size: Read size in bytes.

    Returns:
        Unsigned 32-bit checksum.

    Raises:
        ValueError: If the algorithm is unknown.
        OSError: If reading the descriptor fails.
    """
    chunks = iter_chunks(fd, chunk_size)

    if algorithm == "xor32":
        return xor32(chunks)

    if algorithm == "crc32":
        value = 0
        for chunk in chunks:
            value = zlib.crc32(chunk, value)
        return value & _MASK32

    if algorithm == "adler32":
        value = 1
        for chunk in chunks:
            value = zlib.adler32(chunk, value)
        return value & _MASK32

    msg = f"Unknown checksum algorithm: {algorithm}"
    raise ValueError(msg)
