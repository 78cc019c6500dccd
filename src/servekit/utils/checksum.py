"""Lightweight checksums for in-memory response bodies."""

import io
import zlib

CHUNK_SIZE = 64 * 1024


def checksum_and_reset(buffer: io.BytesIO) -> str:
    """Return the Adler-32 checksum of the unread bytes in *buffer*.

    The bytes from the current read position to the end are checksummed and
    the read position is then restored, so callers can still read the same
    bytes afterwards. Not suitable for integrity or security checks.

    Args:
        buffer: In-memory buffer holding a response body.

    Returns:
        str: The checksum as a decimal string.
    """
    position = buffer.tell()
    checksum = zlib.adler32(b"")
    try:
        while chunk := buffer.read(CHUNK_SIZE):
            checksum = zlib.adler32(chunk, checksum)
    finally:
        buffer.seek(position)
    return str(checksum)
