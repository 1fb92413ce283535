"""
Streaming copy primitives shared by the splitter and the merger.

Both directions prefer ``os.sendfile`` and fall back to a buffered
read/write loop when the platform or the file system refuses it. Any
``OSError`` is re-raised as :class:`PartIOError`; nothing written before
the failure is removed.
"""

import errno
import os
import shutil
import typing

from splitfile.config import DEFAULT_CHUNK_SIZE
from splitfile.exceptions import PartIOError

_SENDFILE_UNSUPPORTED = {
    errno.EINVAL,
    errno.ENOSYS,
    errno.ENOTSUP,
    errno.EOPNOTSUPP,
    errno.ESPIPE,
    errno.ENOTSOCK,
}


class _SendfileUnavailable(Exception):
    pass


def _sendfile(
    src: typing.BinaryIO,
    dest: typing.BinaryIO,
    offset: int,
    count: int,
    chunk_size: int,
) -> int:
    """Send ``count`` bytes of ``src`` starting at ``offset``; returns bytes sent."""
    if not hasattr(os, "sendfile"):
        raise _SendfileUnavailable

    try:
        src_fd, dest_fd = src.fileno(), dest.fileno()
    except (OSError, ValueError) as e:
        raise _SendfileUnavailable from e

    sent_total = 0
    while sent_total < count:
        try:
            sent = os.sendfile(
                dest_fd,
                src_fd,
                offset + sent_total,
                min(chunk_size, count - sent_total),
            )
        except OSError as e:
            # Only safe to switch strategies before any byte reached dest
            if sent_total == 0 and e.errno in _SENDFILE_UNSUPPORTED:
                raise _SendfileUnavailable from e
            raise
        if sent == 0:
            break
        sent_total += sent
    return sent_total


def _buffered_range(
    src: typing.BinaryIO,
    dest: typing.BinaryIO,
    offset: int,
    count: int,
    chunk_size: int,
) -> int:
    src.seek(offset)
    remaining = count
    while remaining > 0:
        data = src.read(min(chunk_size, remaining))
        if not data:
            break
        dest.write(data)
        remaining -= len(data)
    return count - remaining


def _transfer(
    src: typing.BinaryIO,
    dest: typing.BinaryIO,
    offset: int,
    count: int,
    chunk_size: int,
    use_sendfile: bool,
) -> int:
    if use_sendfile:
        dest.flush()
        try:
            return _sendfile(src, dest, offset, count, chunk_size)
        except _SendfileUnavailable:
            pass
    return _buffered_range(src, dest, offset, count, chunk_size)


def copy_range(
    source: str | os.PathLike,
    start: int,
    end: int,
    destination: str | os.PathLike,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    use_sendfile: bool = True,
) -> int:
    """
    Copy bytes ``[start, end)`` of ``source`` into a fresh ``destination``.

    The destination is created or truncated. Both handles are closed before
    returning, on success and on failure.

    Returns:
        Number of bytes written.

    Raises:
        PartIOError: Opening, reading or writing failed, or ``source`` ended
            before ``end``. A partial destination file is left behind.
    """
    expected = end - start
    try:
        with open(source, "rb") as src, open(destination, "wb") as dest:
            written = _transfer(src, dest, start, expected, chunk_size, use_sendfile)
    except OSError as e:
        raise PartIOError(
            f"Failed to copy {os.fspath(source)} [{start}, {end}) "
            f"to {os.fspath(destination)}: {e}",
            path=os.fspath(destination),
        ) from e

    if written != expected:
        raise PartIOError(
            f"Source {os.fspath(source)} ended early: wrote {written} of "
            f"{expected} bytes to {os.fspath(destination)}",
            path=os.fspath(destination),
        )
    return written


def append_file(
    source: str | os.PathLike,
    stream: typing.BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    use_sendfile: bool = True,
) -> int:
    """
    Append the whole of ``source`` to an already open ``stream``.

    ``stream`` is left open; the caller owns it.

    Returns:
        Number of bytes appended.

    Raises:
        PartIOError: Reading ``source`` or writing ``stream`` failed.
    """
    try:
        with open(source, "rb") as src:
            if use_sendfile:
                size = os.fstat(src.fileno()).st_size
                src.seek(_transfer(src, stream, 0, size, chunk_size, True))
            # Picks up whatever sendfile did not move
            shutil.copyfileobj(src, stream, chunk_size)
            return src.tell()
    except OSError as e:
        raise PartIOError(
            f"Failed to append {os.fspath(source)}: {e}", path=os.fspath(source)
        ) from e


__all__ = ["copy_range", "append_file"]
