"""
Output byte streams - the sink side of ByteString.write_to().

Anything with a write(bytes) method is an OutputByteStream: io.BytesIO, a
file opened in "wb" mode, or the BufferedOutputByteStream defined here.
Objects that know how to write themselves to such a stream implement
ByteStreamable.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, Union, runtime_checkable

from argkit.bytestring import ByteString
from argkit.constants import ENCODING

log = logging.getLogger(__name__)


@runtime_checkable
class OutputByteStream(Protocol):
    """Accepts bytes, in order, into whatever it manages."""

    def write(self, data: bytes): ...


@runtime_checkable
class ByteStreamable(Protocol):
    """Can write its byte representation to an OutputByteStream."""

    def write_to(self, stream: OutputByteStream) -> None: ...


Writable = Union[ByteStreamable, bytes, bytearray, memoryview, str, Iterable[int]]


class BufferedOutputByteStream:
    """
    In-memory OutputByteStream.

    Usage:
        stream = BufferedOutputByteStream()
        stream.write(b"--name=")
        stream.write(ByteString.from_text("value"))
        stream.write("\\n")
        stream.bytes      # ByteString(b"--name=value\\n")
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, item: Writable) -> int:
        """
        Append item and return the number of bytes written.

        ByteStreamable objects write themselves through write_to(), str is
        written as UTF-8, anything else must be bytes-like or an iterable
        of ints in range(256).
        """
        start = len(self._buffer)
        if isinstance(item, ByteStreamable):
            item.write_to(self)
        elif isinstance(item, str):
            self._buffer += item.encode(ENCODING)
        elif isinstance(item, int):
            raise TypeError("write() requires bytes or an iterable of ints, not int")
        else:
            self._buffer += bytes(item)
        written = len(self._buffer) - start
        log.debug("Buffered %i bytes (%i total)", written, len(self._buffer))
        return written

    def flush(self) -> None:
        """Nothing to flush; present for file-object compatibility."""

    @property
    def bytes(self) -> ByteString:
        """Everything written so far."""
        return ByteString(self._buffer)

    @property
    def position(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"BufferedOutputByteStream(<{len(self._buffer)} bytes>)"
