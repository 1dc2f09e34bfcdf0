"""
ByteString - an immutable sequence of raw bytes.

A ByteString is the byte-buffer value used throughout argkit. It may hold
text (UTF-8) or arbitrary binary data, and offers:
  - Strict text conversion (None when the bytes are not valid UTF-8)
  - Lossy text conversion (ill-formed sequences become U+FFFD)
  - Value equality and a stable hash, usable as dict keys and set members
  - write_to() for any output byte stream

It is not meant for building up data piece by piece. Collect bytes with a
BufferedOutputByteStream and take its .bytes when done.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from argkit.constants import (
    DESCRIPTION_TEMPLATE,
    ENCODING,
    HASH_BITS,
    HASH_MULTIPLIER,
    LOSSY_ERRORS,
)

if TYPE_CHECKING:
    from argkit.stream import OutputByteStream

log = logging.getLogger(__name__)

_HASH_MASK = (1 << HASH_BITS) - 1
_HASH_SIGN = 1 << (HASH_BITS - 1)


class ByteString:
    """
    Immutable, ordered sequence of bytes.

    Usage:
        empty = ByteString()
        raw = ByteString(b"\\x00\\xff")           # any bytes-like or iterable of ints
        text = ByteString.from_text("héllo")      # UTF-8 encoded
        lit = ByteString.of(0x41, 0x00, 0x42)     # array-literal form

        text.as_string            # "héllo"
        raw.as_string             # None, not valid UTF-8
        raw.as_readable_string    # "\\x00\\ufffd"
        lit.write_to(stream)      # stream.write(b"A\\x00B")
    """

    __slots__ = ("_bytes", "_hash")

    def __init__(self, contents: Iterable[int] | bytes = b"") -> None:
        """
        Create a byte string holding a copy of contents.

        Args:
            contents: A bytes-like object or an iterable of ints in range(256).
                Order and length are preserved exactly, zero bytes included.

        Raises:
            TypeError: contents is a str (use from_text) or an int, or an
                item is not an integer.
            ValueError: an item is outside range(256).
        """
        if isinstance(contents, str):
            raise TypeError(
                "ByteString does not encode str implicitly. "
                "Use ByteString.from_text() for UTF-8 text."
            )
        if isinstance(contents, int):
            raise TypeError(
                "ByteString requires bytes or an iterable of ints, not int"
            )
        object.__setattr__(self, "_bytes", bytes(contents))
        object.__setattr__(self, "_hash", None)

    # === Construction ===

    @classmethod
    def empty(cls) -> ByteString:
        """Create an empty byte string."""
        return cls()

    @classmethod
    def from_bytes(cls, contents: Iterable[int] | bytes) -> ByteString:
        return cls(contents)

    @classmethod
    def from_text(cls, text: str) -> ByteString:
        """Create a byte string from the UTF-8 encoding of text."""
        if not isinstance(text, str):
            raise TypeError(f"from_text requires str, got {type(text).__name__}")
        return cls(text.encode(ENCODING))

    @classmethod
    def of(cls, *values: int) -> ByteString:
        """Array-literal form: ByteString.of(0x68, 0x69) == ByteString(b"hi")."""
        return cls(values)

    @classmethod
    def from_string_literal(cls, text: str) -> ByteString:
        """String-literal form, identical to from_text()."""
        return cls.from_text(text)

    # === Accessors ===

    @property
    def contents(self) -> bytes:
        """The stored bytes. Immutable, so no copy is made."""
        return self._bytes

    @property
    def count(self) -> int:
        return len(self._bytes)

    def __len__(self) -> int:
        return len(self._bytes)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bytes)

    def __bytes__(self) -> bytes:
        return self._bytes

    # === Text conversion ===

    @property
    def as_string(self) -> str | None:
        """
        The contents decoded as UTF-8, or None if they are not valid UTF-8.

        Decodes the full length of the buffer, so embedded NUL bytes are
        kept as U+0000 characters.
        """
        try:
            return self._bytes.decode(ENCODING)
        except UnicodeDecodeError as exc:
            log.debug(
                "Strict decode failed for %i bytes at offset %i: %s",
                len(self._bytes), exc.start, exc.reason,
            )
            return None

    @property
    def as_readable_string(self) -> str:
        """The contents decoded as UTF-8, with U+FFFD for ill-formed sequences."""
        return self._bytes.decode(ENCODING, errors=LOSSY_ERRORS)

    @property
    def description(self) -> str:
        """Debug rendering built from the readable string. Not round-trippable."""
        return DESCRIPTION_TEMPLATE.format(self.as_readable_string)

    def __repr__(self) -> str:
        return self.description

    # === Equality & hashing ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteString):
            return NotImplemented
        return self._bytes == other._bytes

    @property
    def hash_value(self) -> int:
        """
        Polynomial hash of the contents as a signed 64-bit integer.

        Seeded with the byte count, each byte folded in order as
        acc * 31 + byte. The same contents always give the same value,
        in any process.
        """
        if self._hash is None:
            acc = len(self._bytes)
            for byte in self._bytes:
                acc = (acc * HASH_MULTIPLIER + byte) & _HASH_MASK
            if acc & _HASH_SIGN:
                acc -= 1 << HASH_BITS
            object.__setattr__(self, "_hash", acc)
        return self._hash

    def __hash__(self) -> int:
        return self.hash_value

    # === Output ===

    def write_to(self, stream: OutputByteStream) -> None:
        """Write the full contents to stream in a single write() call."""
        log.debug("Writing %i bytes to %s", len(self._bytes), type(stream).__name__)
        stream.write(self._bytes)

    # === Immutability ===

    def __setattr__(self, name, value):
        raise AttributeError("ByteString is immutable.")

    def __delattr__(self, name):
        raise AttributeError("ByteString is immutable.")

    def __reduce__(self):
        # Rebuild through __init__, since __setattr__ is blocked.
        return (self.__class__, (self._bytes,))
