"""
argkit - byte strings for argument and string processing.

ByteString is the byte-buffer value type; BufferedOutputByteStream collects
bytes written to it and hands them back as a ByteString.
"""

from .bytestring import ByteString
from .stream import BufferedOutputByteStream, ByteStreamable, OutputByteStream

__all__ = [
    "ByteString",
    "BufferedOutputByteStream",
    "ByteStreamable",
    "OutputByteStream",
]
