"""
argkit constants
================

Text policy:
    ENCODING                     <- Codec used for every text conversion
    LOSSY_ERRORS                 <- Codec error handler for readable (lossy) text
    REPLACEMENT_CHARACTER        <- What the lossy handler substitutes (U+FFFD)

Hashing:
    acc = count                  <- Seed with the byte count
    acc = acc * 31 + byte        <- Fold each byte, in order
    wrap to signed 64-bit        <- Two's complement, like a machine Int

Design Decisions:
    - Decoding always uses the explicit length of the buffer, never a terminator
    - One hash algorithm, independent of PYTHONHASHSEED and interpreter version
    - Description is for diagnostics only, it does not round-trip
"""

# Text conversion
ENCODING = "utf-8"
LOSSY_ERRORS = "replace"
REPLACEMENT_CHARACTER = "\ufffd"

# Rolling hash parameters
HASH_MULTIPLIER = 31
HASH_BITS = 64

# Debug rendering, filled with the readable string
DESCRIPTION_TEMPLATE = '<ByteString:"{}">'
