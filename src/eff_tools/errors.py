"""Exceptions raised while decoding, encoding, or mapping EFF data.

Everything derives from ValueError so code written against the low-level
reader (which historically raised plain ValueError) keeps working.
"""


class EffFormatError(ValueError):
    """Base class for malformed or unrepresentable EFF content."""


class BadMagicError(EffFormatError):
    """The leading signature is not b"EFFN"."""


class TruncatedError(EffFormatError):
    """Input ended in the middle of a record or string."""


class CorruptIndexError(EffFormatError):
    """An index or slice points outside the array it references."""


class InvalidTextError(EffFormatError):
    """Name bytes are not valid UTF-8 where text was requested."""
