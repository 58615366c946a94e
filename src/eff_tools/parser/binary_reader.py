"""Low-level binary reader with typed read methods and a moving cursor."""

import struct

from eff_tools.errors import TruncatedError


class BinaryReader:
    """Wraps a bytes buffer with typed little-endian reads and a moving cursor.

    Every read is bounds-checked against ``end``; running out of input raises
    TruncatedError rather than returning short data.
    """

    __slots__ = ("_data", "_pos", "_end")

    def __init__(self, data: bytes, offset: int = 0, end: int | None = None) -> None:
        self._data = data
        self._pos = offset
        self._end = end if end is not None else len(data)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    def _read(self, size: int) -> bytes:
        if self._pos + size > self._end:
            raise TruncatedError(
                f"Read of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {self._end}"
            )
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def int8(self) -> int:
        return struct.unpack_from("<b", self._read(1))[0]

    def int16(self) -> int:
        return struct.unpack_from("<h", self._read(2))[0]

    def int32(self) -> int:
        return struct.unpack_from("<i", self._read(4))[0]

    def uint32(self) -> int:
        return struct.unpack_from("<I", self._read(4))[0]

    def signature(self) -> bytes:
        """Read a raw 4-byte file signature (e.g. b'EFFN')."""
        return self._read(4)

    def bytes(self, size: int) -> bytes:
        return self._read(size)

    def cstring(self) -> bytes:
        """Read a null-terminated string, returning the bytes before the null."""
        start = self._pos
        null = self._data.find(b"\x00", start, self._end)
        if null < 0:
            raise TruncatedError(f"No null terminator found starting at offset {start}")
        self._pos = null + 1  # skip past the null byte
        return bytes(self._data[start:null])

    def rest(self) -> bytes:
        """Consume and return everything up to the boundary."""
        if self._pos >= self._end:
            return b""
        return self._read(self._end - self._pos)

    def skip(self, size: int) -> None:
        if self._pos + size > self._end:
            raise TruncatedError(
                f"Skip of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {self._end}"
            )
        self._pos += size

    def align(self, alignment: int) -> int:
        """Advance to the next multiple of *alignment*; return bytes skipped.

        Landing past the boundary is allowed and leaves nothing to read.
        """
        skipped = (-self._pos) % alignment
        self._pos += skipped
        return skipped
