"""Low-level binary writer, the mirror image of BinaryReader."""

import struct

from eff_tools.errors import EffFormatError


_RANGES: dict[str, tuple[int, int]] = {
    "b": (-0x80, 0x7F),
    "h": (-0x8000, 0x7FFF),
    "i": (-0x8000_0000, 0x7FFF_FFFF),
    "I": (0, 0xFFFF_FFFF),
}


class BinaryWriter:
    """Appends typed little-endian values to a growing buffer."""

    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    @property
    def position(self) -> int:
        return len(self._buf)

    def _pack(self, fmt: str, value: int) -> None:
        low, high = _RANGES[fmt]
        if not low <= value <= high:
            raise EffFormatError(
                f"Value {value} at offset {len(self._buf)} "
                f"does not fit in field type {fmt!r} [{low}, {high}]"
            )
        self._buf += struct.pack("<" + fmt, value)

    def int8(self, value: int) -> None:
        self._pack("b", value)

    def int16(self, value: int) -> None:
        self._pack("h", value)

    def int32(self, value: int) -> None:
        self._pack("i", value)

    def uint32(self, value: int) -> None:
        self._pack("I", value)

    def signature(self, sig: bytes) -> None:
        if len(sig) != 4:
            raise ValueError(f"Signature must be 4 bytes, got {sig!r}")
        self._buf += sig

    def bytes(self, data: bytes) -> None:
        self._buf += data

    def cstring(self, data: bytes) -> None:
        """Write raw bytes followed by a single null terminator."""
        self._buf += data
        self._buf.append(0)

    def align(self, alignment: int) -> int:
        """Pad with zero bytes to the next multiple of *alignment*."""
        padding = (-len(self._buf)) % alignment
        self._buf += b"\x00" * padding
        return padding

    def getvalue(self) -> bytes:
        return bytes(self._buf)
