"""Null-terminated name strings.

Names are kept as raw bytes all the way through the binary layer so that a
decode/encode cycle reproduces them exactly, whatever their encoding. Text
conversion only happens when a caller asks for it (JSON output, the semantic
mapper), and that is the only place InvalidTextError can come from.
"""

from eff_tools.errors import InvalidTextError
from eff_tools.parser.binary_reader import BinaryReader
from eff_tools.parser.binary_writer import BinaryWriter


def read_cstring(reader: BinaryReader) -> bytes:
    """Read one name; raises TruncatedError if the input ends before a null."""
    return reader.cstring()


def read_cstrings(reader: BinaryReader, count: int) -> list[bytes]:
    return [read_cstring(reader) for _ in range(count)]


def write_cstring(writer: BinaryWriter, raw: bytes) -> None:
    """Write *raw* followed by one null byte. The content is not validated."""
    writer.cstring(raw)


def cstring_size(raw: bytes) -> int:
    """Serialized size of a name, terminator included."""
    return len(raw) + 1


def to_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidTextError(
            f"Name {raw!r} is not valid UTF-8 (byte {exc.start}: {exc.reason})"
        ) from exc


def from_text(text: str) -> bytes:
    """UTF-8 encode *text*. U+0000 is not rejected.

    An embedded NUL is written as-is and ends the name early when the file is
    read back; the remainder is then taken as the next name in the table.
    """
    return text.encode("utf-8")
