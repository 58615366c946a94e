"""Decode EFF containers from bytes.

File layout (little-endian):
  magic "EFFN" (4) + version (u32)
  handle count, model count, group element count, resource factor (i16 each)
  handles (16 bytes each), group elements (4), model entries (1)
  handle names, model names, parent joint names (null-terminated)
  [padding to factor * 0x1000, then resource blob to EOF]  if factor != -1

Decoding stops at the first problem and raises; indices are not validated
here (see eff_mapper).
"""

import logging
from typing import BinaryIO

from eff_tools.errors import BadMagicError, EffFormatError
from eff_tools.models.constants import EFF_MAGIC, NO_RESOURCE_FACTOR
from eff_tools.models.eff_file import (
    EffectGroupElement,
    EffectHandle,
    EffectModelEntry,
    EffFile,
)
from eff_tools.parser.binary_reader import BinaryReader
from eff_tools.parser.cstring import read_cstrings
from eff_tools.parser.flag_codec import reserved_bits, unpack_flags
from eff_tools.parser.resource_alignment import resource_alignment

logger = logging.getLogger(__name__)


def _read_count(reader: BinaryReader, what: str) -> int:
    count = reader.int16()
    if count < 0:
        raise EffFormatError(f"Negative {what} count {count} at offset {reader.position - 2}")
    return count


def _read_effect_handle(reader: BinaryReader) -> EffectHandle:
    word = reader.uint32()
    ignored = reserved_bits(word)
    if ignored:
        logger.debug("Dropping reserved flag bits 0x%08X at offset %d", ignored, reader.position - 4)
    return EffectHandle(
        flags=unpack_flags(word),
        emitter_set_index=reader.int32(),
        model_entry_index=reader.int32(),
        group_start=reader.int16(),
        group_count=reader.int16(),
    )


def _read_group_element(reader: BinaryReader) -> EffectGroupElement:
    return EffectGroupElement(
        start_frame=reader.int16(),
        emitter_set_index=reader.int16(),
    )


def _read_model_entry(reader: BinaryReader) -> EffectModelEntry:
    return EffectModelEntry(unk=reader.int8())


def parse_eff(data: bytes) -> EffFile:
    """Decode a complete EFF file.

    Raises:
        BadMagicError: The file does not start with b"EFFN".
        TruncatedError: The data ends inside a record or name.
        EffFormatError: A header count is negative.
    """
    reader = BinaryReader(data)

    if reader.remaining < len(EFF_MAGIC):
        raise BadMagicError(f"Expected {EFF_MAGIC!r} signature, got {bytes(data)!r}")
    magic = reader.signature()
    if magic != EFF_MAGIC:
        raise BadMagicError(f"Expected {EFF_MAGIC!r} signature, got {magic!r}")

    reader.skip(4)  # version, always 0x00020000
    handle_count = _read_count(reader, "effect handle")
    model_count = _read_count(reader, "model entry")
    group_count = _read_count(reader, "group element")
    factor = reader.int16()
    logger.debug(
        "EFF header: %d handles, %d models, %d group elements, resource factor %d",
        handle_count, model_count, group_count, factor,
    )

    handles = [_read_effect_handle(reader) for _ in range(handle_count)]
    group_elements = [_read_group_element(reader) for _ in range(group_count)]
    model_entries = [_read_model_entry(reader) for _ in range(model_count)]
    handle_names = read_cstrings(reader, handle_count)
    model_names = read_cstrings(reader, model_count)
    parent_joint_names = read_cstrings(reader, group_count)

    resource_data = None
    if factor != NO_RESOURCE_FACTOR:
        padding = reader.align(resource_alignment(factor))
        resource_data = reader.rest()
        logger.debug(
            "Resource blob: %d bytes after %d bytes of padding", len(resource_data), padding
        )

    return EffFile(
        effect_handles=handles,
        group_elements=group_elements,
        model_entries=model_entries,
        handle_names=handle_names,
        model_names=model_names,
        parent_joint_names=parent_joint_names,
        resource_data=resource_data,
    )


def read_eff(stream: BinaryIO) -> EffFile:
    """Decode an EFF file from the current position of *stream* to its end."""
    return parse_eff(stream.read())
