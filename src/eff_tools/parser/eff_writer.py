"""Encode EffFile records back into the EFF binary layout.

Header counts come from the list lengths and the resource factor is
computed, so the header is always consistent with the body.
"""

import logging
from typing import BinaryIO

from eff_tools.errors import EffFormatError
from eff_tools.models.constants import EFF_MAGIC, EFF_VERSION
from eff_tools.models.eff_file import EffFile
from eff_tools.parser.binary_writer import BinaryWriter
from eff_tools.parser.cstring import write_cstring
from eff_tools.parser.flag_codec import pack_flags
from eff_tools.parser.resource_alignment import alignment_factor, resource_alignment

logger = logging.getLogger(__name__)


def _check_parallel(eff: EffFile) -> None:
    pairs = (
        ("handle names", len(eff.handle_names), "effect handles", len(eff.effect_handles)),
        ("model names", len(eff.model_names), "model entries", len(eff.model_entries)),
        ("parent joint names", len(eff.parent_joint_names),
         "group elements", len(eff.group_elements)),
    )
    for names, name_count, records, record_count in pairs:
        if name_count != record_count:
            raise EffFormatError(
                f"{name_count} {names} do not match {record_count} {records}"
            )


def build_eff(eff: EffFile) -> bytes:
    """Serialize *eff* to bytes.

    Raises:
        EffFormatError: Name tables and record arrays differ in length, or a
            value does not fit its on-disk field.
    """
    _check_parallel(eff)
    factor = alignment_factor(eff)

    writer = BinaryWriter()
    writer.signature(EFF_MAGIC)
    writer.uint32(EFF_VERSION)
    writer.int16(len(eff.effect_handles))
    writer.int16(len(eff.model_entries))
    writer.int16(len(eff.group_elements))
    writer.int16(factor)

    for handle in eff.effect_handles:
        writer.uint32(pack_flags(handle.flags))
        writer.int32(handle.emitter_set_index)
        writer.int32(handle.model_entry_index)
        writer.int16(handle.group_start)
        writer.int16(handle.group_count)

    for element in eff.group_elements:
        writer.int16(element.start_frame)
        writer.int16(element.emitter_set_index)

    for entry in eff.model_entries:
        writer.int8(entry.unk)

    for table in (eff.handle_names, eff.model_names, eff.parent_joint_names):
        for name in table:
            write_cstring(writer, name)

    if eff.resource_data is not None:
        padding = writer.align(resource_alignment(factor))
        writer.bytes(eff.resource_data)
        logger.debug(
            "Resource factor %d: %d bytes of padding before %d byte blob",
            factor, padding, len(eff.resource_data),
        )

    return writer.getvalue()


def write_eff(stream: BinaryIO, eff: EffFile) -> None:
    """Serialize *eff* and write it to *stream* in one call."""
    stream.write(build_eff(eff))
