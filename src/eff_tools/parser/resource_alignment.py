"""Alignment arithmetic for the trailing resource blob.

The header stores a factor rather than an offset. Writers derive the factor
from the size of everything before the blob; readers and writers then both
turn the factor back into an alignment with resource_alignment(), which
keeps the two directions byte-identical.
"""

from eff_tools.models.constants import (
    EFFECT_HANDLE_SIZE,
    GROUP_ELEMENT_SIZE,
    HEADER_SIZE,
    MODEL_ENTRY_SIZE,
    NO_RESOURCE_FACTOR,
    RESOURCE_ALIGNMENT_COEFFICIENT,
)
from eff_tools.models.eff_file import EffFile
from eff_tools.parser.cstring import cstring_size


def _wrap_int16(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


def preceding_size(eff: EffFile) -> int:
    """Serialized size of everything in *eff* that comes before the blob."""
    size = HEADER_SIZE
    size += len(eff.effect_handles) * EFFECT_HANDLE_SIZE
    size += len(eff.group_elements) * GROUP_ELEMENT_SIZE
    size += len(eff.model_entries) * MODEL_ENTRY_SIZE
    for table in (eff.handle_names, eff.model_names, eff.parent_joint_names):
        size += sum(cstring_size(name) for name in table)
    return size


def alignment_factor_for_size(size: int) -> int:
    """Factor of the first 0x1000 boundary strictly above *size*.

    A size that already sits on a boundary still moves to the next one. The
    result is wrapped into the signed 16-bit range the header stores, so a
    page count of 0xFFFF comes out as -1. That collides with
    NO_RESOURCE_FACTOR: the blob is still written, but a reader treats the
    file as having none.
    """
    boundary = (size + RESOURCE_ALIGNMENT_COEFFICIENT) & ~(RESOURCE_ALIGNMENT_COEFFICIENT - 1)
    return _wrap_int16(boundary // RESOURCE_ALIGNMENT_COEFFICIENT)


def alignment_factor(eff: EffFile) -> int:
    if eff.resource_data is None:
        return NO_RESOURCE_FACTOR
    return alignment_factor_for_size(preceding_size(eff))


def resource_alignment(factor: int) -> int:
    """Byte alignment of the blob for a header factor; at least 1."""
    if factor < 1:
        return 1
    return factor * RESOURCE_ALIGNMENT_COEFFICIENT
