"""Pack and unpack EffectHandleFlags to and from the 32-bit on-disk word.

Both directions are driven by HANDLE_FLAG_BITS so they cannot drift apart.
"""

from eff_tools.models.constants import HANDLE_FLAG_BITS, HANDLE_FLAG_NAMES, RESERVED_FLAG_MASK
from eff_tools.models.eff_file import EffectHandleFlags


_NAMED_BITS: tuple[tuple[int, str], ...] = tuple(
    (bit, name) for bit, name in enumerate(HANDLE_FLAG_BITS) if name is not None
)


def unpack_flags(word: int) -> EffectHandleFlags:
    """Split a u32 into named booleans. Reserved bits are dropped."""
    return EffectHandleFlags(**{name: bool(word >> bit & 1) for bit, name in _NAMED_BITS})


def pack_flags(flags: EffectHandleFlags) -> int:
    """Build the u32 for *flags*. Reserved bits are always zero."""
    word = 0
    for bit, name in _NAMED_BITS:
        if getattr(flags, name):
            word |= 1 << bit
    return word


def reserved_bits(word: int) -> int:
    """Return only the reserved bits set in *word* (normally 0)."""
    return word & RESERVED_FLAG_MASK


def copy_flags(flags: EffectHandleFlags) -> EffectHandleFlags:
    return EffectHandleFlags(**{name: bool(getattr(flags, name)) for name in HANDLE_FLAG_NAMES})
