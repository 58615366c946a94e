"""EFF container constants and the effect handle flag layout.

Sizes are the on-disk record sizes in bytes. The flag table is a
compatibility contract with the game's files: every position must stay
exactly where it is.
"""

EFF_MAGIC = b"EFFN"
EFF_VERSION = 0x0002_0000

HEADER_SIZE = 0x10          # magic + version + four i16 header values
EFFECT_HANDLE_SIZE = 16     # flags(4) + emitter set(4) + model entry(4) + start(2) + count(2)
GROUP_ELEMENT_SIZE = 4      # start frame(2) + emitter set(2)
MODEL_ENTRY_SIZE = 1

RESOURCE_ALIGNMENT_COEFFICIENT = 0x1000
NO_RESOURCE_FACTOR = -1

# Bit position (LSB first) -> flag name. None marks a reserved bit, which is
# ignored on read and always written as zero.
HANDLE_FLAG_BITS: tuple[str | None, ...] = (
    "unk_01",         # 0
    "unk_02",         # 1
    "unk_03",         # 2
    "unk_04",         # 3
    "unk_05",         # 4
    "unk_06",         # 5
    "unk_07",         # 6
    None,             # 7
    "unk_09",         # 8
    "unk_10",         # 9
    None,             # 10
    None,             # 11
    "unk_13",         # 12
    "unk_14",         # 13
    "unk_15",         # 14
    "unk_16",         # 15
    "unk_17",         # 16
    None,             # 17
    "hit_effect",     # 18
    "unk_20",         # 19
    "unk_21",         # 20
    None,             # 21
    "unk_23",         # 22
    "update_always",  # 23
    "unk_25",         # 24
    "unk_26",         # 25
    None,             # 26
    None,             # 27
    "unk_29",         # 28
    "unk_30",         # 29
    "unk_31",         # 30
    "unk_32",         # 31
)

HANDLE_FLAG_NAMES: tuple[str, ...] = tuple(n for n in HANDLE_FLAG_BITS if n is not None)

RESERVED_FLAG_MASK: int = sum(
    1 << bit for bit, name in enumerate(HANDLE_FLAG_BITS) if name is None
)
