"""Raw EFF container records, mirroring the on-disk layout.

Cross references between the arrays are plain integers exactly as stored:
``model_entry_index`` and ``group_start`` are 1-based with 0 meaning "none".
Nothing here is validated; see eff_mapper for the bounds checks.
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class EffectHandleFlags:
    """Named attribute bits of an effect handle (reserved bits excluded).

    Most meanings are unknown; the names follow their bit position (1-based).
    """
    unk_01: bool = False
    unk_02: bool = False
    unk_03: bool = False
    unk_04: bool = False
    unk_05: bool = False
    unk_06: bool = False
    unk_07: bool = False
    unk_09: bool = False
    unk_10: bool = False
    unk_13: bool = False
    unk_14: bool = False
    unk_15: bool = False
    unk_16: bool = False
    unk_17: bool = False
    hit_effect: bool = False
    unk_20: bool = False
    unk_21: bool = False
    unk_23: bool = False
    update_always: bool = False
    unk_25: bool = False
    unk_26: bool = False
    unk_29: bool = False
    unk_30: bool = False
    unk_31: bool = False
    unk_32: bool = False


@dataclass(slots=True)
class EffectHandle:
    """16-byte effect handle record."""
    flags: EffectHandleFlags = field(default_factory=EffectHandleFlags)
    emitter_set_index: int = 0     # i32
    model_entry_index: int = 0     # i32, 1-based, 0 = no model
    group_start: int = 0           # i16, 1-based, 0 = no group
    group_count: int = 0           # i16


@dataclass(slots=True)
class EffectGroupElement:
    """4-byte group element record."""
    start_frame: int               # i16, frame to request the emitter set on
    emitter_set_index: int         # i16


@dataclass(slots=True)
class EffectModelEntry:
    """1-byte model entry record."""
    unk: int = 0                   # i8, only ever 0 or 1 in shipped files


@dataclass(slots=True)
class EffFile:
    """A whole EFF container.

    The three name tables run parallel to their record arrays: one handle
    name per handle, one model name per model entry and one parent joint name
    per group element.
    """
    effect_handles: list[EffectHandle] = field(default_factory=list)
    group_elements: list[EffectGroupElement] = field(default_factory=list)
    model_entries: list[EffectModelEntry] = field(default_factory=list)
    handle_names: list[bytes] = field(default_factory=list)
    model_names: list[bytes] = field(default_factory=list)
    parent_joint_names: list[bytes] = field(default_factory=list)
    resource_data: bytes | None = None
