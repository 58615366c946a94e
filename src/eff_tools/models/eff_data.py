"""Denormalized, name-based view of an EFF file.

Handles carry their model by name and own their group elements directly, so
the structure can be edited without keeping indices in sync by hand.
"""

from dataclasses import dataclass, field

from eff_tools.models.eff_file import EffectHandleFlags


@dataclass(slots=True)
class EffectGroupElementData:
    start_frame: int
    emitter_set_index: int
    parent_joint_name: str         # joint the emitter set is attached to


@dataclass(slots=True)
class EffectHandleData:
    name: str
    flags: EffectHandleFlags = field(default_factory=EffectHandleFlags)
    emitter_set_index: int = 0
    model_name: str = ""           # "" = no model
    group: list[EffectGroupElementData] = field(default_factory=list)


@dataclass(slots=True)
class EffectModelEntryData:
    name: str
    unk: int = 0                   # opaque, passed through unchanged


@dataclass(slots=True)
class EffData:
    handles: list[EffectHandleData] = field(default_factory=list)
    model_entries: list[EffectModelEntryData] = field(default_factory=list)
    resource_data: bytes | None = None   # never part of the JSON form
