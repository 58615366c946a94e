"""Convert between the raw EffFile layout and the name-based EffData view.

file_to_data() resolves the 1-based indices into names and group lists,
checking every index against the array it points into. data_to_file() goes
the other way, laying group elements out contiguously in handle order and
turning model names back into indices.

Model names are resolved first-match-wins: if two model entries share a
name, every handle using that name points at the first one. Files shipped
with the game rely on this, so it is kept as-is.
"""

import logging

from eff_tools.errors import CorruptIndexError
from eff_tools.models.eff_data import (
    EffData,
    EffectGroupElementData,
    EffectHandleData,
    EffectModelEntryData,
)
from eff_tools.models.eff_file import (
    EffectGroupElement,
    EffectHandle,
    EffectModelEntry,
    EffFile,
)
from eff_tools.parser.cstring import from_text, to_text
from eff_tools.parser.flag_codec import copy_flags

logger = logging.getLogger(__name__)


def _check_table(names: list[bytes], records: list, what: str) -> None:
    if len(names) != len(records):
        raise CorruptIndexError(
            f"{len(names)} {what} names for {len(records)} {what} records"
        )


def _model_name(eff: EffFile, handle_no: int, index: int) -> str:
    if index == 0:
        return ""
    if not 1 <= index <= len(eff.model_names):
        raise CorruptIndexError(
            f"Handle {handle_no}: model entry index {index} "
            f"outside [1, {len(eff.model_names)}]"
        )
    return to_text(eff.model_names[index - 1])


def _group(eff: EffFile, handle_no: int, handle: EffectHandle) -> list[EffectGroupElementData]:
    if handle.group_count == 0:
        return []
    start = handle.group_start - 1
    end = start + handle.group_count
    if start < 0 or handle.group_count < 0 or end > len(eff.group_elements):
        raise CorruptIndexError(
            f"Handle {handle_no}: group slice start={handle.group_start} "
            f"count={handle.group_count} outside {len(eff.group_elements)} group elements"
        )
    return [
        EffectGroupElementData(
            start_frame=element.start_frame,
            emitter_set_index=element.emitter_set_index,
            parent_joint_name=to_text(joint),
        )
        for element, joint in zip(
            eff.group_elements[start:end], eff.parent_joint_names[start:end]
        )
    ]


def file_to_data(eff: EffFile) -> EffData:
    """Denormalize raw records into named handles and model entries.

    Raises:
        CorruptIndexError: A model index or group slice is out of range, or
            a name table does not match its record array.
        InvalidTextError: A name is not valid UTF-8.
    """
    _check_table(eff.handle_names, eff.effect_handles, "effect handle")
    _check_table(eff.model_names, eff.model_entries, "model entry")
    _check_table(eff.parent_joint_names, eff.group_elements, "group element")

    handles = [
        EffectHandleData(
            name=to_text(name),
            flags=copy_flags(handle.flags),
            emitter_set_index=handle.emitter_set_index,
            model_name=_model_name(eff, i, handle.model_entry_index),
            group=_group(eff, i, handle),
        )
        for i, (handle, name) in enumerate(zip(eff.effect_handles, eff.handle_names))
    ]
    model_entries = [
        EffectModelEntryData(name=to_text(name), unk=entry.unk)
        for entry, name in zip(eff.model_entries, eff.model_names)
    ]
    return EffData(
        handles=handles,
        model_entries=model_entries,
        resource_data=eff.resource_data,
    )


def _model_index_by_name(model_entries: list[EffectModelEntryData]) -> dict[str, int]:
    """Map each model name to the 1-based index of its first occurrence."""
    index: dict[str, int] = {}
    for position, entry in enumerate(model_entries, start=1):
        if entry.name in index:
            logger.debug(
                "Duplicate model name %r at entry %d; handles resolve to entry %d",
                entry.name, position, index[entry.name],
            )
            continue
        index[entry.name] = position
    return index


def data_to_file(data: EffData) -> EffFile:
    """Renormalize named handles into index-based records."""
    model_index = _model_index_by_name(data.model_entries)

    eff = EffFile(resource_data=data.resource_data)
    cursor = 0
    for handle in data.handles:
        group_start = 0
        if handle.group:
            group_start = cursor + 1
            cursor += len(handle.group)

        model_entry_index = model_index.get(handle.model_name, 0) if handle.model_name else 0
        if handle.model_name and not model_entry_index:
            logger.warning(
                "Handle %r references unknown model %r; writing no model",
                handle.name, handle.model_name,
            )

        eff.effect_handles.append(EffectHandle(
            flags=copy_flags(handle.flags),
            emitter_set_index=handle.emitter_set_index,
            model_entry_index=model_entry_index,
            group_start=group_start,
            group_count=len(handle.group),
        ))
        eff.handle_names.append(from_text(handle.name))
        for element in handle.group:
            eff.group_elements.append(EffectGroupElement(
                start_frame=element.start_frame,
                emitter_set_index=element.emitter_set_index,
            ))
            eff.parent_joint_names.append(from_text(element.parent_joint_name))

    for entry in data.model_entries:
        eff.model_entries.append(EffectModelEntry(unk=entry.unk))
        eff.model_names.append(from_text(entry.name))

    logger.debug(
        "Mapped %d handles onto %d group elements and %d model entries",
        len(eff.effect_handles), len(eff.group_elements), len(eff.model_entries),
    )
    return eff
