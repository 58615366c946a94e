"""Plain-dict (JSON-ready) forms of EffData and EffFile.

The resource blob is never part of these dicts; it travels as a separate
file. Names become text here, so InvalidTextError can surface from the raw
form for files whose names are not UTF-8.

Both shapes use this package's own field names (the Python attribute
names) and spell flags as an object of named booleans. They are not
compatible with the JSON written by other EFF converters, which name the
fields differently and may pack the raw flags into a single value; such
files have to be re-exported from the .eff before they will load here.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from eff_tools.config import ConvertConfig
from eff_tools.models.constants import HANDLE_FLAG_NAMES
from eff_tools.models.eff_data import (
    EffData,
    EffectGroupElementData,
    EffectHandleData,
    EffectModelEntryData,
)
from eff_tools.models.eff_file import (
    EffectGroupElement,
    EffectHandle,
    EffectHandleFlags,
    EffectModelEntry,
    EffFile,
)
from eff_tools.parser.cstring import from_text, to_text


def _parse_int_like(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("bool is not a valid integer value")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip(), 0)
    raise ValueError(f"Expected integer-like value, got: {value!r}")


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"{where} must be an object, got: {data!r}")
    if key not in data:
        raise ValueError(f"{where} is missing {key!r}")
    return data[key]


def _object(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{where} must be an object, got: {data!r}")
    return data


def _list(data: dict[str, Any], key: str, where: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"{where}.{key} must be a list")
    return value


def _flags_to_dict(flags: EffectHandleFlags) -> dict[str, bool]:
    return {name: getattr(flags, name) for name in HANDLE_FLAG_NAMES}


def _flags_from_dict(data: Any, where: str) -> EffectHandleFlags:
    if data is None:
        return EffectHandleFlags()
    if not isinstance(data, dict):
        raise ValueError(f"{where}.flags must be an object")
    unknown = set(data) - set(HANDLE_FLAG_NAMES)
    if unknown:
        raise ValueError(f"{where}.flags has unknown flags: {sorted(unknown)}")
    for name, value in data.items():
        if not isinstance(value, bool):
            raise ValueError(f"{where}.flags.{name} must be true or false")
    return EffectHandleFlags(**data)


# --- EffData ---

def data_to_dict(data: EffData) -> dict[str, Any]:
    return {
        "handles": [
            {
                "name": handle.name,
                "flags": _flags_to_dict(handle.flags),
                "emitter_set_index": handle.emitter_set_index,
                "model_name": handle.model_name,
                "group": [asdict(element) for element in handle.group],
            }
            for handle in data.handles
        ],
        "model_entries": [asdict(entry) for entry in data.model_entries],
    }


def _handle_data_from_dict(entry: Any, where: str) -> EffectHandleData:
    entry = _object(entry, where)
    group = []
    for j, element in enumerate(_list(entry, "group", where)):
        element_where = f"{where}.group[{j}]"
        element = _object(element, element_where)
        group.append(EffectGroupElementData(
            start_frame=_parse_int_like(_require(element, "start_frame", element_where)),
            emitter_set_index=_parse_int_like(
                _require(element, "emitter_set_index", element_where)
            ),
            parent_joint_name=str(element.get("parent_joint_name", "")),
        ))
    return EffectHandleData(
        name=str(_require(entry, "name", where)),
        flags=_flags_from_dict(entry.get("flags"), where),
        emitter_set_index=_parse_int_like(_require(entry, "emitter_set_index", where)),
        model_name=str(entry.get("model_name") or ""),
        group=group,
    )


def data_from_dict(payload: dict[str, Any], resource_data: bytes | None = None) -> EffData:
    """Build EffData from its dict form.

    Raises:
        ValueError: A required key is missing or a value has the wrong type.
    """
    if not isinstance(payload, dict):
        raise ValueError("EFF data must be a JSON object")
    handles = [
        _handle_data_from_dict(entry, f"handles[{i}]")
        for i, entry in enumerate(_list(payload, "handles", "data"))
    ]
    model_entries = [
        EffectModelEntryData(
            name=str(_require(entry, "name", f"model_entries[{i}]")),
            unk=_parse_int_like(entry.get("unk", 0)),
        )
        for i, entry in enumerate(_list(payload, "model_entries", "data"))
    ]
    return EffData(handles=handles, model_entries=model_entries, resource_data=resource_data)


# --- EffFile ---

def file_to_dict(eff: EffFile) -> dict[str, Any]:
    return {
        "effect_handles": [
            {
                "flags": _flags_to_dict(handle.flags),
                "emitter_set_index": handle.emitter_set_index,
                "model_entry_index": handle.model_entry_index,
                "group_start": handle.group_start,
                "group_count": handle.group_count,
            }
            for handle in eff.effect_handles
        ],
        "group_elements": [asdict(element) for element in eff.group_elements],
        "model_entries": [asdict(entry) for entry in eff.model_entries],
        "handle_names": [to_text(name) for name in eff.handle_names],
        "model_names": [to_text(name) for name in eff.model_names],
        "parent_joint_names": [to_text(name) for name in eff.parent_joint_names],
    }


def file_from_dict(payload: dict[str, Any], resource_data: bytes | None = None) -> EffFile:
    """Build a raw EffFile from its dict form. Indices are taken as given."""
    if not isinstance(payload, dict):
        raise ValueError("EFF file must be a JSON object")
    handles = []
    for i, entry in enumerate(_list(payload, "effect_handles", "file")):
        where = f"effect_handles[{i}]"
        entry = _object(entry, where)
        handles.append(EffectHandle(
            flags=_flags_from_dict(entry.get("flags"), where),
            emitter_set_index=_parse_int_like(_require(entry, "emitter_set_index", where)),
            model_entry_index=_parse_int_like(entry.get("model_entry_index", 0)),
            group_start=_parse_int_like(entry.get("group_start", 0)),
            group_count=_parse_int_like(entry.get("group_count", 0)),
        ))
    group_elements = [
        EffectGroupElement(
            start_frame=_parse_int_like(_require(entry, "start_frame", f"group_elements[{i}]")),
            emitter_set_index=_parse_int_like(
                _require(entry, "emitter_set_index", f"group_elements[{i}]")
            ),
        )
        for i, entry in enumerate(_list(payload, "group_elements", "file"))
    ]
    model_entries = [
        EffectModelEntry(unk=_parse_int_like(_object(entry, f"model_entries[{i}]").get("unk", 0)))
        for i, entry in enumerate(_list(payload, "model_entries", "file"))
    ]
    return EffFile(
        effect_handles=handles,
        group_elements=group_elements,
        model_entries=model_entries,
        handle_names=[from_text(str(n)) for n in _list(payload, "handle_names", "file")],
        model_names=[from_text(str(n)) for n in _list(payload, "model_names", "file")],
        parent_joint_names=[
            from_text(str(n)) for n in _list(payload, "parent_joint_names", "file")
        ],
        resource_data=resource_data,
    )


def dumps(payload: dict[str, Any], config: ConvertConfig | None = None) -> str:
    config = config or ConvertConfig()
    return json.dumps(payload, indent=config.json_indent, ensure_ascii=False) + "\n"
