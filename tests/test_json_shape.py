"""Tests for the dict/JSON forms of EFF data."""

import json

import pytest

from eff_tools.config import ConvertConfig
from eff_tools.errors import InvalidTextError
from eff_tools.interchange.json_shape import (
    data_from_dict,
    data_to_dict,
    dumps,
    file_from_dict,
    file_to_dict,
)
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


def _data() -> EffData:
    return EffData(
        handles=[
            EffectHandleData(
                name="ef_mario_finalbullet",
                flags=EffectHandleFlags(hit_effect=True),
                emitter_set_index=4,
                model_name="M_Bullet",
                group=[EffectGroupElementData(start_frame=3, emitter_set_index=5,
                                              parent_joint_name="top")],
            ),
        ],
        model_entries=[EffectModelEntryData(name="M_Bullet", unk=1)],
        resource_data=b"never serialized",
    )


def test_data_to_dict_shape():
    payload = data_to_dict(_data())
    assert set(payload) == {"handles", "model_entries"}

    handle = payload["handles"][0]
    assert handle["name"] == "ef_mario_finalbullet"
    assert list(handle["flags"]) == list(HANDLE_FLAG_NAMES)
    assert handle["flags"]["hit_effect"] is True
    assert handle["emitter_set_index"] == 4
    assert handle["model_name"] == "M_Bullet"
    assert handle["group"] == [
        {"start_frame": 3, "emitter_set_index": 5, "parent_joint_name": "top"}
    ]
    assert payload["model_entries"] == [{"name": "M_Bullet", "unk": 1}]


def test_data_dict_round_trip_through_json():
    original = _data()
    payload = json.loads(dumps(data_to_dict(original)))
    restored = data_from_dict(payload, resource_data=original.resource_data)
    assert restored == original


def test_missing_flags_default_to_false():
    data = data_from_dict({"handles": [{"name": "ef", "emitter_set_index": 1}]})
    assert data.handles[0].flags == EffectHandleFlags()
    assert data.handles[0].model_name == ""
    assert data.handles[0].group == []
    assert data.model_entries == []


def test_integer_strings_accepted():
    data = data_from_dict({"handles": [{"name": "ef", "emitter_set_index": "0x10"}]})
    assert data.handles[0].emitter_set_index == 16


def test_missing_name_rejected():
    with pytest.raises(ValueError, match="handles\\[0\\] is missing 'name'"):
        data_from_dict({"handles": [{"emitter_set_index": 1}]})


def test_unknown_flag_rejected():
    payload = {"handles": [{"name": "ef", "emitter_set_index": 1, "flags": {"unk_08": True}}]}
    with pytest.raises(ValueError, match="unknown flags"):
        data_from_dict(payload)


def test_non_bool_flag_rejected():
    payload = {"handles": [{"name": "ef", "emitter_set_index": 1, "flags": {"unk_01": 1}}]}
    with pytest.raises(ValueError, match="true or false"):
        data_from_dict(payload)


def test_bool_is_not_an_index():
    with pytest.raises(ValueError, match="bool"):
        data_from_dict({"handles": [{"name": "ef", "emitter_set_index": True}]})


def test_non_object_payload_rejected():
    with pytest.raises(ValueError, match="JSON object"):
        data_from_dict([])


def test_group_entry_must_be_object():
    payload = {"handles": [{"name": "ef", "emitter_set_index": 1, "group": [3]}]}
    with pytest.raises(ValueError, match="must be an object"):
        data_from_dict(payload)


def _raw() -> EffFile:
    return EffFile(
        effect_handles=[EffectHandle(
            flags=EffectHandleFlags(update_always=True),
            emitter_set_index=2,
            model_entry_index=1,
            group_start=1,
            group_count=1,
        )],
        group_elements=[EffectGroupElement(7, 8)],
        model_entries=[EffectModelEntry(1)],
        handle_names=[b"ef"],
        model_names=[b"M"],
        parent_joint_names=[b"top"],
    )


def test_file_dict_round_trip():
    payload = json.loads(dumps(file_to_dict(_raw())))
    assert payload["handle_names"] == ["ef"]
    assert payload["effect_handles"][0]["model_entry_index"] == 1
    assert file_from_dict(payload) == _raw()


def test_file_from_dict_keeps_indices_as_given():
    payload = file_to_dict(_raw())
    payload["effect_handles"][0]["model_entry_index"] = 99
    assert file_from_dict(payload).effect_handles[0].model_entry_index == 99


def test_file_from_dict_rejects_foreign_key_names():
    payload = {
        "effect_handles": [{
            "flags": {},
            "emitter_set_handle": 3,
            "effect_model_entry_handle": 0,
            "effect_group_element_start": 0,
            "effect_group_element_count": 0,
        }],
        "effect_group_elements": [],
        "effect_model_entries": [],
        "effect_handle_names": ["ef"],
        "effect_model_names": [],
        "parent_joint_names": [],
    }
    with pytest.raises(ValueError, match="missing 'emitter_set_index'"):
        file_from_dict(payload)


def test_file_to_dict_needs_text_names():
    eff = _raw()
    eff.handle_names = [b"\xff"]
    with pytest.raises(InvalidTextError):
        file_to_dict(eff)


def test_dumps_uses_configured_indent():
    text = dumps({"a": [1]}, ConvertConfig(json_indent=None))
    assert text == '{"a": [1]}\n'
    assert dumps({"a": 1}).startswith("{\n  ")


def test_dumps_keeps_non_ascii_names():
    assert "エフェクト" in dumps({"name": "エフェクト"})
