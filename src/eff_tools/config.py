"""Configuration knobs for EFF <-> JSON conversion.

Defaults match the file naming used by the game (``.eff`` descriptors with
a ``.ptcl`` particle resource next to them).
"""

from dataclasses import dataclass


@dataclass(slots=True)
class ConvertConfig:
    """Settings shared by the converter script and the JSON helpers."""

    json_indent: int | None = 2
    eff_suffix: str = ".eff"
    json_suffix: str = ".json"
    resource_suffix: str = ".ptcl"
    raw: bool = False               # convert the index-based layout as stored
