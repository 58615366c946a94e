"""Read and write EFF effect descriptor files from Super Smash Bros. Ultimate."""

from eff_tools.errors import (
    BadMagicError,
    CorruptIndexError,
    EffFormatError,
    InvalidTextError,
    TruncatedError,
)
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
from eff_tools.parser.eff_mapper import data_to_file, file_to_data
from eff_tools.parser.eff_reader import parse_eff, read_eff
from eff_tools.parser.eff_writer import build_eff, write_eff

__all__ = [
    "BadMagicError",
    "CorruptIndexError",
    "EffData",
    "EffFile",
    "EffFormatError",
    "EffectGroupElement",
    "EffectGroupElementData",
    "EffectHandle",
    "EffectHandleData",
    "EffectHandleFlags",
    "EffectModelEntry",
    "EffectModelEntryData",
    "InvalidTextError",
    "TruncatedError",
    "build_eff",
    "data_to_file",
    "file_to_data",
    "parse_eff",
    "read_eff",
    "write_eff",
]
