"""Path-based helpers for EFF files and their sibling resource files."""

import logging
from pathlib import Path

from eff_tools.models.eff_file import EffFile
from eff_tools.parser.eff_reader import parse_eff
from eff_tools.parser.eff_writer import build_eff

logger = logging.getLogger(__name__)


def load_eff(path: Path) -> EffFile:
    eff = parse_eff(path.read_bytes())
    logger.info("Read %s (%d effect handles)", path, len(eff.effect_handles))
    return eff


def save_eff(path: Path, eff: EffFile) -> None:
    # Encode fully before touching the output so a failure leaves no file.
    data = build_eff(eff)
    path.write_bytes(data)
    logger.info("Wrote %s (%d bytes)", path, len(data))


def save_resource(path: Path, resource_data: bytes | None) -> bool:
    """Write the resource blob to *path*; returns False when there is none."""
    if resource_data is None:
        logger.info("No resource data; %s not written", path)
        return False
    path.write_bytes(resource_data)
    logger.info("Wrote resource %s (%d bytes)", path, len(resource_data))
    return True


def load_resource(path: Path) -> bytes | None:
    """Read a resource blob, or None if *path* does not exist."""
    if not path.is_file():
        logger.info("No resource file at %s; writing without resource data", path)
        return None
    return path.read_bytes()
