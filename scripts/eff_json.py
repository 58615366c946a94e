"""Convert EFF files to and from JSON.

Usage:
    python -m scripts.eff_json INPUT [OUTPUT] [RESOURCE] [--raw] [--indent N] [-v]

A ``.json`` input is encoded to EFF, reading the resource blob from RESOURCE
(default: the input stem with ``.ptcl``) when that file exists. Any other
input is decoded to JSON, and its resource blob, if any, is written to
RESOURCE.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from eff_tools.config import ConvertConfig
from eff_tools.interchange.json_shape import (
    data_from_dict,
    data_to_dict,
    dumps,
    file_from_dict,
    file_to_dict,
)
from eff_tools.parser.eff_io import load_eff, load_resource, save_eff, save_resource
from eff_tools.parser.eff_mapper import data_to_file, file_to_data


logger = logging.getLogger("eff_json")


def _default_json_paths(input_path: Path, config: ConvertConfig) -> tuple[Path, Path]:
    """(json, resource) paths for an EFF input: ``a.eff`` -> ``a.eff.json``, ``a.ptcl``."""
    output = input_path.with_name(input_path.name + config.json_suffix)
    resource = input_path.with_suffix(config.resource_suffix)
    return output, resource


def _default_eff_paths(input_path: Path, config: ConvertConfig) -> tuple[Path, Path]:
    """(eff, resource) paths for a JSON input: ``a.eff.json`` -> ``a.eff``, ``a.ptcl``."""
    output = input_path.with_suffix("")
    if output.suffix != config.eff_suffix:
        output = input_path.with_suffix(config.eff_suffix)
    resource = output.with_suffix(config.resource_suffix)
    return output, resource


def eff_to_json(
    input_path: Path,
    output_path: Path | None,
    resource_path: Path | None,
    config: ConvertConfig,
) -> None:
    default_output, default_resource = _default_json_paths(input_path, config)
    output_path = output_path or default_output
    resource_path = resource_path or default_resource

    eff = load_eff(input_path)
    if config.raw:
        payload = file_to_dict(eff)
        resource_data = eff.resource_data
    else:
        data = file_to_data(eff)
        payload = data_to_dict(data)
        resource_data = data.resource_data

    text = dumps(payload, config)
    output_path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", output_path)
    save_resource(resource_path, resource_data)


def json_to_eff(
    input_path: Path,
    output_path: Path | None,
    resource_path: Path | None,
    config: ConvertConfig,
) -> None:
    default_output, default_resource = _default_eff_paths(input_path, config)
    output_path = output_path or default_output
    resource_path = resource_path or default_resource

    payload = json.loads(input_path.read_text(encoding="utf-8"))
    resource_data = load_resource(resource_path)
    if config.raw:
        eff = file_from_dict(payload, resource_data)
    else:
        eff = data_to_file(data_from_dict(payload, resource_data))
    save_eff(output_path, eff)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert EFF files to and from JSON")
    parser.add_argument("input", type=Path, help="The input EFF or JSON file path")
    parser.add_argument("output", type=Path, nargs="?", help="The output EFF or JSON file path")
    parser.add_argument("resource", type=Path, nargs="?",
                        help="The input or output PTCL resource file path")
    parser.add_argument("--raw", action="store_true",
                        help="Convert the index-based layout as stored, without name resolution")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ConvertConfig(json_indent=args.indent, raw=args.raw)
    convert = json_to_eff if args.input.suffix == config.json_suffix else eff_to_json

    try:
        convert(args.input, args.output, args.resource, config)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
