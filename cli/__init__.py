"""Command-line interface for BuildStamp.

Lets a build script run the save-build-info step as a discrete command:

    buildstamp generate --group com.example --name App --version 2.1.0 \
        --destination src/main/resources
    python -m cli decode k3qs
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from buildconfig.schema import BuildInfoConfig, ProjectCoordinates
from buildconfig.validator import (
    ConfigurationError,
    load_config_file,
    validate_config,
    validate_coordinates,
)
from buildinfo.writer import DestinationWriteError
from core.step import SaveBuildInfoStep
from timecode import ClockError, TimeCodeGenerator, TimeKeeper
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_WRITE_FAILURE,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)

__all__ = [
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "EXIT_WRITE_FAILURE",
    "build_config",
    "build_parser",
    "main",
    "parse_args",
    "run_decode",
    "run_generate",
]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildstamp",
        description=f"{APP_NAME} - write build info (coordinates, datetime, short code) as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Generate build info and save it to every destination"
    )
    generate_parser.add_argument("--group", required=True, help="Project group")
    generate_parser.add_argument("--name", required=True, help="Project name")
    generate_parser.add_argument(
        "--version", dest="project_version", required=True, help="Project version"
    )
    generate_parser.add_argument("--root-name", default=None, help="Root project name")
    generate_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON step configuration (optional)",
    )
    generate_parser.add_argument(
        "--destination",
        "-d",
        dest="destinations",
        action="append",
        default=None,
        help="Destination directory (repeatable; replaces configured destinations)",
    )
    generate_parser.add_argument("--filename", default=None, help="Output filename")
    generate_parser.add_argument(
        "--code-bit-xor", default=None, help="32-bit mask for the code (e.g. 0x11223344)"
    )
    generate_parser.add_argument(
        "--use-root-name",
        action="store_true",
        default=None,
        help="Use the root project name instead of the project name",
    )
    generate_parser.add_argument(
        "--timestamp-basis",
        choices=["utc", "local"],
        default=None,
        help="Clock basis of the datetime stamp (default: utc)",
    )
    generate_parser.add_argument(
        "--base-dir",
        type=str,
        default=None,
        help="Directory that relative destinations are resolved against",
    )
    generate_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    decode_parser = subparsers.add_parser(
        "decode", help="Show the build second a code stands for"
    )
    decode_parser.add_argument("code", help="Build code to decode")
    decode_parser.add_argument(
        "--config", type=str, default=None, help="Configuration holding the code mask"
    )
    decode_parser.add_argument(
        "--code-bit-xor", default=None, help="32-bit mask the code was generated with"
    )
    decode_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace) -> BuildInfoConfig:
    """Merge the optional config file with command-line overrides.

    Raises:
        ConfigurationError: If the file or the merged options are invalid
    """
    options: dict[str, Any] = {}
    if getattr(args, "config", None):
        options.update(load_config_file(args.config))

    overrides = {
        "destinations": getattr(args, "destinations", None),
        "filename": getattr(args, "filename", None),
        "code_bit_xor": getattr(args, "code_bit_xor", None),
        "use_root_name": getattr(args, "use_root_name", None),
        "timestamp_basis": getattr(args, "timestamp_basis", None),
    }
    aliases = {
        "code_bit_xor": "codeBitXor",
        "use_root_name": "useRootName",
        "timestamp_basis": "timestampBasis",
    }
    for key, value in overrides.items():
        if value is None:
            continue
        options.pop(aliases.get(key, key), None)
        options[key] = value

    return validate_config(options)


def run_generate(args: argparse.Namespace) -> int:
    """Run the save-build-info step from parsed arguments."""
    try:
        config = build_config(args)
        coordinates: ProjectCoordinates = validate_coordinates(
            {
                "group": args.group,
                "name": args.name,
                "version": args.project_version,
                "root_name": args.root_name,
            }
        )
        base_dir = Path(args.base_dir) if args.base_dir else None
        SaveBuildInfoStep(config, base_dir=base_dir).run(coordinates)
        return EXIT_SUCCESS
    except ConfigurationError as e:
        print(f"✗ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except DestinationWriteError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_WRITE_FAILURE
    except ClockError as e:
        print(f"✗ Clock error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.exception(f"Unexpected error while saving build info: {type(e).__name__}")
        return EXIT_RUNTIME_ERROR


def run_decode(args: argparse.Namespace) -> int:
    """Print the elapsed seconds and UTC instant of a code."""
    try:
        options: dict[str, Any] = {}
        if args.config:
            options.update(load_config_file(args.config))
        if args.code_bit_xor is not None:
            options.pop("codeBitXor", None)
            options["code_bit_xor"] = args.code_bit_xor
        config = validate_config(options)
    except ConfigurationError as e:
        print(f"✗ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    generator = TimeCodeGenerator(TimeKeeper(), code_bit_xor=config.code_bit_xor)
    try:
        seconds = generator.seconds_for(args.code)
    except ValueError as e:
        print(f"✗ Invalid code: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    instant = generator.instant_for(args.code)
    print(f"{args.code}: {seconds} seconds after zero instant ({instant.strftime('%Y-%m-%dT%H:%M:%SZ')})")
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the ``buildstamp`` command."""
    args = parse_args(argv)
    setup_logging(verbose=getattr(args, "verbose", False))

    if args.command == "generate":
        return run_generate(args)
    if args.command == "decode":
        return run_decode(args)

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return EXIT_RUNTIME_ERROR
