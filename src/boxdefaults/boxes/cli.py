"""CLI entrypoint for inspecting Vagrant box defaults."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from ..common.observability import configure_logging, get_logger
from ..common.settings import BoxDefaultsSettings
from .config import BOX_KEYS, BOX_NAMES, BoxDefaults
from .errors import BoxDefaultsError
from .loader import FORMATS, PACKAGED_DEFAULTS_PATH, dumps, load_box_defaults


LOGGER = get_logger("cli")


def _config_path(args: argparse.Namespace, settings: BoxDefaultsSettings) -> Optional[Path]:
    if args.config:
        return Path(args.config)
    return settings.defaults_path


def _load(args: argparse.Namespace, settings: BoxDefaultsSettings) -> BoxDefaults:
    return load_box_defaults(_config_path(args, settings))


def show_command(args: argparse.Namespace, settings: BoxDefaultsSettings) -> int:
    sys.stdout.write(dumps(_load(args, settings), args.format))
    return 0


def get_command(args: argparse.Namespace, settings: BoxDefaultsSettings) -> int:
    defaults = _load(args, settings)
    if args.key == "vagrant_min_version":
        print(defaults.vagrant_min_version)
        return 0
    mapping = defaults.as_mapping()
    if args.key not in mapping:
        LOGGER.error("box_key_unknown", key=args.key, known=list(BOX_KEYS))
        return 1
    print(mapping[args.key])
    return 0


def box_command(args: argparse.Namespace, settings: BoxDefaultsSettings) -> int:
    reference = _load(args, settings).reference(args.name)
    if args.json:
        print(json.dumps(reference.model_dump(), indent=2))
    else:
        print(reference)
    return 0


def check_command(args: argparse.Namespace, settings: BoxDefaultsSettings) -> int:
    path = _config_path(args, settings) or PACKAGED_DEFAULTS_PATH
    defaults = load_box_defaults(path)
    LOGGER.info("box_defaults_valid", path=str(path), boxes=len(defaults.references()))
    print(f"ok: {path}")
    return 0


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect Vagrant box images and versions")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Print the box defaults document")
    show_parser.add_argument("--config", help="Path to a box defaults YAML or JSON document")
    show_parser.add_argument("--format", choices=FORMATS, default="yaml", help="Output format")

    get_parser = subparsers.add_parser("get", help="Print a single value by key")
    get_parser.add_argument("--config", help="Path to a box defaults YAML or JSON document")
    get_parser.add_argument("key", help="Key such as SERVER_BOX or v49_SERVER_VERSION")

    box_parser = subparsers.add_parser("box", help="Print the image and version of a box")
    box_parser.add_argument("--config", help="Path to a box defaults YAML or JSON document")
    box_parser.add_argument("--json", action="store_true", help="Output JSON")
    box_parser.add_argument("name", choices=BOX_NAMES, help="Box reference name")

    check_parser = subparsers.add_parser("check", help="Validate a box defaults document")
    check_parser.add_argument("--config", help="Path to a box defaults YAML or JSON document")

    return parser.parse_args(argv)


COMMANDS = {
    "show": show_command,
    "get": get_command,
    "box": box_command,
    "check": check_command,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = BoxDefaultsSettings()
    configure_logging(level=settings.log_level)
    try:
        return COMMANDS[args.command](args, settings)
    except BoxDefaultsError as exc:
        LOGGER.error("box_defaults_invalid", error=str(exc), source=exc.source)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
