"""Command line interface for swapui."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from . import skeleton
from .config import Config, load_config
from .errors import ConfigError
from .ids import IdSource
from .target import SkeletonKind, Target


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="swapui", description="swapui developer tools")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    target_parser = subparsers.add_parser("target", help="Print fresh targets and their swap intents as JSON lines")
    target_parser.add_argument("--count", type=int, default=1, help="Number of targets to generate")
    target_parser.add_argument("--config", default=None, help="Path to configuration file")

    skeleton_parser = subparsers.add_parser("skeleton", help="Print placeholder markup for a fresh target")
    skeleton_parser.add_argument(
        "--kind",
        default=SkeletonKind.DEFAULT.value,
        choices=[kind.value for kind in SkeletonKind],
        help="Placeholder layout",
    )
    skeleton_parser.add_argument("--count", type=int, default=None, help="Row count for the list layout")
    skeleton_parser.add_argument("--config", default=None, help="Path to configuration file")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"swapui: {exc}", file=sys.stderr)
        return 2

    if args.command == "target":
        return _cmd_target(config, args.count)
    if args.command == "skeleton":
        return _cmd_skeleton(config, args.kind, args.count)

    parser.print_help()
    return 1


def _cmd_target(config: Config, count: int) -> int:
    source = IdSource.from_config(config.ids)
    for _ in range(max(1, count)):
        target = Target.create(source)
        record = {"id": target.id, "intents": [intent.as_dict() for intent in target.intents()]}
        print(json.dumps(record))
    return 0


def _cmd_skeleton(config: Config, kind: str, count: int | None) -> int:
    target = Target.create(IdSource.from_config(config.ids))
    if kind == SkeletonKind.LIST.value:
        print(skeleton.listing(target, count if count is not None else config.skeleton.list_count))
    else:
        print(target.skeleton(kind))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
