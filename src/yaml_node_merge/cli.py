"""Command-line entry point: merge YAML files onto a base file.

Usage::

    yaml-node-merge base.yaml overlay.yaml [overlay.yaml ...] [-o merged.yaml]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from yaml_node_merge.api import merge_yaml
from yaml_node_merge.config import EmitConfig, PruneConfig
from yaml_node_merge.exceptions import MergeError

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="yaml-node-merge",
        description="Merge YAML overlay files onto a base file, later files winning.",
    )
    ap.add_argument("base", type=Path, help="base YAML file")
    ap.add_argument("overlays", type=Path, nargs="+", help="overlay YAML files")
    ap.add_argument("-o", "--out", type=Path, help="write here instead of stdout")
    ap.add_argument(
        "--prune-explicit",
        action="store_true",
        help="drop keys whose merged value is an explicit null (key: null)",
    )
    ap.add_argument(
        "--prune-implicit",
        action="store_true",
        help="drop keys whose merged value is an implicit null (key:)",
    )
    ap.add_argument("--indent", type=int, default=4, help="indentation width")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    prune_config = PruneConfig(
        explicit=args.prune_explicit, implicit=args.prune_implicit
    )
    try:
        emit_config = EmitConfig(indent=args.indent)
        texts = [p.read_text(encoding="utf-8") for p in [args.base, *args.overlays]]
        merged = merge_yaml(
            texts[0],
            *texts[1:],
            prune_config=prune_config,
            emit_config=emit_config,
        )
    except (MergeError, yaml.YAMLError, OSError, ValueError) as exc:
        print(f"yaml-node-merge: {exc}", file=sys.stderr)
        return 1

    if args.out is None:
        sys.stdout.write(merged)
    else:
        args.out.write_text(merged, encoding="utf-8")
        logger.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
