#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Rename Pokémon GO icon assets to canonical names.

Usage: pogo-icons <input dir> [<output dir>]

Without an output directory the index of canonical keys is printed to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .checker import PrefixCollisionError
from .enums import ProtoEnumError, ProtoEnums
from .pipeline import IconPipeline, Settings
from .sources import fetch_game_master, fetch_proto_text, iter_templates

logger = logging.getLogger("pogo_icons")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pogo-icons", description="Rename Pokémon GO icon assets to canonical names.")
    ap.add_argument("in_dir", nargs="?", help="Directory with the legacy pokemon_icon_*.png sprites")
    ap.add_argument("out_dir", nargs="?", help="Output directory (omit to print the index to stdout)")
    ap.add_argument("--game-master", default=settings.GAME_MASTER_URL, help="Game master URL or local path")
    ap.add_argument("--protos", default=settings.PROTOS_URL, help="Protocol definitions (.proto) URL or local path")
    ap.add_argument("--timeout", type=float, default=settings.TIMEOUT, help="HTTP timeout in seconds")
    ap.add_argument("--convert-bin", default=settings.CONVERT_BIN, help="ImageMagick convert executable")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    ap = build_parser(settings)
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if not args.in_dir:
        ap.print_usage(sys.stderr)
        return 1
    in_dir = Path(args.in_dir).resolve()
    out_dir = Path(args.out_dir).resolve() if args.out_dir else None

    try:
        enums = ProtoEnums.from_proto_text(fetch_proto_text(args.protos, timeout=args.timeout))
        templates = iter_templates(fetch_game_master(args.game_master, timeout=args.timeout))
        settings.CONVERT_BIN = args.convert_bin
        pipeline = IconPipeline(settings, enums, templates, in_dir, out_dir)
        produced = pipeline.run()
    except (PrefixCollisionError, ProtoEnumError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Done. {pipeline.summary()}")
    if out_dir is None:
        print(json.dumps(produced))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
