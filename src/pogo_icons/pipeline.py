# -*- coding: utf-8 -*-

"""
End-to-end run: game master -> suffix table -> legacy sprites -> addressable
assets -> index.json.
"""

from __future__ import annotations

import functools
import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set

from . import checker
from .convert import DEFAULT_CONVERT_BIN, convert_image, copy_image
from .enums import ProtoEnums
from .extractor import DatasetExtractor, seed_table
from .resolver import AddressableAssetResolver, LegacySpriteResolver
from .sources import DEFAULT_GAME_MASTER_URL, DEFAULT_PROTOS_URL, GameMasterTemplate
from .suffix_table import SuffixTable, SuffixTableBuilder

logger = logging.getLogger(__name__)

ADDRESSABLE_ASSETS_DIR = "Addressable Assets"
INDEX_FILE = "index.json"

Converter = Callable[[Path, Path], bool]


# ----------------------------
# Settings
# ----------------------------
class Settings:
    """
    Defaults for the remote inputs and the converter.
    Each one can be overridden with a POGO_ICONS_* environment variable.
    """

    def __init__(self) -> None:
        self.GAME_MASTER_URL = os.environ.get("POGO_ICONS_GAME_MASTER_URL", DEFAULT_GAME_MASTER_URL)
        self.PROTOS_URL = os.environ.get("POGO_ICONS_PROTOS_URL", DEFAULT_PROTOS_URL)
        self.TIMEOUT = float(os.environ.get("POGO_ICONS_TIMEOUT", "60"))
        self.CONVERT_BIN = os.environ.get("POGO_ICONS_CONVERT", DEFAULT_CONVERT_BIN)
        self.LOG_LEVEL = os.environ.get("POGO_ICONS_LOG_LEVEL", "INFO").upper()


# ----------------------------
# Helpers
# ----------------------------
def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def list_png_files(dir_path: Path) -> List[str]:
    return sorted(p.name for p in dir_path.iterdir() if p.is_file() and p.name.endswith(".png"))


class ProducedIndex:
    """Canonical keys in discovery order, without duplicates."""

    def __init__(self) -> None:
        self._keys: List[str] = []
        self._seen: Set[str] = set()

    def add(self, key: str) -> bool:
        if key in self._seen:
            return False
        self._seen.add(key)
        self._keys.append(key)
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def to_list(self) -> List[str]:
        return list(self._keys)


def build_table(templates: Iterable[GameMasterTemplate], enums: ProtoEnums) -> SuffixTable:
    builder = SuffixTableBuilder()
    seed_table(builder, enums)
    stats = DatasetExtractor(builder, enums).extract(templates)
    logger.info(
        f"Suffix table built. suffixes={len(builder)} forms={stats['forms']} "
        f"evolutions={stats['evolutions']} skipped={stats['skipped']}"
    )
    return builder.finish()


# ----------------------------
# Pipeline
# ----------------------------
class IconPipeline:
    def __init__(
        self,
        settings: Optional[Settings],
        enums: ProtoEnums,
        templates: Iterable[GameMasterTemplate],
        in_dir: Path,
        out_dir: Optional[Path] = None,
        converter: Optional[Converter] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.enums = enums
        self.templates = templates
        self.in_dir = in_dir
        self.out_dir = out_dir
        self.converter: Converter = converter or functools.partial(
            convert_image, convert_bin=self.settings.CONVERT_BIN
        )
        self.index = ProducedIndex()
        self.overrides: List[str] = []
        self.table: Optional[SuffixTable] = None

    def run(self) -> List[str]:
        self.table = build_table(self.templates, self.enums)
        checker.check_prefix_collisions(self.table)

        if self.out_dir is not None:
            self.out_dir.mkdir(parents=True, exist_ok=True)

        legacy = LegacySpriteResolver(self.table, self.enums)
        self.scan_legacy(legacy)
        self.scan_addressable(AddressableAssetResolver(self.enums))

        if not legacy.saw_legacy_marker:
            logger.warning("Workaround for Xerneas active form could be removed now")
        if self.out_dir is not None:
            write_json(self.out_dir / INDEX_FILE, self.index.to_list())

        checker.report(self.table, self.index)
        if self.overrides:
            logger.info(f"{len(self.overrides)} addressable assets overriding base file")
        return self.index.to_list()

    def scan_legacy(self, resolver: LegacySpriteResolver) -> None:
        for filename in list_png_files(self.in_dir):
            resolution = resolver.resolve(filename)
            if resolution is None:
                continue
            source = self.in_dir / filename
            output: Optional[Path] = None
            for key in resolution.keys():
                if not self.index.add(key):
                    logger.warning(f"Duplicate output {key} from {filename}")
                if self.out_dir is None:
                    continue
                target = self.out_dir / f"{key}.png"
                if output is not None:
                    copy_image(output, target)
                elif self.converter(source, target):
                    output = target

    def scan_addressable(self, resolver: AddressableAssetResolver) -> None:
        assets_dir = self.in_dir / ADDRESSABLE_ASSETS_DIR
        for filename in list_png_files(assets_dir):
            resolution = resolver.resolve(filename)
            if resolution is None:
                continue
            key = resolution.keys()[0]
            if not self.index.add(key):
                self.overrides.append(key)
            if self.out_dir is not None:
                self.converter(assets_dir / filename, self.out_dir / f"{key}.png")

    def summary(self) -> Dict[str, int]:
        return {"produced": len(self.index), "overrides": len(self.overrides)}
