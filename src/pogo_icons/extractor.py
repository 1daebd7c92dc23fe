# -*- coding: utf-8 -*-

"""
Game master -> suffix table.

Walks FORMS_V* and TEMPORARY_EVOLUTION_V* templates and registers which
Identity each asset-bundle suffix stands for.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .enums import Gender, ProtoEnums
from .identity import Identity
from .sources import GameMasterTemplate
from .suffix_table import PendingEntry, SuffixTableBuilder

logger = logging.getLogger(__name__)

# Species whose _01 bundle is not a female variant of the default form.
NO_FEMALE_VARIANT_SPECIES = frozenset({592, 593, 668, 678, 710, 711, 720})

# Gaps in the game master: (suffix, species, temporary evolution name).
# Substitute (000) is handled separately since it never shows up at all.
FALLBACK_SEEDS: Tuple[Tuple[str, int, Optional[str]], ...] = (
    ("065_51", 65, "TEMP_EVOLUTION_MEGA"),
    ("115_51", 115, "TEMP_EVOLUTION_MEGA"),
    ("127_51", 127, "TEMP_EVOLUTION_MEGA"),
    ("150_51", 150, "TEMP_EVOLUTION_MEGA_X"),
    ("150_52", 150, "TEMP_EVOLUTION_MEGA_Y"),
    ("302_51", 302, "TEMP_EVOLUTION_MEGA"),
    ("303_51", 303, "TEMP_EVOLUTION_MEGA"),
    ("319_51", 319, "TEMP_EVOLUTION_MEGA"),
    ("354_51", 354, "TEMP_EVOLUTION_MEGA"),
    ("384_51", 384, "TEMP_EVOLUTION_MEGA"),
    ("493_00", 493, None),  # 493_11 is missing
)

_DIGITS_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class RecordKind:
    prefix: str
    id_offset: int
    field: str  # Identity field receiving the resolved code
    resolve: Callable[[str], Optional[int]]


def seed_table(builder: SuffixTableBuilder, enums: ProtoEnums) -> None:
    builder.put("000", PendingEntry(targets=[Identity(0)], female_variant_expected=False))
    for suffix, species_id, evolution in FALLBACK_SEEDS:
        code = enums.require_temp_evolution(evolution) if evolution else 0
        builder.put(
            suffix,
            PendingEntry(targets=[Identity(species_id, evolution=code)], female_variant_expected=False, fallback=True),
        )


def parse_species_id(template_id: str, kind: RecordKind) -> Optional[int]:
    # leading digits only; 0 is not a species
    m = _DIGITS_RE.match(template_id[kind.id_offset:kind.id_offset + 4])
    if not m:
        return None
    return int(m.group(0)) or None


def _second_value(obj: Any) -> Any:
    if not isinstance(obj, dict):
        return None
    values = list(obj.values())
    return values[1] if len(values) > 1 else None


class DatasetExtractor:
    def __init__(self, builder: SuffixTableBuilder, enums: ProtoEnums) -> None:
        self.builder = builder
        self.enums = enums
        self.kinds: List[RecordKind] = [
            RecordKind("FORMS_V", 7, "form", enums.form.lookup),
            RecordKind("TEMPORARY_EVOLUTION_V", 21, "evolution", enums.temp_evolution.lookup),
        ]

    def extract(self, templates: Iterable[GameMasterTemplate]) -> Dict[str, int]:
        stats = {"forms": 0, "evolutions": 0, "skipped": 0}
        for template in templates:
            kind = next((k for k in self.kinds if template.templateId.startswith(k.prefix)), None)
            if kind is None:
                continue
            species_id = parse_species_id(template.templateId, kind)
            if species_id is None:
                logger.warning(f"Unrecognized templateId {template.templateId}")
                stats["skipped"] += 1
                continue
            settings = _second_value(template.data)
            if not isinstance(settings, dict):
                logger.warning(f"No settings found in {template.templateId}")
                stats["skipped"] += 1
                continue
            self.extract_record(species_id, _second_value(settings), kind)
            stats["forms" if kind.field == "form" else "evolutions"] += 1
        return stats

    def extract_record(self, species_id: int, entries: Any, kind: RecordKind) -> None:
        id_string = f"{species_id:03d}"

        if entries is None:
            self._add(f"{id_string}_01", Identity(species_id, Gender.FEMALE))
            base = self._add(f"{id_string}_00", Identity(species_id))
            base.female_variant_expected = False
            return
        if not isinstance(entries, list):
            logger.warning(f"Unexpected {kind.field} list for species {species_id}: {entries!r}")
            return

        default_designator: Any = None
        for form_data in entries:
            if not isinstance(form_data, dict) or not form_data:
                continue
            name = next(iter(form_data.values()))
            code = kind.resolve(name) if isinstance(name, str) else None
            if code is None:
                logger.warning(f"Unrecognized {kind.field} {name}")
                continue

            designator = form_data.get("assetBundleSuffix") or form_data.get("assetBundleValue") or 0
            target = Identity(species_id)
            if kind.field == "form":
                if default_designator is not None and designator == default_designator:
                    continue  # the client falls back to the default form
                if default_designator is None:
                    # the game uses the first form for Pokedex images
                    default_designator = designator
                else:
                    target = dataclasses.replace(target, form=code)
            else:
                target = dataclasses.replace(target, **{kind.field: code})

            if isinstance(designator, int) and not isinstance(designator, bool):
                if designator == 0 and species_id not in NO_FEMALE_VARIANT_SPECIES:
                    self._add(f"{id_string}_01", target.with_gender(Gender.FEMALE))
                suffix = f"{id_string}_{designator:02d}"
            elif isinstance(designator, str):
                if "_00_" in designator:
                    self._add(designator.replace("_00_", "_01_", 1), target.with_gender(Gender.FEMALE))
                suffix = designator
            else:
                logger.warning(f"Unrecognized asset bundle designator {designator!r} for species {species_id}")
                continue

            entry = self._add(suffix, target)
            entry.female_variant_expected = False

    def _add(self, suffix: str, target: Identity) -> PendingEntry:
        entry = self.builder.get_or_create(suffix)
        entry.targets.append(target)
        return entry
