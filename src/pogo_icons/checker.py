# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Collection, Dict, List

from .suffix_table import SuffixTable

logger = logging.getLogger(__name__)

# Suffixes the game master defines but the asset dump has never shipped.
KNOWN_GAPS: Dict[str, str] = {
    "493_11": "Arceus normal form",
}


class PrefixCollisionError(RuntimeError):
    pass


def check_prefix_collisions(table: SuffixTable) -> None:
    collisions = table.prefix_collisions()
    for longer, shorter in collisions:
        logger.error(f"Illegal combinations found {longer} {shorter}")
    if collisions:
        raise PrefixCollisionError(f"{len(collisions)} suffixes are prefixes of other suffixes")


def find_unmatched(table: SuffixTable, produced: Collection[str]) -> List[str]:
    """
    Suffixes that matched no legacy file and whose targets were not produced
    some other way. Female-variant placeholders and known gaps are left out.
    """
    out: List[str] = []
    for suffix, entry in table.items():
        if table.was_matched(suffix) or entry.female_variant_expected or suffix in KNOWN_GAPS:
            continue
        if any(t.filename() not in produced for t in entry.targets):
            out.append(suffix)
    return out


def report(table: SuffixTable, produced: Collection[str]) -> List[str]:
    unmatched = find_unmatched(table, produced)
    for suffix in unmatched:
        targets = ", ".join(str(t) for t in table[suffix].targets)
        logger.warning(f"Found form/temporary evolution with no matching assets {suffix} -> [{targets}]")

    for suffix, label in KNOWN_GAPS.items():
        still_missing = suffix in table and not table.was_matched(suffix) and not table[suffix].female_variant_expected
        if not still_missing:
            logger.warning(f"Asset for {label} ({suffix}) has been added")
    return unmatched
