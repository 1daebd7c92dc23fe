# -*- coding: utf-8 -*-

"""
Asset-suffix lookup table.

Built once from the seed corrections and the game master through
SuffixTableBuilder, then frozen into a SuffixTable that the filename
resolvers query.
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .identity import Identity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuffixEntry:
    targets: Tuple[Identity, ...]
    # No direct asset expected: the content comes from a paired gendered entry.
    female_variant_expected: bool = False
    # Seeded correction, superseded when the game master defines the suffix.
    fallback: bool = False


@dataclass
class PendingEntry:
    """Mutable counterpart of SuffixEntry, only alive during the build phase."""

    targets: List[Identity] = field(default_factory=list)
    female_variant_expected: bool = True
    fallback: bool = False

    def freeze(self) -> SuffixEntry:
        return SuffixEntry(tuple(self.targets), self.female_variant_expected, self.fallback)


class SuffixTableBuilder:
    def __init__(self) -> None:
        self._entries: Dict[str, PendingEntry] = {}

    def put(self, suffix: str, entry: PendingEntry) -> None:
        """Register a seed entry. Only meant for the fixed corrections."""
        self._entries[suffix] = entry

    def get_or_create(self, suffix: str) -> PendingEntry:
        """
        Return the entry for suffix, creating it if needed.

        A fallback entry is discarded in favour of a fresh one (the game master
        wins). An existing regular entry is returned as-is so the caller appends
        to it.
        """
        entry = self._entries.get(suffix)
        if entry is not None and entry.fallback:
            logger.warning(f"Found {suffix} in the game master. Fallback rule will be deactivated.")
            entry = None
        if entry is None:
            entry = PendingEntry()
            self._entries[suffix] = entry
            return entry
        logger.warning(f"Multiple targets found for asset {suffix}")
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def finish(self) -> "SuffixTable":
        return SuffixTable({k: v.freeze() for k, v in self._entries.items()})


class SuffixTable:
    """
    Read-only suffix -> SuffixEntry mapping with sorted-key prefix search.

    Lookup hits are tracked here rather than on the entries, which stay frozen.
    """

    def __init__(self, entries: Mapping[str, SuffixEntry]) -> None:
        self._entries: Mapping[str, SuffixEntry] = MappingProxyType(dict(entries))
        self._keys: List[str] = sorted(self._entries)
        self._matched: Set[str] = set()

    def __getitem__(self, suffix: str) -> SuffixEntry:
        return self._entries[suffix]

    def __contains__(self, suffix: object) -> bool:
        return suffix in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def items(self) -> Iterable[Tuple[str, SuffixEntry]]:
        return ((k, self._entries[k]) for k in self._keys)

    def prefix_collisions(self) -> List[Tuple[str, str]]:
        """
        (longer, shorter) pairs where shorter is a strict prefix of longer.

        In sorted order every key that extends k sits right after k, so scanning
        forward from each key until the prefix stops matching is exhaustive.
        """
        out: List[Tuple[str, str]] = []
        for i, short in enumerate(self._keys):
            for longer in self._keys[i + 1:]:
                if not longer.startswith(short):
                    break
                out.append((longer, short))
        return out

    def find_prefix(self, name: str) -> Optional[str]:
        """
        The table key that is a prefix of name, if any.

        Assumes no key is a prefix of another; the candidate is then the
        greatest key <= name.
        """
        idx = bisect.bisect_right(self._keys, name)
        if idx == 0:
            return None
        candidate = self._keys[idx - 1]
        return candidate if name.startswith(candidate) else None

    def mark_matched(self, suffix: str) -> None:
        if suffix not in self._entries:
            raise KeyError(suffix)
        self._matched.add(suffix)

    def was_matched(self, suffix: str) -> bool:
        return suffix in self._matched
