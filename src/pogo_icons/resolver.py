# -*- coding: utf-8 -*-

"""
Filename -> Identity resolution for the two asset naming conventions.

Legacy sprites:     pokemon_icon_<suffix>[_<costume>][_shiny][_old|_old1|_old2].png
Addressable assets: pm<species>[.f<form>][.c<costume>][.g<gender>][.s].icon.png
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .enums import ProtoEnums
from .identity import Identity
from .suffix_table import SuffixTable

logger = logging.getLogger(__name__)

LEGACY_PREFIX_LENGTH = len("pokemon_icon_")
LEGACY_SUFFIX_RE = re.compile(r"^(?:_(\d+))?(_shiny)?(_old[12]?)?\.png$")
ADDRESSABLE_ASSET_RE = re.compile(r"^pm(\d+)(?:\.f([^.]*))?(?:\.c([^.]+))?(?:\.g(\d+))?(\.s)?\.icon\.png$")

# TODO: drop once the asset dump stops shipping Xerneas' active form as *_old sprites.
XERNEAS_ID = 716
XERNEAS_ACTIVE_FORM = "XERNEAS_ACTIVE"


@dataclass(frozen=True)
class Resolution:
    targets: Tuple[Identity, ...]
    costume: int = 0
    shiny: bool = False

    def keys(self) -> List[str]:
        return [t.filename(self.costume, self.shiny) for t in self.targets]


class LegacySpriteResolver:
    def __init__(self, table: SuffixTable, enums: ProtoEnums) -> None:
        self.table = table
        self.xerneas_active = enums.form.lookup(XERNEAS_ACTIVE_FORM)
        self.saw_legacy_marker = False

    def resolve(self, filename: str) -> Optional[Resolution]:
        name = filename[LEGACY_PREFIX_LENGTH:]
        suffix = self.table.find_prefix(name)
        m = LEGACY_SUFFIX_RE.match(name[len(suffix):]) if suffix is not None else None
        if m is None:
            logger.warning(f"Unrecognized/unused asset {filename}")
            return None

        self.table.mark_matched(suffix)
        targets = self.table[suffix].targets
        costume = int(m.group(1)) if m.group(1) else 0
        shiny = m.group(2) is not None
        marker = m.group(3)

        if marker is not None:
            if not targets or targets[0].species_id != XERNEAS_ID:
                logger.warning(f"Unrecognized old asset {filename}")
                return None
            self.saw_legacy_marker = True
            if marker.endswith("2"):
                return None  # colorless active-mode shiny
            if self.xerneas_active is None:
                logger.warning(f"No {XERNEAS_ACTIVE_FORM} form known, skipping {filename}")
                return None
            targets = (Identity(XERNEAS_ID, form=self.xerneas_active),)

        return Resolution(targets, costume, shiny)


class AddressableAssetResolver:
    def __init__(self, enums: ProtoEnums) -> None:
        self.enums = enums

    def resolve(self, filename: str) -> Optional[Resolution]:
        m = ADDRESSABLE_ASSET_RE.match(filename)
        if m is None:
            logger.warning(f"Unrecognized addressable asset {filename}")
            return None

        identity = Identity(int(m.group(1)))
        if m.group(2) is not None:
            identity = self._apply_form(identity, m.group(2))
            if identity is None:
                logger.warning(f"Unrecognized form/evolution {filename}")
                return None

        costume = 0
        if m.group(3) is not None:
            code = self.enums.costume.lookup(m.group(3))
            if code is None:
                logger.warning(f"Unrecognized costume {filename}")
                return None
            costume = code

        if m.group(4) is not None:
            identity = identity.with_gender(int(m.group(4)))

        return Resolution((identity,), costume, m.group(5) is not None)

    def _apply_form(self, identity: Identity, token: str) -> Optional[Identity]:
        species_name = self.enums.pokemon.name_of(identity.species_id)

        if token == "":
            normal = self.enums.form.lookup(f"{species_name}_NORMAL") if species_name else None
            return identity if normal is None else Identity(identity.species_id, form=normal)

        code = self.enums.temp_evolution.lookup(f"TEMP_EVOLUTION_{token}")
        if code is not None:
            return Identity(identity.species_id, evolution=code)

        if species_name:
            code = self.enums.form.lookup(f"{species_name}_{token}")
            if code is not None:
                return Identity(identity.species_id, form=code)

        code = self.enums.form.lookup(token)
        if code is not None:
            return Identity(identity.species_id, form=code)
        return None
