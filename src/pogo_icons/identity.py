# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass

from .enums import Gender

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """
    One creature variant, minus costume and shininess (those never appear in
    the game master and are supplied when a file is resolved).
    """

    species_id: int
    gender: int = Gender.UNSET
    form: int = 0
    evolution: int = 0

    def filename(self, costume: int = 0, shiny: bool = False) -> str:
        """
        Canonical key: <species>[-e<evolution>][-f<form>][-c<costume>][-g<gender>][-shiny]
        """
        result = str(self.species_id)
        if self.evolution:
            result += f"-e{self.evolution}"
        if self.form:
            result += f"-f{self.form}"
            if self.evolution:
                logger.warning(
                    f"Found entry with both evolution and form set ({result}). "
                    "This would not be compatible with addressable assets."
                )
        if costume:
            result += f"-c{costume}"
        if self.gender:
            result += f"-g{int(self.gender)}"
        if shiny:
            result += "-shiny"
        return result

    def with_gender(self, gender: int = Gender.FEMALE) -> "Identity":
        return Identity(self.species_id, gender, self.form, self.evolution)

    def __str__(self) -> str:
        return self.filename()
