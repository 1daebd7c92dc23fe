from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from pogo_icons.enums import ProtoEnums

PROTO_TEXT = """
syntax = "proto3";
package POGOProtos.Rpc;

/* Pokedex ids */
enum HoloPokemonId {
	MISSINGNO = 0;
	BULBASAUR = 1;
	VENUSAUR = 3;
	RATTATA = 19;
	PIKACHU = 25;
	ALAKAZAM = 65;
	MEWTWO = 150;
	CASTFORM = 351;
	ARCEUS = 493;
	XERNEAS = 716;
}

enum HoloTemporaryEvolutionId {
	TEMP_EVOLUTION_UNSET = 0;
	TEMP_EVOLUTION_MEGA = 1;
	TEMP_EVOLUTION_MEGA_X = 2;
	TEMP_EVOLUTION_MEGA_Y = 3;
	TEMP_EVOLUTION_PRIMAL = 4;
}

message PokemonDisplayProto {
	enum Alignment {
		ALIGNMENT_UNSET = 0;
		SHADOW = 1;
	}
	enum Costume {
		UNSET = 0;
		HOLIDAY_2016 = 1; // santa hat
		ANNIVERSARY = 2;
	}
	enum Form {
		option allow_alias = true;
		FORM_UNSET = 0;
		RATTATA_NORMAL = 45;
		RATTATA_ALOLA = 46;
		CASTFORM_NORMAL = 29;
		CASTFORM_SUNNY = 30;
		CASTFORM_RAINY = 31;
		CASTFORM_SNOWY = 32;
		ARCEUS_NORMAL = 1787;
		PIKACHU_NORMAL = 598;
		PIKACHU_FLYING = 2594 [deprecated = true];
		XERNEAS_NEUTRAL = 2981;
		XERNEAS_ACTIVE = 2982;
	}
	enum Gender {
		GENDER_UNSET = 0;
		MALE = 1;
		FEMALE = 2;
		GENDERLESS = 3;
	}
	Costume costume = 1;
	Gender gender = 2;
	bool shiny = 3;
	Form form = 4;
}

message WeatherAffinityProto {
	enum Form {
		NOT_A_POKEMON_FORM = 7;
	}
	oneof Payload {
		int32 a = 1;
		string b = 2;
	}
}
"""


@pytest.fixture
def enums() -> ProtoEnums:
    return ProtoEnums.from_proto_text(PROTO_TEXT)


def forms_template(species_id: int, name: str, forms: Optional[List[Dict[str, Any]]]) -> Dict[str, Any]:
    template_id = f"FORMS_V{species_id:04d}_POKEMON_{name}"
    settings: Dict[str, Any] = {"pokemon": name}
    if forms is not None:
        settings["forms"] = forms
    return {"templateId": template_id, "data": {"templateId": template_id, "formSettings": settings}}


def evolution_template(species_id: int, name: str, evolutions: List[Dict[str, Any]]) -> Dict[str, Any]:
    template_id = f"TEMPORARY_EVOLUTION_V{species_id:04d}_POKEMON_{name}"
    return {
        "templateId": template_id,
        "data": {
            "templateId": template_id,
            "temporaryEvolutionSettings": {"pokemonId": name, "temporaryEvolutions": evolutions},
        },
    }
