# -*- coding: utf-8 -*-

"""
Remote inputs: the game master JSON and the protocol definitions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_GAME_MASTER_URL = "https://raw.githubusercontent.com/PokeMiners/game_masters/master/latest/latest.json"
DEFAULT_PROTOS_URL = "https://raw.githubusercontent.com/Furtif/POGOProtos/master/base/vbase.proto"

USER_AGENT = "pogo-icons/0.1"


class GameMasterTemplate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    templateId: str
    data: Dict[str, Any] = {}


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_text(location: str, timeout: float = 60.0) -> str:
    if not _is_url(location):
        return Path(location).read_text(encoding="utf-8")
    r = requests.get(location, timeout=timeout, headers={"User-Agent": USER_AGENT})
    r.raise_for_status()
    return r.text


def fetch_game_master(location: str, timeout: float = 60.0) -> List[Any]:
    logger.info(f"Reading game master from {location}")
    payload = json.loads(fetch_text(location, timeout=timeout))
    if not isinstance(payload, list):
        raise RuntimeError(f"Game master at {location} is not a JSON array")
    return payload


def fetch_proto_text(location: str, timeout: float = 60.0) -> str:
    logger.info(f"Reading protocol definitions from {location}")
    return fetch_text(location, timeout=timeout)


def iter_templates(raw: List[Any]) -> Iterator[GameMasterTemplate]:
    for i, item in enumerate(raw):
        try:
            yield GameMasterTemplate.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping malformed game master entry #{i}: {e.errors()[0].get('msg')}")
