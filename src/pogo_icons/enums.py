# -*- coding: utf-8 -*-

"""
Name -> code tables for the game's protocol enumerations.

The engine encodes forms, costumes and temporary evolutions as protobuf enum
values. We parse them straight out of the .proto definitions instead of
bundling thousands of constants.
"""

from __future__ import annotations

import re
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


class ProtoEnumError(RuntimeError):
    pass


class Gender(IntEnum):
    UNSET = 0
    MALE = 1
    FEMALE = 2
    GENDERLESS = 3


class Enumeration:
    """
    Immutable name -> code table.

    lookup() returns None when the name is unknown; 0 is a valid code.
    """

    def __init__(self, name: str, values: Mapping[str, int]) -> None:
        self.name = name
        self._by_name: Mapping[str, int] = MappingProxyType(dict(values))
        by_code: Dict[int, str] = {}
        for k, v in values.items():
            # allow_alias enums: keep the first declared name
            by_code.setdefault(v, k)
        self._by_code: Mapping[int, str] = MappingProxyType(by_code)

    def lookup(self, name: str) -> Optional[int]:
        return self._by_name.get(name)

    def name_of(self, code: int) -> Optional[str]:
        return self._by_code.get(code)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"Enumeration({self.name!r}, {len(self)} values)"


# ----------------------------
# .proto parsing
# ----------------------------
_BLOCK_OPEN_RE = re.compile(r"^\s*(message|enum|oneof|service|extend)\s+([\w.]+)\s*$")
_ENUM_VALUE_RE = re.compile(r"^\s*([A-Za-z_]\w*)\s*=\s*(-?(?:0x[0-9A-Fa-f]+|\d+))\s*(?:\[.*\])?\s*$", re.DOTALL)
_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
# string literals are kept whole so braces inside them don't count
_TOKEN_RE = re.compile(r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'|[{};]|[^{};\"']+")


def parse_proto_enums(text: str) -> Dict[str, Enumeration]:
    """
    Extract every enum declared in a .proto source.

    Keys are qualified by the enclosing messages, e.g. "PokemonDisplayProto.Form";
    top-level enums keep their bare name ("HoloPokemonId").

    The source is split into `;`-terminated statements and `{ }` blocks; blocks
    other than message/enum/oneof/service/extend (rpc bodies, aggregate option
    values) are tracked as anonymous frames.
    """
    text = _BLOCK_COMMENT_RE.sub("", text)
    text = _LINE_COMMENT_RE.sub("", text)

    out: Dict[str, Enumeration] = {}
    # (kind, name, values, enclosing statement) for each open block;
    # kind is "" for anonymous blocks
    stack: List[tuple] = []
    statement = ""

    for token in _TOKEN_RE.findall(text):
        if token == "{":
            m = _BLOCK_OPEN_RE.match(statement)
            if m:
                stack.append((m.group(1), m.group(2), {}, ""))
            else:
                stack.append(("", None, {}, statement))
            statement = ""
        elif token == ";":
            if stack and stack[-1][0] == "enum":
                vm = _ENUM_VALUE_RE.match(statement)
                if vm:
                    stack[-1][2][vm.group(1)] = int(vm.group(2), 0)
            statement = ""
        elif token == "}":
            if not stack:
                raise ProtoEnumError("Unbalanced braces in proto definitions")
            kind, name, values, enclosing = stack.pop()
            if kind == "":
                # an aggregate value belongs to the statement around it; an rpc body ends it
                statement = "" if enclosing.lstrip().startswith("rpc") else enclosing + "{}"
                continue
            statement = ""
            if kind != "enum":
                continue
            qualified = ".".join([f[1] for f in stack if f[0] == "message"] + [name])
            out.setdefault(qualified, Enumeration(qualified, values))
        else:
            statement += token

    if stack:
        raise ProtoEnumError("Unbalanced braces in proto definitions")
    return out


class ProtoEnums:
    """The four enumerations the resolver relies on."""

    FORM = "PokemonDisplayProto.Form"
    COSTUME = "PokemonDisplayProto.Costume"
    TEMP_EVOLUTION = "HoloTemporaryEvolutionId"
    POKEMON = "HoloPokemonId"

    def __init__(
        self,
        form: Enumeration,
        costume: Enumeration,
        temp_evolution: Enumeration,
        pokemon: Enumeration,
    ) -> None:
        self.form = form
        self.costume = costume
        self.temp_evolution = temp_evolution
        self.pokemon = pokemon

    @classmethod
    def from_proto_text(cls, text: str) -> "ProtoEnums":
        parsed = parse_proto_enums(text)
        missing = [n for n in (cls.FORM, cls.COSTUME, cls.TEMP_EVOLUTION, cls.POKEMON) if n not in parsed]
        if missing:
            raise ProtoEnumError(f"Enumerations missing from proto definitions: {', '.join(missing)}")
        return cls(
            form=parsed[cls.FORM],
            costume=parsed[cls.COSTUME],
            temp_evolution=parsed[cls.TEMP_EVOLUTION],
            pokemon=parsed[cls.POKEMON],
        )

    def require_temp_evolution(self, name: str) -> int:
        code = self.temp_evolution.lookup(name)
        if code is None:
            raise ProtoEnumError(f"Unknown temporary evolution: {name}")
        return code
