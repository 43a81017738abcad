"""Typed views of the location-area and Pokémon documents served by the API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a string or null, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected a list, got {value!r}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        d = _mapping(data, "named resource")
        return cls(name=_str(d, "name"), url=_str(d, "url"))


@dataclass(frozen=True)
class LocationAreasPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationAreasPage:
        d = _mapping(data, "location areas page")
        return cls(
            count=_int(d, "count"),
            next=_optional_str(d, "next"),
            previous=_optional_str(d, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(d, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        d = _mapping(data, "pokemon encounter")
        return cls(pokemon=NamedResource.from_dict(d.get("pokemon")))


@dataclass(frozen=True)
class LocationArea:
    """A single location area and the Pokémon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        d = _mapping(data, "location area")
        return cls(
            id=_int(d, "id"),
            name=_str(d, "name"),
            game_index=_int(d, "game_index"),
            location=NamedResource.from_dict(d.get("location")),
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in _list(d, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokémon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        d = _mapping(data, "pokemon stat")
        return cls(
            base_stat=_int(d, "base_stat"),
            effort=_int(d, "effort"),
            stat=NamedResource.from_dict(d.get("stat")),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of a Pokémon's types, in its slot."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        d = _mapping(data, "pokemon type")
        return cls(slot=_int(d, "slot"), type=NamedResource.from_dict(d.get("type")))


@dataclass(frozen=True)
class PokemonAbility:
    """One of a Pokémon's abilities."""

    ability: NamedResource = field(default_factory=NamedResource)
    is_hidden: bool = False
    slot: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonAbility:
        d = _mapping(data, "pokemon ability")
        return cls(
            ability=NamedResource.from_dict(d.get("ability")),
            is_hidden=_bool(d, "is_hidden"),
            slot=_int(d, "slot"),
        )


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokémon document that the program uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[PokemonAbility] = field(default_factory=list)
    forms: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        d = _mapping(data, "pokemon")
        return cls(
            id=_int(d, "id"),
            name=_str(d, "name"),
            base_experience=_int(d, "base_experience"),
            height=_int(d, "height"),
            weight=_int(d, "weight"),
            order=_int(d, "order"),
            is_default=_bool(d, "is_default"),
            species=NamedResource.from_dict(d.get("species")),
            abilities=[PokemonAbility.from_dict(a) for a in _list(d, "abilities")],
            forms=[NamedResource.from_dict(f) for f in _list(d, "forms")],
            stats=[PokemonStat.from_dict(s) for s in _list(d, "stats")],
            types=[PokemonType.from_dict(t) for t in _list(d, "types")],
        )