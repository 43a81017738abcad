"""The commands understood by the Pokédex prompt."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Callable

from .client import Client
from .models import LocationAreasPage, Pokemon

CATCH_THRESHOLD = 50


class CommandError(Exception):
    """Raised when a command cannot do what was asked."""


@dataclass
class Config:
    """State shared by the commands over one session."""

    client: Client
    next_location_area_url: str | None = None
    prev_location_area_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its description and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def get_commands() -> dict[str, Command]:
    """Return the available commands keyed by the word that invokes them."""
    return {
        "help": Command("help", "Show this help message", command_help),
        "exit": Command("exit", "Exit the REPL", command_exit),
        "map": Command("map", "Show location areas", command_map),
        "mapb": Command("mapb", "Show previous location areas", command_mapb),
        "explore": Command(
            "explore {location Area}", "Explore a location area", command_explore
        ),
        "catch": Command("catch", "Catch a Pokemon", command_catch),
        "inspect": Command("inspect", "View details of a Pokemon", command_inspect),
        "pokedex": Command("pokedex", "View your caught Pokemon", command_pokedex),
    }


def command_help(config: Config, *args: str) -> None:
    print("Welcome to Pokedex CLI!")
    print("Available commands:")
    for command in get_commands().values():
        print(f"  {command.name} - {command.description}")


def command_exit(config: Config, *args: str) -> None:
    print("Exiting...")
    sys.exit(0)


def _show_page(config: Config, page: LocationAreasPage) -> None:
    print("Location Areas:")
    for area in page.results:
        print(area.name)
    config.next_location_area_url = page.next
    config.prev_location_area_url = page.previous


def command_map(config: Config, *args: str) -> None:
    _show_page(config, config.client.get_location_areas(config.next_location_area_url))


def command_mapb(config: Config, *args: str) -> None:
    if config.prev_location_area_url is None:
        print("No previous location area")
        return
    _show_page(config, config.client.get_location_areas(config.prev_location_area_url))


def command_explore(config: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("no location area specified")
    (name,) = args
    print(f"Exploring {name}")
    area = config.client.get_location_area(name)
    print(f"Pokemon in {area.name}")
    for encounter in area.pokemon_encounters:
        print(f"- {encounter.pokemon.name}")


def command_catch(config: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("no location area specified")
    (name,) = args
    pokemon = config.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"cannot catch {name}: no base experience")
    if config.rng.randrange(pokemon.base_experience) > CATCH_THRESHOLD:
        raise CommandError(f"Failed to Catch! {name}")
    config.caught_pokemon[name] = pokemon
    print("Congratulations!")
    print("You have a new Pokemon!")
    print("Enjoy your new companion!")


def command_inspect(config: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("no pokemonspecified")
    (name,) = args
    pokemon = config.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("pokemon not caught yet!")
    if not pokemon.types or len(pokemon.stats) < 6:
        raise CommandError(f"incomplete data for {name}")

    stats = [s.base_stat for s in pokemon.stats]
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print(f"Type: {pokemon.types[0].type.name}")
    print(f"HP: {stats[0]}/{stats[0]}")
    print(f"Attack: {stats[1]}")
    print(f"Defense: {stats[2]}")
    print(f"Speed: {stats[5]}")
    print(f"Special Attack: {stats[3]}")
    print(f"Special Defense: {stats[4]}")
    print(f"Experience: {pokemon.base_experience}")


def command_pokedex(config: Config, *args: str) -> None:
    for pokemon in config.caught_pokemon.values():
        print(f" - {pokemon.name}")