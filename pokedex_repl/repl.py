"""The interactive prompt and the command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from .client import APIError, Client
from .commands import CommandError, Config, get_commands

PROMPT = "> "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def run_command(config: Config, line: str) -> None:
    """Run the command named by the first word of ``line``, reporting failures."""
    words = clean_input(line)
    if not words:
        return
    name, *args = words
    command = get_commands().get(name)
    if command is None:
        print("Unknown command:", name)
        return
    try:
        command.callback(config, *args)
    except (CommandError, APIError, OSError, ValueError) as exc:
        print("Error:", exc)


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def start_repl(config: Config, lines: Iterable[str] | None = None) -> None:
    """Read commands from ``lines``, or from standard input, until they run out."""
    if lines is None:
        for line in _stdin_lines():
            run_command(config, line)
        return
    for line in lines:
        print(PROMPT, end="")
        run_command(config, line)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pokedex", description="An interactive Pokedex prompt."
    )
    parser.parse_args(argv)
    config = Config(client=Client(cache_interval=3600.0))
    try:
        start_repl(config)
    except KeyboardInterrupt:
        print()
    return 0