"""Interactive Pokedex shell backed by the PokeAPI, with an expiring response cache."""

__version__ = "0.1.0"

__all__ = ["client", "commands", "models", "pokecache", "repl"]