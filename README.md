# pokedex-repl

An interactive Pokedex for the terminal. Page through location areas, explore
one to see which Pokemon can be met there, try to catch them, and look up the
ones you have caught.

Data is fetched from the public PokeAPI over HTTP and the raw responses are
kept in an in-memory cache keyed by URL, so a repeated lookup during a session
is answered without another request ("Cache hit" is printed when that
happens). A background thread sweeps the cache once an hour and removes
entries older than an hour.

## Installing

```
pip install .
```

No third-party libraries are needed at run time.

## Running

```
pokedex-repl
```

The command takes no options besides `--help`. You get a `> ` prompt. Input is
lower-cased and split on whitespace; the first word is the command and the
rest are its arguments. The shell ends on `exit`, at end of input (Ctrl-D) or
on Ctrl-C.

| Command                   | What it does                                        |
|---------------------------|-----------------------------------------------------|
| `help`                    | Show the list of commands                           |
| `exit`                    | Print `Exiting...` and leave the shell              |
| `map`                     | Show the next page of location areas                |
| `mapb`                    | Show the previous page of location areas, or `No previous location area` |
| `explore <location area>` | List the Pokemon found in a location area           |
| `catch <pokemon>`         | Throw a ball: a random number below the Pokemon's base experience is drawn, and the catch fails if it is above 50 |
| `inspect <pokemon>`       | Show name, height, weight, first type, stats and base experience of a caught Pokemon |
| `pokedex`                 | List every Pokemon you have caught                  |

An unknown command prints `Unknown command: <name>`. A command that fails —
a missing argument, a Pokemon not caught yet, a failed catch, an HTTP status
other than 200, a network error or a malformed response — prints
`Error: <reason>` and the prompt comes back.

A short session:

```
> map
Location Areas:
canalave-city-area
eterna-city-area
...
> explore canalave-city-area
Exploring canalave-city-area
Pokemon in canalave-city-area
- tentacool
- tentacruel
...
> catch tentacool
Congratulations!
You have a new Pokemon!
Enjoy your new companion!
> inspect tentacool
Name: tentacool
Height: ...
> pokedex
 - tentacool
```

## Using it from Python

The pieces the shell is built from can be used on their own:

- `pokedex_repl.client.Client(cache_interval=3600.0, timeout=60.0, base_url=BASE_URL, cache=None)`
  has `get_location_areas(page_url=None)`, `get_location_area(name)` and
  `get_pokemon(name)`, returning the dataclasses in `pokedex_repl.models`
  (`LocationAreasPage`, `LocationArea`, `Pokemon`, ...). A status other than
  200 raises `pokedex_repl.client.APIError`, whose `status_code` holds the
  status.
- `pokedex_repl.models` parses the API's JSON documents with each class's
  `from_dict`; a field of the wrong kind raises `ValueError`, a missing one
  takes its default.
- `pokedex_repl.pokecache.Cache(interval, reap_in_background=True)` is the
  thread-safe, time-limited cache the client uses: `add`, `get` (returns
  `None` when absent), `reap`, `close` and `len()`; it works as a context
  manager, which stops the background thread on exit.
- `pokedex_repl.commands` holds the command functions, `Config` (the session
  state, including the random generator used for catching), `Command`,
  `CommandError` and `get_commands()`.
- `pokedex_repl.repl` offers `clean_input`, `run_command`, `start_repl`
  (which reads standard input, or any iterable of lines you pass) and `main`.

## What it does not do

Caught Pokemon live only in memory: nothing is saved, so the Pokedex is empty
again at the start of every session. The cache is not kept on disk either.

## Running the tests

```
pip install ".[test]"
pytest
```