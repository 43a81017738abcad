import json
import urllib.error
from unittest import mock

import pytest

from pokedex_repl.client import BASE_URL, APIError, Client
from pokedex_repl.pokecache import Cache


class _FakeResponse:
    def __init__(self, body: bytes, status: int = 200) -> None:
        self.body = body
        self.status = status

    def read(self) -> bytes:
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


def _client(**kwargs) -> Client:
    return Client(cache=Cache(60, reap_in_background=False), **kwargs)


def _pokemon_body(name: str = "pikachu", base_experience: int = 112) -> bytes:
    return json.dumps({"name": name, "base_experience": base_experience}).encode()


def test_get_pokemon_from_cache_prints_cache_hit(capsys):
    client = _client()
    client.cache.add(BASE_URL + "pokemon/pikachu", _pokemon_body())
    with mock.patch("urllib.request.urlopen") as urlopen:
        pokemon = client.get_pokemon("pikachu")
    assert pokemon.name == "pikachu"
    assert pokemon.base_experience == 112
    assert urlopen.call_count == 0
    assert capsys.readouterr().out == "Cache hit\n"


def test_get_pokemon_downloads_and_caches():
    client = _client()
    body = _pokemon_body()
    url = BASE_URL + "pokemon/pikachu"
    with mock.patch("urllib.request.urlopen", return_value=_FakeResponse(body)) as urlopen:
        pokemon = client.get_pokemon("pikachu")
    assert pokemon.name == "pikachu"
    assert urlopen.call_args.args[0] == url
    assert client.cache.get(url) == body


def test_second_request_served_from_cache(capsys):
    client = _client()
    with mock.patch(
        "urllib.request.urlopen", return_value=_FakeResponse(_pokemon_body())
    ) as urlopen:
        first = client.get_pokemon("pikachu")
        second = client.get_pokemon("pikachu")
    assert first == second
    assert urlopen.call_count == 1
    assert capsys.readouterr().out == "Cache hit\n"


def test_http_error_becomes_api_error_and_is_not_cached():
    client = _client()
    url = BASE_URL + "pokemon/missingno"
    error = urllib.error.HTTPError(url, 404, "Not Found", hdrs=None, fp=None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(APIError) as info:
            client.get_pokemon("missingno")
    assert info.value.status_code == 404
    assert str(info.value) == "unexpected status code: 404"
    assert len(client.cache) == 0


def test_non_ok_status_is_an_error():
    client = _client()
    with mock.patch(
        "urllib.request.urlopen", return_value=_FakeResponse(b"", status=204)
    ):
        with pytest.raises(APIError) as info:
            client.get_location_areas()
    assert info.value.status_code == 204


def test_invalid_json_raises_and_is_not_cached():
    client = _client()
    with mock.patch("urllib.request.urlopen", return_value=_FakeResponse(b"not json")):
        with pytest.raises(ValueError):
            client.get_location_area("canalave-city-area")
    assert len(client.cache) == 0


def test_location_areas_default_and_page_urls():
    client = _client()
    page = {"count": 2, "next": None, "previous": None,
            "results": [{"name": "a", "url": "u"}]}
    body = json.dumps(page).encode()
    with mock.patch("urllib.request.urlopen", return_value=_FakeResponse(body)) as urlopen:
        first = client.get_location_areas()
        assert urlopen.call_args.args[0] == BASE_URL + "location-area"
        client.get_location_areas("http://localhost/page2")
        assert urlopen.call_args.args[0] == "http://localhost/page2"
    assert [r.name for r in first.results] == ["a"]
    assert first.count == 2


def test_location_area_url_and_custom_base():
    client = _client(base_url="http://localhost/api/")
    area = {"name": "cave", "pokemon_encounters": [{"pokemon": {"name": "zubat"}}]}
    with mock.patch(
        "urllib.request.urlopen", return_value=_FakeResponse(json.dumps(area).encode())
    ) as urlopen:
        result = client.get_location_area("cave")
    assert urlopen.call_args.args[0] == "http://localhost/api/location-area/cave"
    assert result.name == "cave"
    assert [e.pokemon.name for e in result.pokemon_encounters] == ["zubat"]