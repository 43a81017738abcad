"""HTTP client for the Pokémon API, backed by an expiring response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from datetime import timedelta
from typing import Any, Callable, TypeVar

from .models import LocationArea, LocationAreasPage, Pokemon
from .pokecache import Cache

BASE_URL = "https://pokeapi.co/api/v2/"

_T = TypeVar("_T")


class APIError(Exception):
    """Raised when the API answers with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code


class Client:
    """Fetches location areas and Pokémon, caching raw responses by URL."""

    def __init__(
        self,
        cache_interval: float | timedelta = 3600.0,
        timeout: float = 60.0,
        base_url: str = BASE_URL,
        cache: Cache | None = None,
    ) -> None:
        self.cache = cache if cache is not None else Cache(cache_interval)
        self.timeout = timeout
        self.base_url = base_url

    def get_location_areas(self, page_url: str | None = None) -> LocationAreasPage:
        """Return a page of location areas; the first page unless ``page_url`` is given."""
        url = page_url if page_url is not None else self.base_url + "location-area"
        return self._get(url, LocationAreasPage.from_dict)

    def get_location_area(self, name: str) -> LocationArea:
        """Return the location area called ``name``."""
        return self._get(self.base_url + "location-area/" + name, LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the Pokémon called ``name``."""
        return self._get(self.base_url + "pokemon/" + name, Pokemon.from_dict)

    def _get(self, url: str, parse: Callable[[Any], _T]) -> _T:
        cached = self.cache.get(url)
        if cached is not None:
            print("Cache hit")
            return parse(json.loads(cached))

        data = self._download(url)
        result = parse(json.loads(data))
        self.cache.add(url, data)
        return result

    def _download(self, url: str) -> bytes:
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                status = response.status
                data = response.read()
        except urllib.error.HTTPError as exc:
            raise APIError(exc.code) from exc
        if status != 200:
            raise APIError(status)
        return data