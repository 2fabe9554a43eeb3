import functools
import logging
import os
import time
from typing import Any, Dict, List, Optional

import requests

from .breed import Breed
from .config import KittyConfig
from .errors import BreedNotFoundError, ImageNotFoundError, TransportError

logger = logging.getLogger("kitty")


def _log_time(fn):
    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        start = time.perf_counter()
        logger.debug(f"START {fn.__name__}")
        res = fn(self, *args, **kwargs)
        end = time.perf_counter()
        logger.debug(f"END {fn.__name__} took {end - start:.3f}s")
        return res
    return wrapper


def _positive_int(value: Any, name: str = "limit") -> int:
    iv = int(value)
    if iv <= 0:
        raise ValueError(f"{name} must be positive")
    return iv


class PositiveInt:
    def __set_name__(self, owner, name):
        self.name = f"_{name}"
    def __get__(self, instance, owner):
        return getattr(instance, self.name)
    def __set__(self, instance, value):
        setattr(instance, self.name, _positive_int(value, self.name.lstrip("_")))


class KittyClient:
    """
    Blocking client for TheCatAPI.

    Every public operation is a single GET round trip. Nothing is cached,
    so asking for the same breed twice hits the service twice.
    """

    IMAGES_SEARCH = "images/search"
    BREEDS = "breeds"
    BREEDS_SEARCH = "breeds/search"

    # page size used by cat_breeds() when no explicit limit is given
    limit = PositiveInt()

    def __init__(self, config: Optional[KittyConfig] = None, limit: int = 30):
        self.config = config or KittyConfig.from_env()
        self.limit = limit

    # request building, shared with the async client

    def _url(self, path: str) -> str:
        return self.config.base_url + path

    def _headers(self, with_key: bool) -> Dict[str, str]:
        if not with_key:
            return {}
        return {"X-API-Key": self.config.api_key}

    def _search_params(self, query: str) -> Dict[str, str]:
        return {"q": query or ""}

    def _listing_params(self, limit: Optional[int]) -> Dict[str, str]:
        if limit is None:
            limit = self.limit
        return {"limit": str(_positive_int(limit))}

    # response projection, shared with the async client

    def _first_breed(self, data: List[Dict[str, Any]], query: str) -> Breed:
        if not data:
            logger.warning(f"No breed matches query {query!r}")
            raise BreedNotFoundError()
        return Breed(data[0])

    def _first_image_url(self, data: List[Dict[str, Any]]) -> str:
        if not data:
            logger.warning("Random image search returned no records")
            raise ImageNotFoundError()
        url = data[0].get("url")
        if not url:
            logger.warning(f"Random image record {data[0].get('id')!r} has no url")
            raise ImageNotFoundError()
        return url

    def breed_image_url(self, breed: Breed) -> str:
        return f"{self.config.cdn_url}{breed.reference_image_id}.jpg"

    # transport

    def _transport_error(self, url: str, exc: Exception) -> TransportError:
        # aiohttp errors carry .status, requests errors carry .response
        status = getattr(exc, "status", None)
        if status is None:
            status = getattr(getattr(exc, "response", None), "status_code", None)
        logger.error(f"GET {url} failed: {exc}")
        return TransportError(f"GET {url} failed: {exc}", url=url, status=status)

    def _get_json(self, path: str, params: Optional[Dict[str, str]] = None, with_key: bool = True) -> Any:
        url = self._url(path)
        logger.debug(f"GET {url} params={params}")
        try:
            r = requests.get(url, params=params, headers=self._headers(with_key), timeout=self.config.timeout)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            raise self._transport_error(url, e) from e

    # RandomImage

    @_log_time
    def random_image(self) -> str:
        """URL of one random cat image. No API key is sent."""
        data = self._get_json(self.IMAGES_SEARCH, with_key=False)
        return self._first_image_url(data)

    # BreedListing

    @_log_time
    def cat_breeds(self, limit: Optional[int] = None) -> List[Breed]:
        """
        Up to ``limit`` breeds, in the order the service sorts them (alphabetical).

        A limit above the service maximum is passed through; the shorter
        answer is returned as is.
        """
        data = self._get_json(self.BREEDS, params=self._listing_params(limit))
        return [Breed(item) for item in data]

    # BreedLookup

    @_log_time
    def cat_breed(self, query: str = "") -> Breed:
        """
        Best match for ``query`` (the first record the service returns).

        Partial names work, the ranking is the service's: "ragd" -> Ragdoll.
        Raises BreedNotFoundError when nothing matches.
        """
        data = self._get_json(self.BREEDS_SEARCH, params=self._search_params(query))
        return self._first_breed(data, query)

    def breed_field(self, query: str, field: str) -> Any:
        return self.cat_breed(query).get(field)

    def cat_breed_description(self, query: str) -> str:
        return self.breed_field(query, "description")

    def breed_temperament(self, query: str) -> str:
        return self.breed_field(query, "temperament")

    def breed_life_span(self, query: str) -> str:
        return self.breed_field(query, "life_span")

    def cat_breed_child_friendliness(self, query: str) -> int:
        return self.breed_field(query, "child_friendly")

    def breed_intelligence(self, query: str) -> int:
        return self.breed_field(query, "intelligence")

    def breed_affection(self, query: str) -> int:
        return self.breed_field(query, "affection_level")

    def cat_breed_image(self, query: str) -> str:
        return self.breed_image_url(self.cat_breed(query))

    # downloads

    @_log_time
    def download_image(self, url: str, path: str) -> str:
        """Save the image at ``url`` to ``path`` and return the path."""
        try:
            r = requests.get(url, timeout=self.config.timeout)
            r.raise_for_status()
            content = r.content
        except requests.RequestException as e:
            raise self._transport_error(url, e) from e
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)
        logger.debug(f"Saved {url} to {path}")
        return path
