import asyncio
import functools
import logging
import os
import time
from typing import Any, Dict, List, Optional

import aiofiles
import aiohttp

from kitty_api.breed import Breed
from kitty_api.client import KittyClient
from kitty_api.config import KittyConfig

logger = logging.getLogger("kitty")


def _log_time(fn):
    @functools.wraps(fn)
    async def wrapper(self, *args, **kwargs):
        start = time.perf_counter()
        logger.debug(f"START {fn.__name__}")
        res = await fn(self, *args, **kwargs)
        end = time.perf_counter()
        logger.debug(f"END {fn.__name__} took {end - start:.3f}s")
        return res
    return wrapper


class AsyncKittyClient(KittyClient):
    """
    Asynchronous client for TheCatAPI.

    Same operations and errors as KittyClient, as coroutines. Each call opens
    its own ClientSession unless one is passed in. Independent calls can be
    run together with asyncio.gather; the client does not order or
    deduplicate them.
    """

    def __init__(
        self,
        config: Optional[KittyConfig] = None,
        limit: int = 30,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        super().__init__(config, limit)
        self.session = session

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.config.timeout)

    async def _fetch_json(self, session: aiohttp.ClientSession, url: str,
                          params: Optional[Dict[str, str]], headers: Dict[str, str]) -> Any:
        async with session.get(url, params=params, headers=headers, timeout=self._timeout()) as response:
            response.raise_for_status()
            return await response.json()

    async def fetch_image_bytes(self, session: aiohttp.ClientSession, url: str) -> bytes:
        async with session.get(url, timeout=self._timeout()) as response:
            response.raise_for_status()
            return await response.read()

    async def _get_json(self, path: str, params: Optional[Dict[str, str]] = None, with_key: bool = True) -> Any:
        url = self._url(path)
        headers = self._headers(with_key)
        logger.debug(f"GET {url} params={params}")
        try:
            if self.session is not None:
                return await self._fetch_json(self.session, url, params, headers)
            async with aiohttp.ClientSession() as session:
                return await self._fetch_json(session, url, params, headers)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise self._transport_error(url, e) from e

    @_log_time
    async def random_image(self) -> str:
        data = await self._get_json(self.IMAGES_SEARCH, with_key=False)
        return self._first_image_url(data)

    @_log_time
    async def cat_breeds(self, limit: Optional[int] = None) -> List[Breed]:
        data = await self._get_json(self.BREEDS, params=self._listing_params(limit))
        return [Breed(item) for item in data]

    @_log_time
    async def cat_breed(self, query: str = "") -> Breed:
        data = await self._get_json(self.BREEDS_SEARCH, params=self._search_params(query))
        return self._first_breed(data, query)

    async def breed_field(self, query: str, field: str) -> Any:
        breed = await self.cat_breed(query)
        return breed.get(field)

    async def cat_breed_description(self, query: str) -> str:
        return await self.breed_field(query, "description")

    async def breed_temperament(self, query: str) -> str:
        return await self.breed_field(query, "temperament")

    async def breed_life_span(self, query: str) -> str:
        return await self.breed_field(query, "life_span")

    async def cat_breed_child_friendliness(self, query: str) -> int:
        return await self.breed_field(query, "child_friendly")

    async def breed_intelligence(self, query: str) -> int:
        return await self.breed_field(query, "intelligence")

    async def breed_affection(self, query: str) -> int:
        return await self.breed_field(query, "affection_level")

    async def cat_breed_image(self, query: str) -> str:
        breed = await self.cat_breed(query)
        return self.breed_image_url(breed)

    @_log_time
    async def download_image(self, url: str, path: str) -> str:
        """Download with aiohttp, write with aiofiles."""
        try:
            if self.session is not None:
                data = await self.fetch_image_bytes(self.session, url)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self.fetch_image_bytes(session, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise self._transport_error(url, e) from e
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        logger.debug(f"Saved {url} to {path}")
        return path
