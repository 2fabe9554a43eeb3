"""
Plain functions over a shared client configured from the environment.

    from kitty_api import cat_breed, cat_breed_image
    cat_breed("ragd").name          # "Ragdoll"
    cat_breed_image("ragd")         # "https://cdn2.thecatapi.com/images/<id>.jpg"
"""
from typing import List, Optional

from .breed import Breed
from .client import KittyClient

_default_client: Optional[KittyClient] = None


def default_client() -> KittyClient:
    global _default_client
    if _default_client is None:
        _default_client = KittyClient()
    return _default_client


def set_default_client(client: Optional[KittyClient]) -> None:
    """Replace the shared client; None makes the next call rebuild it from the environment."""
    global _default_client
    _default_client = client


def random_image() -> str:
    return default_client().random_image()


def cat_breeds(limit: int = 30) -> List[Breed]:
    return default_client().cat_breeds(limit)


def cat_breed(query: str = "") -> Breed:
    return default_client().cat_breed(query)


def cat_breed_description(query: str) -> str:
    return default_client().cat_breed_description(query)


def cat_breed_image(query: str) -> str:
    return default_client().cat_breed_image(query)


def cat_breed_child_friendliness(query: str) -> int:
    return default_client().cat_breed_child_friendliness(query)


def breed_life_span(query: str) -> str:
    return default_client().breed_life_span(query)


def breed_temperament(query: str) -> str:
    return default_client().breed_temperament(query)


def breed_intelligence(query: str) -> int:
    return default_client().breed_intelligence(query)


def breed_affection(query: str) -> int:
    return default_client().breed_affection(query)
