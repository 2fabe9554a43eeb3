from .api import (
    breed_affection,
    breed_intelligence,
    breed_life_span,
    breed_temperament,
    cat_breed,
    cat_breed_child_friendliness,
    cat_breed_description,
    cat_breed_image,
    cat_breeds,
    default_client,
    random_image,
    set_default_client,
)
from .breed import Breed
from .client import KittyClient
from .config import KittyConfig
from .errors import (
    BreedNotFoundError,
    ImageNotFoundError,
    KittyError,
    NotFoundError,
    TransportError,
)

__all__ = [
    "Breed",
    "BreedNotFoundError",
    "ImageNotFoundError",
    "KittyClient",
    "KittyConfig",
    "KittyError",
    "NotFoundError",
    "TransportError",
    "breed_affection",
    "breed_intelligence",
    "breed_life_span",
    "breed_temperament",
    "cat_breed",
    "cat_breed_child_friendliness",
    "cat_breed_description",
    "cat_breed_image",
    "cat_breeds",
    "default_client",
    "random_image",
    "set_default_client",
]
