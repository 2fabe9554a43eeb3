from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


class Breed(Mapping):
    """
    Read-only view of one breed record as returned by TheCatAPI.

    Every field the service sends stays reachable by key; the common ones
    also have properties. Nothing is validated: a missing field reads as None.
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = dict(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def id(self) -> Optional[str]:
        return self._data.get("id")

    @property
    def name(self) -> Optional[str]:
        return self._data.get("name")

    @property
    def origin(self) -> Optional[str]:
        return self._data.get("origin")

    @property
    def description(self) -> Optional[str]:
        return self._data.get("description")

    @property
    def temperament(self) -> Optional[str]:
        return self._data.get("temperament")

    @property
    def life_span(self) -> Optional[str]:
        return self._data.get("life_span")

    @property
    def wikipedia_url(self) -> Optional[str]:
        return self._data.get("wikipedia_url")

    # trait scores, 0-5
    @property
    def adaptability(self) -> Optional[int]:
        return self._data.get("adaptability")

    @property
    def affection_level(self) -> Optional[int]:
        return self._data.get("affection_level")

    @property
    def child_friendly(self) -> Optional[int]:
        return self._data.get("child_friendly")

    @property
    def energy_level(self) -> Optional[int]:
        return self._data.get("energy_level")

    @property
    def intelligence(self) -> Optional[int]:
        return self._data.get("intelligence")

    @property
    def reference_image_id(self) -> Optional[str]:
        return self._data.get("reference_image_id")

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        return f"Breed(id={self.id!r}, name={self.name!r})"

    def __str__(self) -> str:
        return f"Breed(name={self.name}, origin={self.origin})"
