"""Seed dataset models and loading."""

import json
from dataclasses import asdict, dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

from menu_seeder.models.exceptions import SeedDataError

BUNDLED_DATASET = "dummy_data.json"


@dataclass
class Category:
    """A menu category, keyed by name within a run."""

    name: str
    description: str

    def to_document(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Customization:
    """
    An add-on that can be attached to menu items.

    ``type`` is usually one of topping, side, size or crust, but any string
    is passed through to the store unchanged.
    """

    name: str
    price: float
    type: str

    def to_document(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class MenuItem:
    """
    A menu item as described in the dataset.

    ``category_name`` and ``customizations`` are names; the seeder resolves
    them to store IDs when the item is written.
    """

    name: str
    description: str
    image_url: str
    price: float
    rating: float
    calories: int
    protein: int
    category_name: str
    customizations: list[str] = field(default_factory=list)

    def to_document(self, image_url: str, category_id: str | None) -> dict[str, Any]:
        """Build the menu document with the hosted image and category link."""
        return {
            "name": self.name,
            "description": self.description,
            "image_url": image_url,
            "price": self.price,
            "rating": self.rating,
            "calories": self.calories,
            "protein": self.protein,
            "categories": category_id,
        }


@dataclass
class SeedData:
    """The full dataset written by one seed run."""

    categories: list[Category] = field(default_factory=list)
    customizations: list[Customization] = field(default_factory=list)
    menu: list[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SeedData":
        return cls(
            categories=[Category(**c) for c in raw.get("categories", [])],
            customizations=[Customization(**c) for c in raw.get("customizations", [])],
            menu=[MenuItem(**m) for m in raw.get("menu", [])],
        )


def load_seed_data(path: str | Path | None = None) -> SeedData:
    """
    Load a seed dataset from a JSON file.

    Args:
        path: Dataset file. When omitted, the dataset bundled with the
              package is used.

    Returns:
        Parsed SeedData

    Raises:
        SeedDataError: If the file is missing, is not valid JSON, or does not
                       have the expected shape
    """
    try:
        if path is None:
            text = resources.files("menu_seeder.data").joinpath(BUNDLED_DATASET).read_text(
                encoding="utf-8"
            )
        else:
            text = Path(path).read_text(encoding="utf-8")
        raw = json.loads(text)
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed dataset not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed dataset is not valid JSON: {e}") from e

    try:
        return SeedData.from_dict(raw)
    except (TypeError, AttributeError) as e:
        raise SeedDataError(f"Seed dataset has an unexpected shape: {e}") from e
