"""
Food items and the catalog they are chosen from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from classical.errors import InvalidItem


@dataclass(frozen=True)
class FoodItem:
    """
    One food item available for purchase.

    Attributes
    ----------
    name : str
        Human-readable description, e.g. "spicy chicken breast". Non-empty.
    weight : float
        Weight in ounces. Positive and finite.
    calories : float
        Calories. Non-negative and finite.
    """
    name: str
    weight: float
    calories: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidItem("FoodItem.name must be a non-empty string.")
        try:
            weight = float(self.weight)
            calories = float(self.calories)
        except (TypeError, ValueError) as e:
            raise InvalidItem(f"FoodItem[{self.name}] weight and calories must be numbers: {e}") from e
        if not math.isfinite(weight) or weight <= 0:
            raise InvalidItem(f"FoodItem[{self.name}] weight must be > 0, got {self.weight!r}.")
        if not math.isfinite(calories) or calories < 0:
            raise InvalidItem(f"FoodItem[{self.name}] calories must be >= 0, got {self.calories!r}.")
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "calories", calories)


@dataclass(frozen=True)
class Catalog:
    """Immutable, ordered collection of food items. Solutions refer to it by index."""
    items: Tuple[FoodItem, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for idx, it in enumerate(items):
            if not isinstance(it, FoodItem):
                raise InvalidItem(f"Catalog[{idx}]: expected a FoodItem, got {type(it).__name__}.")
        object.__setattr__(self, "items", items)

    @classmethod
    def from_tuples(cls, rows: Iterable[Tuple[str, float, float]]) -> "Catalog":
        return cls(tuple(FoodItem(name, weight, calories) for name, weight, calories in rows))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self.items)

    def __getitem__(self, idx: int) -> FoodItem:
        return self.items[idx]

    def weights(self) -> np.ndarray:
        return np.array([it.weight for it in self.items], dtype=np.float64)

    def values(self) -> np.ndarray:
        return np.array([it.calories for it in self.items], dtype=np.float64)

    def totals(self, indices: Optional[Iterable[int]] = None) -> Tuple[float, float]:
        """Total weight and calories of the given indices (all items when omitted)."""
        if indices is None:
            return catalog_totals(self.items)
        return catalog_totals(self.items[i] for i in indices)


CatalogLike = Union[Catalog, Sequence[FoodItem]]


def as_catalog(catalog: CatalogLike) -> Catalog:
    if isinstance(catalog, Catalog):
        return catalog
    return Catalog(tuple(catalog))


def catalog_totals(items: Iterable[FoodItem]) -> Tuple[float, float]:
    total_weight = total_calories = 0.0
    for it in items:
        total_weight += it.weight
        total_calories += it.calories
    return total_weight, total_calories


def filter_catalog(
    catalog: CatalogLike,
    min_calories: float,
    max_calories: float,
    total_size: int,
) -> Catalog:
    """
    Keep, in order, the first `total_size` items whose calories lie in
    [min_calories, max_calories].

    Useful to drop zero-calorie foods and to keep exhaustive search inputs small.
    """
    picked = []
    if total_size > 0:
        for it in as_catalog(catalog):
            if min_calories <= it.calories <= max_calories:
                picked.append(it)
                if len(picked) >= total_size:
                    break
    return Catalog(tuple(picked))
