"""
Result record shared by the exhaustive and dynamic programming solvers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from classical.food import Catalog, FoodItem


@dataclass(frozen=True)
class Solution:
    """
    A chosen subset of a catalog.

    Attributes
    ----------
    indices : tuple[int, ...]
        Catalog indices of the chosen items, ascending.
    total_weight : float
        Sum of the chosen items' real weights.
    total_value : float
        Sum of the chosen items' calories.
    method : str
        Solver that produced it ("exhaustive" or "dynamic_programming").
    """
    indices: Tuple[int, ...]
    total_weight: float
    total_value: float
    method: str

    @classmethod
    def empty(cls, method: str) -> "Solution":
        return cls(indices=(), total_weight=0.0, total_value=0.0, method=method)

    @classmethod
    def from_indices(cls, catalog: Catalog, indices: Iterable[int], method: str) -> "Solution":
        picked = tuple(sorted(indices))
        total_weight, total_value = catalog.totals(picked)
        return cls(indices=picked, total_weight=total_weight, total_value=total_value, method=method)

    @property
    def is_empty(self) -> bool:
        return not self.indices

    def items(self, catalog: Catalog) -> Tuple[FoodItem, ...]:
        return tuple(catalog[i] for i in self.indices)

    def to_dict(self) -> Dict:
        return {
            "best_value": self.total_value,
            "total_weight": self.total_weight,
            "picked_items": list(self.indices),
            "method": self.method,
        }
