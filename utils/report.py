"""
Pure formatters for solutions. Nothing here prints; callers decide where the
text, dict or DataFrame goes.
"""

from typing import Dict, Optional

import pandas as pd

from classical.food import CatalogLike, as_catalog
from classical.solution import Solution


def solution_summary(catalog: CatalogLike, solution: Solution, capacity: Optional[float] = None) -> Dict:
    cat = as_catalog(catalog)
    summary = solution.to_dict()
    summary["picked_names"] = [it.name for it in solution.items(cat)]
    summary["catalog_size"] = len(cat)
    if capacity is not None:
        summary["capacity"] = capacity
    return summary


def solution_frame(catalog: CatalogLike, solution: Solution) -> pd.DataFrame:
    cat = as_catalog(catalog)
    df = pd.DataFrame(
        {
            "name": [cat[i].name for i in solution.indices],
            "weight": [cat[i].weight for i in solution.indices],
            "calories": [cat[i].calories for i in solution.indices],
        },
        index=pd.Index(list(solution.indices), name="item"),
    )
    return df


def catalog_frame(catalog: CatalogLike) -> pd.DataFrame:
    cat = as_catalog(catalog)
    return pd.DataFrame(
        {
            "name": [it.name for it in cat],
            "weight": [it.weight for it in cat],
            "calories": [it.calories for it in cat],
        },
        index=pd.Index(range(len(cat)), name="item"),
    )


def format_solution(catalog: CatalogLike, solution: Solution) -> str:
    cat = as_catalog(catalog)
    lines = ["*** food vector ***"]
    if solution.is_empty:
        lines.append("[empty food list]")
        return "\n".join(lines)
    for it in solution.items(cat):
        lines.append(f"{it.name} ==> weight of {it.weight:g} ounces; calories = {it.calories:g}")
    lines.append(f"> Grand total weight: {solution.total_weight:g} ounces")
    lines.append(f"> Grand total calories: {solution.total_value:g}")
    return "\n".join(lines)
