import math

from classical.food import CatalogLike, as_catalog
from classical.knapsack_dp import integer_capacity, solve_dp, solve_dp_rounded_up
from classical.knapsack_exhaustive import solve_exhaustive
from classical.solution import Solution
from utils.config import MAX_EXHAUSTIVE_ITEMS
from utils.logs import logger

METHODS = ("auto", "exhaustive", "dp")


def _is_integral(x) -> bool:
    try:
        f = float(x)
    except (TypeError, ValueError):
        return False
    return math.isfinite(f) and f.is_integer()


def solve_max_calories(catalog: CatalogLike, capacity, method: str = "auto") -> Solution:
    """
    Pick the solver. "auto" uses DP when it is exact (integral capacity and
    weights), exhaustive search when the catalog is small enough, and DP on
    rounded-up weights otherwise, which never overshoots the capacity.
    """
    if method not in METHODS:
        raise ValueError(f"unknown method {method!r}; expected one of {METHODS}")
    cat = as_catalog(catalog)
    if method == "exhaustive":
        return solve_exhaustive(cat, capacity)
    if method == "dp":
        return solve_dp(cat, capacity)

    if _is_integral(capacity) and all(it.weight.is_integer() for it in cat):
        return solve_dp(cat, integer_capacity(capacity))
    if len(cat) <= MAX_EXHAUSTIVE_ITEMS:
        return solve_exhaustive(cat, capacity)

    logger.warning(
        "auto: %d items is too many for exhaustive search; using dynamic programming "
        "with weights rounded up so the selection stays within capacity", len(cat),
    )
    return solve_dp_rounded_up(cat, capacity)
