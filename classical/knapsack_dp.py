import math
import numbers
from typing import List

import numpy as np

from classical.errors import InvalidCapacity
from classical.food import Catalog, CatalogLike, as_catalog
from classical.solution import Solution
from utils.logs import logger

METHOD = "dynamic_programming"


def integer_capacity(capacity) -> int:
    """Capacity as a non-negative int; integral floats such as 5.0 are accepted."""
    if isinstance(capacity, (bool, np.bool_)):
        raise InvalidCapacity(f"capacity must be an integer, got {capacity!r}")
    if isinstance(capacity, numbers.Integral):
        cap = int(capacity)
    elif isinstance(capacity, numbers.Real):
        f = float(capacity)
        if not math.isfinite(f) or not f.is_integer():
            raise InvalidCapacity(f"capacity must be an integer, got {capacity!r}")
        cap = int(f)
    else:
        raise InvalidCapacity(f"capacity must be an integer, got {capacity!r}")
    if cap < 0:
        raise InvalidCapacity(f"capacity must be >= 0, got {capacity!r}")
    return cap


def truncated_weights(catalog: Catalog) -> List[int]:
    """Item weights truncated toward zero, as used to index the DP table."""
    weights = [int(it.weight) for it in catalog]
    fractional = [it.name for it, w in zip(catalog, weights) if w != it.weight]
    if fractional:
        logger.warning(
            "dynamic programming truncates fractional weights to integers (%d items, e.g. %s)",
            len(fractional), fractional[0],
        )
    return weights


def build_dp_table(catalog: CatalogLike, capacity) -> np.ndarray:
    """
    T[i][c] = best calories using the first i items within budget c.
    Shape is (n + 1, capacity + 1).
    """
    cat = as_catalog(catalog)
    W = integer_capacity(capacity)
    return _fill_table(cat, truncated_weights(cat), W)


def _fill_table(cat: Catalog, weights: List[int], W: int) -> np.ndarray:
    n = len(cat)
    dp = np.zeros((n + 1, W + 1), dtype=np.float64)
    for i in range(1, n + 1):
        v, wt = cat[i - 1].calories, weights[i - 1]
        dp[i] = dp[i - 1]
        if wt <= W:
            dp[i, wt:] = np.maximum(dp[i - 1, wt:], dp[i - 1, : W + 1 - wt] + v)
    return dp


def _walk_back(dp: np.ndarray, weights: List[int], W: int) -> List[int]:
    w = W
    picked = []
    for i in range(len(weights), 0, -1):
        if dp[i, w] != dp[i - 1, w]:
            picked.append(i - 1)
            w -= weights[i - 1]
    return picked


def solve_dp(catalog: CatalogLike, capacity) -> Solution:
    """
    Knapsack via dynamic programming (O(n*capacity)).

    The chosen subset is recovered by walking back from (n, capacity): item i
    is taken exactly when T[i][c] != T[i-1][c].
    """
    cat = as_catalog(catalog)
    W = integer_capacity(capacity)
    weights = truncated_weights(cat)
    dp = _fill_table(cat, weights, W)
    sol = Solution.from_indices(cat, _walk_back(dp, weights, W), METHOD)
    logger.debug("dp: n=%d capacity=%d table=%s best=%s", len(cat), W, dp.shape, sol.total_value)
    return sol


def solve_dp_rounded_up(catalog: CatalogLike, capacity) -> Solution:
    """
    DP indexed with weights rounded up and capacity rounded down.

    Never returns a selection heavier than `capacity`, at the price of
    sometimes missing the true optimum on fractional weights.
    """
    cat = as_catalog(catalog)
    try:
        cap = float(capacity)
    except (TypeError, ValueError) as e:
        raise InvalidCapacity(f"capacity must be a real number, got {capacity!r}") from e
    if not math.isfinite(cap) or cap < 0:
        raise InvalidCapacity(f"capacity must be a finite number >= 0, got {capacity!r}")
    W = int(math.floor(cap))
    weights = [int(math.ceil(it.weight)) for it in cat]
    dp = _fill_table(cat, weights, W)
    sol = Solution.from_indices(cat, _walk_back(dp, weights, W), METHOD)
    logger.debug("dp (rounded up): n=%d capacity=%s best=%s", len(cat), cap, sol.total_value)
    return sol
