import math
from typing import Optional

import numpy as np

from classical.errors import CatalogTooLarge, InvalidCapacity
from classical.food import CatalogLike, as_catalog
from classical.solution import Solution
from utils.config import EXHAUSTIVE_BLOCK_BITS, EXHAUSTIVE_HARD_LIMIT, MAX_EXHAUSTIVE_ITEMS
from utils.logs import logger

METHOD = "exhaustive"


def _real_capacity(capacity) -> float:
    try:
        cap = float(capacity)
    except (TypeError, ValueError) as e:
        raise InvalidCapacity(f"capacity must be a real number, got {capacity!r}") from e
    if math.isnan(cap):
        raise InvalidCapacity("capacity must not be NaN")
    return cap


def _left_to_right_sums(bits, weights, values):
    # Same float order as Catalog.totals (adding 0.0 for skipped items is exact),
    # so feasibility, ties and the reported totals all agree.
    w = np.zeros(bits.shape[0], dtype=np.float64)
    v = np.zeros(bits.shape[0], dtype=np.float64)
    for j in range(bits.shape[1]):
        w += bits[:, j] * weights[j]
        v += bits[:, j] * values[j]
    return w, v


def solve_exhaustive(catalog: CatalogLike, capacity, max_items: Optional[int] = None) -> Solution:
    """
    Knapsack by enumerating every subset (O(2^n * n)).

    Bitmasks run from 0 to 2^n - 1 and bit j selects item j. The feasible
    subset with the strictly greatest calories wins, so on ties the lowest
    mask is kept. Masks are scored in numpy blocks; argmax returns the first
    maximum of a block, which keeps that order.
    """
    cat = as_catalog(catalog)
    n = len(cat)
    limit = MAX_EXHAUSTIVE_ITEMS if max_items is None else min(int(max_items), EXHAUSTIVE_HARD_LIMIT)
    if n > limit:
        raise CatalogTooLarge(
            f"exhaustive search is limited to {limit} items, got {n} "
            f"({2 ** n} subsets); filter the catalog or use dynamic programming"
        )
    cap = _real_capacity(capacity)
    if cap < 0:
        logger.debug("exhaustive: negative capacity %s, no feasible subset", cap)
        return Solution.empty(METHOD)

    weights = cat.weights()
    values = cat.values()
    shifts = np.arange(n, dtype=np.int64)
    total = 1 << n
    block = 1 << min(n, max(0, EXHAUSTIVE_BLOCK_BITS))

    best_mask = None
    best_value = -np.inf
    for start in range(0, total, block):
        masks = np.arange(start, min(start + block, total), dtype=np.int64)
        bits = ((masks[:, None] >> shifts) & 1).astype(np.float64)
        w, v = _left_to_right_sums(bits, weights, values)
        cand = np.where(w <= cap, v, -np.inf)
        j = int(np.argmax(cand))
        if cand[j] > best_value:
            best_value = cand[j]
            best_mask = int(masks[j])

    if best_mask is None:
        return Solution.empty(METHOD)
    picked = [j for j in range(n) if (best_mask >> j) & 1]
    sol = Solution.from_indices(cat, picked, METHOD)
    logger.debug("exhaustive: n=%d capacity=%s evaluated=%d best=%s", n, cap, total, sol.total_value)
    return sol
