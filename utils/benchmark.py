import time

import numpy as np
import pandas as pd

from classical.knapsack_dp import solve_dp
from classical.knapsack_exhaustive import solve_exhaustive
from data.sample_catalogs import capacity_for, random_catalog
from utils.config import MAX_EXHAUSTIVE_ITEMS
from utils.logs import logger

COLUMNS = {
    "n": "int64",
    "trial": "int64",
    "capacity": "int64",
    "dp_value": "float64",
    "exhaustive_value": "float64",
    "agree": "boolean",
    "dp_time_s": "float64",
    "exhaustive_time_s": "float64",
}


def _timed(fn, *args):
    start = time.perf_counter()
    out = fn(*args)
    return out, time.perf_counter() - start


def sweep_solvers(sizes, trials=3, seed=42, cap_ratio=0.5):
    """Exhaustive vs DP on seeded random catalogs; one row per (n, trial)."""
    rng = np.random.default_rng(int(seed))
    rows = []
    for n in sizes:
        for t in range(int(trials)):
            s = int(rng.integers(0, 2**31 - 1))
            catalog = random_catalog(int(n), seed=s)
            capacity = capacity_for(catalog, cap_ratio)
            dp_sol, dp_time = _timed(solve_dp, catalog, capacity)
            if int(n) <= MAX_EXHAUSTIVE_ITEMS:
                ex_sol, ex_time = _timed(solve_exhaustive, catalog, capacity)
                ex_value = float(ex_sol.total_value)
                agree = bool(np.isclose(ex_value, dp_sol.total_value))
            else:
                ex_value, ex_time, agree = np.nan, np.nan, pd.NA
            rows.append({
                "n": int(n),
                "trial": int(t),
                "capacity": int(capacity),
                "dp_value": float(dp_sol.total_value),
                "exhaustive_value": ex_value,
                "agree": agree,
                "dp_time_s": float(dp_time),
                "exhaustive_time_s": ex_time,
            })
            logger.debug("sweep n=%d trial=%d dp=%s exhaustive=%s", n, t, dp_sol.total_value, ex_value)
    return pd.DataFrame(rows, columns=list(COLUMNS)).astype(COLUMNS)
