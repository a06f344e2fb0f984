import numpy as np
import pytest

from classical.food import Catalog, FoodItem
from classical.knapsack_dp import solve_dp
from classical.knapsack_exhaustive import solve_exhaustive
from data.sample_catalogs import capacity_for, random_catalog

SEEDS = range(12)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("ratio", [0.0, 0.3, 0.6, 1.0])
def test_solvers_agree_on_integer_catalogs(seed, ratio):
    catalog = random_catalog(3 + seed % 8, seed=seed)
    capacity = capacity_for(catalog, ratio)
    ex = solve_exhaustive(catalog, capacity)
    dp = solve_dp(catalog, capacity)
    assert ex.total_value == dp.total_value
    assert ex.total_weight <= capacity
    assert dp.total_weight <= capacity


@pytest.mark.parametrize("seed", SEEDS)
def test_reported_totals_match_items(seed):
    catalog = random_catalog(8, seed=seed, value_range=(0, 9), weight_range=(1, 6))
    capacity = capacity_for(catalog, 0.4)
    for sol in (solve_exhaustive(catalog, capacity), solve_dp(catalog, capacity)):
        picked = sol.items(catalog)
        assert sol.total_weight == sum(it.weight for it in picked)
        assert sol.total_value == sum(it.calories for it in picked)
        assert list(sol.indices) == sorted(set(sol.indices))


@pytest.mark.parametrize("seed", SEEDS)
def test_heavy_item_never_changes_optimum(seed):
    catalog = random_catalog(7, seed=seed)
    capacity = capacity_for(catalog, 0.5)
    heavy = FoodItem("whole turkey", capacity + 1, 10_000)
    rng = np.random.default_rng(seed)
    items = list(catalog)
    items.insert(int(rng.integers(0, len(items) + 1)), heavy)
    bigger = Catalog(tuple(items))
    assert solve_exhaustive(bigger, capacity).total_value == solve_exhaustive(catalog, capacity).total_value
    assert solve_dp(bigger, capacity).total_value == solve_dp(catalog, capacity).total_value


@pytest.mark.parametrize("solver", [solve_exhaustive, solve_dp])
def test_single_fitting_item_is_chosen(solver):
    catalog = Catalog.from_tuples([("apple", 3, 95)])
    sol = solver(catalog, 3)
    assert sol.indices == (0,)
    assert sol.total_value == 95


@pytest.mark.parametrize("solver", [solve_exhaustive, solve_dp])
def test_empty_catalog_and_zero_capacity(solver, empty_catalog, textbook):
    assert solver(empty_catalog, 5).is_empty
    assert solver(empty_catalog, 5).total_value == 0
    assert solver(textbook, 0).is_empty
