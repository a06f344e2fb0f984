import math

import numpy as np
import pytest

from classical.errors import InvalidCapacity
from classical.food import Catalog
from classical.knapsack_dp import build_dp_table, integer_capacity, solve_dp, solve_dp_rounded_up


def test_textbook_example(textbook):
    sol = solve_dp(textbook, 5)
    assert sol.total_value == 7
    assert sol.total_weight == 5
    assert sol.indices == (0, 1)
    assert sol.method == "dynamic_programming"


def test_table_shape_and_recurrence(textbook):
    T = build_dp_table(textbook, 5)
    assert T.shape == (5, 6)
    np.testing.assert_array_equal(T[0], np.zeros(6))
    np.testing.assert_array_equal(T[1], [0, 0, 3, 3, 3, 3])
    np.testing.assert_array_equal(T[2], [0, 0, 3, 4, 4, 7])
    assert T[-1, -1] == 7


def test_empty_catalog(empty_catalog):
    sol = solve_dp(empty_catalog, 10)
    assert sol.is_empty and sol.total_value == 0


def test_zero_capacity(textbook):
    assert solve_dp(textbook, 0).is_empty


def test_heavy_item_never_selected():
    catalog = Catalog.from_tuples([("feast", 50, 1000), ("snack", 2, 10)])
    sol = solve_dp(catalog, 10)
    assert sol.indices == (1,)


@pytest.mark.parametrize("capacity", [5, 5.0, np.int64(5), np.float64(5.0)])
def test_integral_capacities_are_accepted(textbook, capacity):
    assert solve_dp(textbook, capacity).total_value == 7


@pytest.mark.parametrize("capacity", [5.5, -1, -1.0, math.nan, math.inf, True, "5", None])
def test_invalid_capacities_are_rejected(textbook, capacity):
    with pytest.raises(InvalidCapacity):
        solve_dp(textbook, capacity)


def test_integer_capacity_helper():
    assert integer_capacity(7.0) == 7
    assert isinstance(integer_capacity(np.int32(3)), int)


def test_fractional_weights_are_truncated(caplog):
    catalog = Catalog.from_tuples([("a", 2.9, 10), ("b", 2.9, 10)])
    with caplog.at_level("WARNING", logger="maxcalorie"):
        sol = solve_dp(catalog, 5)
    # both truncate to 2, so the pair fits in the integer table
    assert sol.indices == (0, 1)
    assert sol.total_weight == pytest.approx(5.8)
    assert "truncates fractional weights" in caplog.text


def test_sub_unit_weight_counts_as_zero():
    catalog = Catalog.from_tuples([("pinch of salt", 0.1, 1), ("bread", 3, 80)])
    sol = solve_dp(catalog, 3)
    assert sol.indices == (0, 1)


def test_backwalk_uses_strict_inequality():
    # a and b are interchangeable; b leaves the row unchanged, so a is taken
    catalog = Catalog.from_tuples([("a", 2, 5), ("b", 2, 5)])
    sol = solve_dp(catalog, 2)
    assert sol.indices == (0,)


def test_rounded_up_never_overshoots():
    catalog = Catalog.from_tuples([("a", 2.9, 10), ("b", 2.9, 10), ("c", 1, 3)])
    sol = solve_dp_rounded_up(catalog, 5.5)
    # a and b round up to 3 each, so only one of them fits with c
    assert sol.indices == (0, 2)
    assert sol.total_weight <= 5.5


def test_rounded_up_matches_dp_on_integer_weights(textbook):
    assert solve_dp_rounded_up(textbook, 5.9) == solve_dp(textbook, 5)


@pytest.mark.parametrize("capacity", [-0.5, math.nan, "heavy"])
def test_rounded_up_rejects_bad_capacities(textbook, capacity):
    with pytest.raises(InvalidCapacity):
        solve_dp_rounded_up(textbook, capacity)
