import numpy as np

from classical.food import Catalog, FoodItem


def textbook_catalog():
    return Catalog.from_tuples([("A", 2, 3), ("B", 3, 4), ("C", 4, 5), ("D", 5, 6)])


def pantry_catalog():
    return Catalog.from_tuples([
        ("spicy chicken breast", 6.5, 280),
        ("peanut butter", 2.0, 190),
        ("canned black beans", 15.5, 385),
        ("rolled oats", 1.4, 150),
        ("dried apricots", 1.5, 110),
        ("tuna in water", 5.0, 120),
        ("whole wheat bread", 1.1, 80),
        ("brown rice", 1.6, 170),
        ("diet soda", 12.0, 0),
        ("almonds", 1.0, 165),
    ])


def random_catalog(n, seed=42, value_range=(5, 20), weight_range=(3, 15)):
    """Integer weights and calories drawn uniformly (bounds inclusive)."""
    rng = np.random.default_rng(int(seed))
    values = rng.integers(value_range[0], value_range[1] + 1, size=n).tolist()
    weights = rng.integers(weight_range[0], weight_range[1] + 1, size=n).tolist()
    return Catalog(tuple(
        FoodItem(f"item_{i}", weight=w, calories=v) for i, (w, v) in enumerate(zip(weights, values))
    ))


def capacity_for(catalog, ratio):
    total_weight, _ = catalog.totals()
    return int(ratio * total_weight)
