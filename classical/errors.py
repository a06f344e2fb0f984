"""
Exceptions raised by the food knapsack solvers.
"""


class MaxCalorieError(ValueError):
    """Base class for every error raised by the solvers."""


class InvalidItem(MaxCalorieError):
    """Raised when a food item (or a catalog entry) violates its constraints."""


class InvalidCapacity(MaxCalorieError):
    """Raised when a capacity cannot be used by the requested solver."""


class CatalogTooLarge(MaxCalorieError):
    """Raised when exhaustive search is asked to enumerate too many subsets."""
