"""
Adapters package - External service connections.
Meal sources backed by upstream menu providers.
"""

from adapters.meal_source import MealSource
from adapters.eat_api_adapter import EatApiMealSource

__all__ = [
    "MealSource",
    "EatApiMealSource",
]
