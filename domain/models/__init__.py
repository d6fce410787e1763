"""Domain models package - immutable meal values."""

from domain.models.meal import Canteen, Dish, MealQueryResult

__all__ = ["Canteen", "Dish", "MealQueryResult"]
