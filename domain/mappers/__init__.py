"""Domain mappers package - payload and DTO transformations."""

from domain.mappers.dish_mapper import CanteenMapper, DishMapper

__all__ = ["CanteenMapper", "DishMapper"]
