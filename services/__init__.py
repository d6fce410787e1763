"""Services package - Business logic layer"""

from services.meal_service import MealQueryService, validate_canteen_id

__all__ = [
    "MealQueryService",
    "validate_canteen_id",
]
