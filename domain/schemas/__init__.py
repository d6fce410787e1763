"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.eat_api_schemas import (
    UpstreamCanteen,
    UpstreamDay,
    UpstreamDish,
    UpstreamWeekMenu,
)
from domain.schemas.meal_schemas import CanteenResponse, DishResponse

__all__ = [
    # Upstream payloads
    "UpstreamCanteen",
    "UpstreamDay",
    "UpstreamDish",
    "UpstreamWeekMenu",
    # API responses
    "CanteenResponse",
    "DishResponse",
]
