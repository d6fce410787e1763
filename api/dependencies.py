"""
API dependencies for dependency injection
"""

from fastapi import Depends

from adapters import EatApiMealSource, MealSource
from app.config import settings
from core.clock import Clock, SystemClock
from services import MealQueryService


def get_clock() -> Clock:
    """Clock resolving 'today' in the configured timezone"""
    return SystemClock(settings.timezone)


def get_meal_source() -> MealSource:
    """Upstream meal source configured from settings"""
    return EatApiMealSource(
        base_url=settings.eat_api_base_url, timeout=settings.upstream_timeout_sec
    )


def get_meal_query_service(
    source: MealSource = Depends(get_meal_source),
    clock: Clock = Depends(get_clock),
) -> MealQueryService:
    """
    Meal query service dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(service: MealQueryService = Depends(get_meal_query_service)):
            ...

    Tests swap the source or clock via app.dependency_overrides.
    """
    return MealQueryService(source=source, clock=clock)
