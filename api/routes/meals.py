"""Today's meals route"""

from fastapi import APIRouter, Depends, Path, Response, status
from typing import List
import logging

from api.dependencies import get_meal_query_service
from domain.mappers.dish_mapper import DishMapper
from domain.schemas.meal_schemas import DishResponse
from services import MealQueryService

router = APIRouter(tags=["Meals"])
logger = logging.getLogger("mensatoday.api.meals")


@router.get(
    "/{canteen_id}/today",
    response_model=List[DishResponse],
    responses={
        status.HTTP_204_NO_CONTENT: {"description": "No meals published for today"},
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid canteen identifier"},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Upstream menu source unavailable"},
    },
)
def get_today_meals(
    canteen_id: str = Path(..., description="Canteen identifier, e.g. 'mensa-garching'"),
    service: MealQueryService = Depends(get_meal_query_service),
):
    """
    Get the dishes a canteen serves today.

    Returns:
        200 with the dishes in upstream order, or 204 with no body when
        nothing is published

    Raises:
        400: If the canteen identifier is invalid
        503: If the upstream source is unreachable or returns malformed data
    """
    result = service.get_today_meals(canteen_id)
    if result.is_empty:
        logger.debug("No dishes for canteen=%s, responding 204", canteen_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [DishMapper.to_response(dish) for dish in result.dishes]
