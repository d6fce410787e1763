"""Canteen directory route"""

from fastapi import APIRouter, Depends
from typing import List
import logging

from api.dependencies import get_meal_query_service
from domain.mappers.dish_mapper import CanteenMapper
from domain.schemas.meal_schemas import CanteenResponse
from services import MealQueryService

router = APIRouter(prefix="/canteens", tags=["Canteens"])
logger = logging.getLogger("mensatoday.api.canteens")


@router.get("", response_model=List[CanteenResponse])
def list_canteens(
    service: MealQueryService = Depends(get_meal_query_service),
) -> List[CanteenResponse]:
    """List canteens known to the upstream feed, e.g. for a setup page."""
    canteens = service.list_canteens()
    logger.debug("Listing %d canteens", len(canteens))
    return [CanteenMapper.to_response(c) for c in canteens]
