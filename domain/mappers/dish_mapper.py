"""
Dish domain mappers.
Handles transformation between raw eat-api payloads, domain values and response DTOs.
"""

from typing import Any, List
from pydantic import ValidationError

from app.exceptions import MalformedUpstreamDataError
from domain.models.meal import Canteen, Dish
from domain.schemas.eat_api_schemas import UpstreamCanteen, UpstreamDish
from domain.schemas.meal_schemas import CanteenResponse, DishResponse


def _validation_details(exc: ValidationError) -> dict:
    return {
        "errors": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
            for err in exc.errors()
        ]
    }


class DishMapper:
    """Mapper for dish-related transformations."""

    @staticmethod
    def from_upstream(raw: Any) -> Dish:
        """
        Convert one raw eat-api dish record into a Dish.

        Unknown fields are dropped, label strings are kept verbatim and in order.

        Raises:
            MalformedUpstreamDataError: if a required field is missing or has the wrong type
        """
        try:
            parsed = UpstreamDish.model_validate(raw)
        except ValidationError as exc:
            raise MalformedUpstreamDataError(
                "Dish record does not match the expected shape",
                details=_validation_details(exc),
            ) from exc
        return Dish(
            name=parsed.name,
            dish_type=parsed.dish_type,
            labels=tuple(parsed.labels),
        )

    @staticmethod
    def from_upstream_list(raw_dishes: List[Any]) -> List[Dish]:
        """Map a day's dish records, failing on the first malformed entry."""
        dishes = []
        for index, raw in enumerate(raw_dishes):
            try:
                dishes.append(DishMapper.from_upstream(raw))
            except MalformedUpstreamDataError as exc:
                details = dict(exc.details or {})
                details["index"] = index
                raise MalformedUpstreamDataError(exc.message, details=details) from exc
        return dishes

    @staticmethod
    def to_response(dish: Dish) -> DishResponse:
        return DishResponse(
            name=dish.name, dish_type=dish.dish_type, labels=list(dish.labels)
        )


class CanteenMapper:
    """Mapper for canteen directory entries."""

    @staticmethod
    def from_upstream(raw: Any) -> Canteen:
        try:
            parsed = UpstreamCanteen.model_validate(raw)
        except ValidationError as exc:
            raise MalformedUpstreamDataError(
                "Canteen record does not match the expected shape",
                details=_validation_details(exc),
            ) from exc
        return Canteen(canteen_id=parsed.canteen_id, name=parsed.name)

    @staticmethod
    def to_response(canteen: Canteen) -> CanteenResponse:
        return CanteenResponse(id=canteen.canteen_id, name=canteen.name)
