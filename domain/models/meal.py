"""
Meal domain values.

Dish and Canteen are immutable and compared structurally. They are built
fresh for every query and never stored.
"""

from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class Dish(BaseModel):
    """One menu item offered by a canteen on a given day"""

    name: str = Field(..., min_length=1, description="Dish name")
    dish_type: str = Field(..., description="Free-text category, e.g. 'Hauptgericht'")
    labels: Tuple[str, ...] = Field(
        default=(), description="Dietary tags in upstream order, unvalidated"
    )

    model_config = ConfigDict(frozen=True)


class Canteen(BaseModel):
    """A canteen as listed by the upstream directory"""

    canteen_id: str
    name: str

    model_config = ConfigDict(frozen=True)


class MealQueryResult(BaseModel):
    """
    Outcome of a "today's meals" query.

    An empty dish tuple is the "no meals today" state; there is no separate
    marker that could disagree with it.
    """

    canteen_id: str
    dishes: Tuple[Dish, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls, canteen_id: str) -> "MealQueryResult":
        return cls(canteen_id=canteen_id)

    @property
    def is_empty(self) -> bool:
        return not self.dishes
