"""
Shapes of the eat-api JSON feed.

Only the fields MensaToday reads are declared; everything else is ignored.
String fields are strict so that a number or null never slips through as text.
"""

from datetime import date
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class UpstreamDish(BaseModel):
    """Dish entry inside a day of the week menu"""

    name: StrictStr = Field(..., min_length=1)
    dish_type: StrictStr
    labels: List[StrictStr]

    model_config = ConfigDict(extra="ignore")


class UpstreamDay(BaseModel):
    """One day of a week menu; dishes are validated separately"""

    day: date = Field(..., alias="date")
    dishes: List[Any]

    model_config = ConfigDict(extra="ignore")


class UpstreamWeekMenu(BaseModel):
    """Week menu file: {base}/{canteen}/{year}/{week}.json"""

    days: List[UpstreamDay]

    model_config = ConfigDict(extra="ignore")


class UpstreamCanteen(BaseModel):
    """Entry of enums/canteens.json"""

    canteen_id: StrictStr = Field(..., min_length=1)
    name: StrictStr

    model_config = ConfigDict(extra="ignore")
