from pydantic import BaseModel, Field
from typing import List


class DishResponse(BaseModel):
    """Schema for a dish in the today endpoint response"""

    name: str
    dish_type: str
    labels: List[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class CanteenResponse(BaseModel):
    """Schema for a canteen in the directory listing"""

    id: str = Field(..., description="Canteen identifier, e.g. 'mensa-garching'")
    name: str
