"""
Base meal source interface.
Separates the upstream menu provider from the query logic in services.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List

from domain.models.meal import Canteen, Dish


class MealSource(ABC):
    """
    Provider of daily dishes for a canteen.
    Implementations must be safe to share between concurrent requests.
    """

    @abstractmethod
    def fetch_dishes(self, canteen_id: str, day: date) -> List[Dish]:
        """
        Get the dishes a canteen offers on a day.

        Args:
            canteen_id: Canteen identifier, passed through unchanged
            day: Date to look up

        Returns:
            Dishes in upstream order; an empty list if nothing is published

        Raises:
            UpstreamUnavailableError: source unreachable or timed out
            MalformedUpstreamDataError: payload could not be mapped
        """
        raise NotImplementedError

    @abstractmethod
    def list_canteens(self) -> List[Canteen]:
        """List the canteens known to the source, in source order"""
        raise NotImplementedError
