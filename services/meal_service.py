"""
Meal query service - resolves today's dishes for a canteen.
"""

from typing import Any, List
import logging

from adapters.meal_source import MealSource
from app.exceptions import (
    InvalidCanteenIdentifierError,
    MalformedUpstreamDataError,
    UpstreamUnavailableError,
)
from core.clock import Clock
from domain.models.meal import Canteen, MealQueryResult

logger = logging.getLogger("mensatoday.meals")

MAX_CANTEEN_ID_LENGTH = 100


def validate_canteen_id(canteen_id: Any) -> str:
    """
    Check that a canteen identifier is usable as-is.

    The value is returned unchanged: no case folding, no trimming.

    Raises:
        InvalidCanteenIdentifierError: empty, blank, too long, not text, containing '/', or only dots
    """
    if not isinstance(canteen_id, str):
        raise InvalidCanteenIdentifierError(canteen_id, "must be text")
    if not canteen_id.strip():
        raise InvalidCanteenIdentifierError(canteen_id, "must be non-empty text")
    if len(canteen_id) > MAX_CANTEEN_ID_LENGTH:
        raise InvalidCanteenIdentifierError(
            canteen_id, f"must be at most {MAX_CANTEEN_ID_LENGTH} characters"
        )
    if "/" in canteen_id:
        raise InvalidCanteenIdentifierError(canteen_id, "must not contain '/'")
    if not canteen_id.strip("."):
        raise InvalidCanteenIdentifierError(canteen_id, "must not be a dot segment")
    return canteen_id


class MealQueryService:
    """
    Orchestrates a "what is served today" query.

    Holds no per-request state; the clock and source are shared read-only.
    """

    def __init__(self, source: MealSource, clock: Clock):
        self.source = source
        self.clock = clock

    def get_today_meals(self, canteen_id: str) -> MealQueryResult:
        """
        Get today's dishes for a canteen.

        Args:
            canteen_id: Canteen identifier, e.g. "mensa-garching"

        Returns:
            MealQueryResult with dishes in upstream order, or the empty result

        Raises:
            InvalidCanteenIdentifierError: before any upstream call
            UpstreamUnavailableError: source unreachable, timed out or malformed
        """
        canteen_id = validate_canteen_id(canteen_id)
        today = self.clock.today()

        try:
            dishes = self.source.fetch_dishes(canteen_id, today)
        except MalformedUpstreamDataError as exc:
            logger.error(
                "Malformed upstream data canteen=%s date=%s details=%s",
                canteen_id,
                today.isoformat(),
                exc.details,
            )
            raise
        except UpstreamUnavailableError as exc:
            logger.error(
                "Upstream unavailable canteen=%s date=%s: %s",
                canteen_id,
                today.isoformat(),
                exc,
            )
            raise

        if not dishes:
            logger.info("No meals today canteen=%s date=%s", canteen_id, today.isoformat())
            return MealQueryResult.empty(canteen_id)

        logger.debug("Meals found canteen=%s count=%d", canteen_id, len(dishes))
        return MealQueryResult(canteen_id=canteen_id, dishes=tuple(dishes))

    def list_canteens(self) -> List[Canteen]:
        """List canteens known to the upstream source, in upstream order."""
        try:
            return self.source.list_canteens()
        except UpstreamUnavailableError as exc:
            logger.error("Canteen directory unavailable code=%s: %s", exc.code, exc)
            raise
