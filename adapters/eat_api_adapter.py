"""eat-api adapter: daily dishes from the TUM-Dev eat-api static JSON feed.

Week menus live at {base}/{canteen_id}/{iso_year}/{iso_week:02d}.json and the
canteen directory at {base}/enums/canteens.json.
"""

from datetime import date
from typing import Any, List, Optional
from urllib.parse import quote
import json
import logging
import time

import requests
from pydantic import ValidationError

from adapters.meal_source import MealSource
from app.config import settings
from app.exceptions import MalformedUpstreamDataError, UpstreamUnavailableError
from domain.mappers.dish_mapper import CanteenMapper, DishMapper
from domain.models.meal import Canteen, Dish
from domain.schemas.eat_api_schemas import UpstreamWeekMenu

logger = logging.getLogger("mensatoday.eat_api")

_READ_CHUNK_SIZE = 1


class EatApiMealSource(MealSource):
    """
    MealSource backed by eat-api.

    Holds configuration only. Each call issues its own request, so one
    instance can serve concurrent queries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.eat_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.upstream_timeout_sec
        self._session = session

    # ------------------ URLs ------------------
    def week_menu_url(self, canteen_id: str, iso_year: int, iso_week: int) -> str:
        return f"{self.base_url}/{quote(canteen_id, safe='')}/{iso_year}/{iso_week:02d}.json"

    def canteens_url(self) -> str:
        return f"{self.base_url}/enums/canteens.json"

    # ------------------ Transport ------------------
    def _get_json(self, url: str, missing_ok: bool = False) -> Any:
        """GET a JSON document within the configured deadline.

        The deadline covers connect, headers and the whole body, so a body
        that trickles in slowly still ends in UpstreamUnavailableError.
        Returns None for a 404 when missing_ok is set.
        """
        http = self._session if self._session is not None else requests
        deadline = time.monotonic() + self.timeout
        try:
            response = http.get(url, timeout=self.timeout, stream=True)
        except requests.Timeout as exc:
            logger.warning("Upstream request timed out after %ss: %s", self.timeout, url)
            raise UpstreamUnavailableError(
                "Upstream menu source timed out",
                details={"url": url, "timeout_sec": self.timeout},
            ) from exc
        except requests.RequestException as exc:
            logger.warning("Upstream request failed: %s (%s)", url, exc)
            raise UpstreamUnavailableError(
                "Upstream menu source unreachable", details={"url": url}
            ) from exc

        try:
            if missing_ok and response.status_code == 404:
                logger.debug("Nothing published at %s", url)
                return None

            try:
                response.raise_for_status()
            except requests.HTTPError as exc:
                logger.warning("Upstream returned HTTP %s for %s", response.status_code, url)
                raise UpstreamUnavailableError(
                    f"Upstream menu source returned HTTP {response.status_code}",
                    details={"url": url, "status_code": response.status_code},
                ) from exc

            body = self._read_body(response, url, deadline)
        finally:
            response.close()

        try:
            return json.loads(body)
        except ValueError as exc:
            logger.warning("Upstream body is not valid JSON: %s", url)
            raise MalformedUpstreamDataError(
                "Upstream response is not valid JSON", details={"url": url}
            ) from exc

    def _read_body(self, response: requests.Response, url: str, deadline: float) -> bytes:
        chunks = []
        try:
            # single-byte reads: a larger chunk blocks until it fills
            for chunk in response.iter_content(chunk_size=_READ_CHUNK_SIZE):
                self._check_deadline(url, deadline)
                chunks.append(chunk)
        except requests.RequestException as exc:
            logger.warning("Upstream body read failed: %s (%s)", url, exc)
            raise UpstreamUnavailableError(
                "Upstream menu source unreachable", details={"url": url}
            ) from exc
        self._check_deadline(url, deadline)
        return b"".join(chunks)

    def _check_deadline(self, url: str, deadline: float):
        if time.monotonic() > deadline:
            logger.warning("Upstream body not complete after %ss: %s", self.timeout, url)
            raise UpstreamUnavailableError(
                "Upstream menu source timed out",
                details={"url": url, "timeout_sec": self.timeout},
            )

    # ------------------ MealSource ------------------
    def fetch_dishes(self, canteen_id: str, day: date) -> List[Dish]:
        iso_year, iso_week, _ = day.isocalendar()
        url = self.week_menu_url(canteen_id, iso_year, iso_week)
        payload = self._get_json(url, missing_ok=True)
        if payload is None:
            return []

        try:
            week = UpstreamWeekMenu.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Week menu at %s has an unexpected shape", url)
            raise MalformedUpstreamDataError(
                "Week menu does not match the expected shape",
                details={"url": url, "error_count": exc.error_count()},
            ) from exc

        entry = next((d for d in week.days if d.day == day), None)
        if entry is None:
            logger.debug("No entry for %s in %s", day.isoformat(), url)
            return []

        dishes = DishMapper.from_upstream_list(entry.dishes)
        logger.info(
            "Fetched %d dishes for canteen=%s date=%s",
            len(dishes),
            canteen_id,
            day.isoformat(),
        )
        return dishes

    def list_canteens(self) -> List[Canteen]:
        url = self.canteens_url()
        payload = self._get_json(url)
        if not isinstance(payload, list):
            raise MalformedUpstreamDataError(
                "Canteen directory is not a list", details={"url": url}
            )
        return [CanteenMapper.from_upstream(raw) for raw in payload]
