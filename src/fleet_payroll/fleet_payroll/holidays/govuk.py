from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

import requests

from ..common.datetime_utils import parse_iso_date
from ..core.constants import (
    GOVUK_BANK_HOLIDAYS_URL,
    GOVUK_DEFAULT_DIVISION,
    HOLIDAY_CACHE_TTL_SECONDS,
    HOLIDAY_FEED_TIMEOUT_SECONDS,
)
from ..core.exceptions import HolidayFeedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicHoliday:
    name: str
    holiday_date: date


class GovUkHolidayFeed:
    """UK bank holidays from the GOV.UK JSON feed.

    The whole payload covers several years for every division, so one fetch is
    cached in memory and reused until `ttl_seconds` have passed.
    """

    def __init__(
        self,
        *,
        url: str = GOVUK_BANK_HOLIDAYS_URL,
        division: str = GOVUK_DEFAULT_DIVISION,
        ttl_seconds: int = HOLIDAY_CACHE_TTL_SECONDS,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._url = url
        self._division = division
        self._ttl = int(ttl_seconds)
        self._session = session or requests.Session()
        self._clock = clock
        self._cached: Optional[dict] = None
        self._fetched_at = 0.0

    def _payload(self) -> dict:
        now = self._clock()
        if self._cached is not None and now - self._fetched_at < self._ttl:
            return self._cached

        try:
            response = self._session.get(self._url, timeout=HOLIDAY_FEED_TIMEOUT_SECONDS)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch bank holidays from %s: %s", self._url, e)
            raise HolidayFeedError(f"Bank holiday feed unavailable: {e}") from e

        if not isinstance(payload, dict):
            raise HolidayFeedError("Bank holiday feed returned an unexpected payload")

        self._cached = payload
        self._fetched_at = now
        return payload

    def holidays_for(self, year: int) -> list[PublicHoliday]:
        division = self._payload().get(self._division)
        if not isinstance(division, dict) or not isinstance(division.get("events"), list):
            raise HolidayFeedError(f"Bank holiday feed has no events for division {self._division!r}")

        out: list[PublicHoliday] = []
        for event in division["events"]:
            try:
                day = parse_iso_date(str(event["date"]))
                name = str(event["title"]).strip()
            except (KeyError, TypeError, ValueError) as e:
                raise HolidayFeedError(f"Malformed bank holiday event: {event!r}") from e
            if day.year == int(year):
                out.append(PublicHoliday(name=name, holiday_date=day))
        return out
