from datetime import date

import pytest
import requests

from src.fleet_payroll.fleet_payroll.core.exceptions import HolidayFeedError
from src.fleet_payroll.fleet_payroll.holidays.govuk import GovUkHolidayFeed

PAYLOAD = {
    "england-and-wales": {
        "division": "england-and-wales",
        "events": [
            {"title": "New Year’s Day", "date": "2025-01-01", "notes": "", "bunting": True},
            {"title": "Good Friday", "date": "2025-04-18", "notes": "", "bunting": False},
            {"title": "New Year’s Day", "date": "2026-01-01", "notes": "", "bunting": True},
        ],
    },
    "scotland": {
        "division": "scotland",
        "events": [{"title": "2nd January", "date": "2025-01-02", "notes": "", "bunting": True}],
    },
}


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_holidays_for_year_in_division():
    feed = GovUkHolidayFeed(session=FakeSession(FakeResponse(PAYLOAD)))

    out = feed.holidays_for(2025)

    assert [(h.name, h.holiday_date) for h in out] == [
        ("New Year’s Day", date(2025, 1, 1)),
        ("Good Friday", date(2025, 4, 18)),
    ]


def test_other_division():
    feed = GovUkHolidayFeed(division="scotland", session=FakeSession(FakeResponse(PAYLOAD)))

    assert [h.holiday_date for h in feed.holidays_for(2025)] == [date(2025, 1, 2)]


def test_payload_cached_until_ttl_expires():
    session = FakeSession(FakeResponse(PAYLOAD))
    clock = Clock()
    feed = GovUkHolidayFeed(url="https://example.test/bh.json", ttl_seconds=60, session=session, clock=clock)

    feed.holidays_for(2025)
    clock.now += 59
    feed.holidays_for(2026)
    assert len(session.calls) == 1
    assert session.calls[0][0] == "https://example.test/bh.json"

    clock.now += 1
    feed.holidays_for(2025)
    assert len(session.calls) == 2


def test_network_error_raises_feed_error():
    feed = GovUkHolidayFeed(session=FakeSession(requests.ConnectionError("down")))

    with pytest.raises(HolidayFeedError):
        feed.holidays_for(2025)


def test_http_error_raises_feed_error():
    feed = GovUkHolidayFeed(session=FakeSession(FakeResponse(PAYLOAD, status=503)))

    with pytest.raises(HolidayFeedError):
        feed.holidays_for(2025)


def test_invalid_json_raises_feed_error():
    feed = GovUkHolidayFeed(session=FakeSession(FakeResponse(ValueError("not json"))))

    with pytest.raises(HolidayFeedError):
        feed.holidays_for(2025)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"scotland": PAYLOAD["scotland"]},
        {"england-and-wales": {"events": [{"title": "Broken"}]}},
    ],
)
def test_unexpected_payload_raises_feed_error(payload):
    feed = GovUkHolidayFeed(session=FakeSession(FakeResponse(payload)))

    with pytest.raises(HolidayFeedError):
        feed.holidays_for(2025)


def test_failed_fetch_is_not_cached():
    session = FakeSession(requests.ConnectionError("down"))
    feed = GovUkHolidayFeed(session=session, clock=Clock())

    with pytest.raises(HolidayFeedError):
        feed.holidays_for(2025)

    session.response = FakeResponse(PAYLOAD)
    assert len(feed.holidays_for(2025)) == 2
