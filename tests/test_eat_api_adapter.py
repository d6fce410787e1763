"""
Tests for the eat-api meal source.

The HTTP layer is replaced with a mock session, so no network access happens.
"""

from datetime import date
import json
import time

import pytest
import requests

from adapters.eat_api_adapter import EatApiMealSource
from app.exceptions import MalformedUpstreamDataError, UpstreamUnavailableError
from domain.models.meal import Canteen, Dish
from test_fixtures import (
    GARCHING,
    MONDAY,
    TUESDAY,
    RAW_DISHES,
    make_http_response,
    make_session,
    make_week_payload,
    trickling_body,
)

BASE = "https://eat-api.example.org"


def make_source(*responses, timeout=2.5):
    session = make_session(*responses)
    return EatApiMealSource(base_url=BASE + "/", timeout=timeout, session=session), session


# =============================================================================
# URL CONSTRUCTION
# =============================================================================


def test_requests_iso_week_file_with_timeout():
    source, session = make_source(make_http_response(payload=make_week_payload()))

    source.fetch_dishes(GARCHING, MONDAY)

    session.get.assert_called_once_with(
        f"{BASE}/mensa-garching/2026/43.json", timeout=2.5, stream=True
    )


def test_iso_year_used_at_year_boundary():
    """1 January 2027 belongs to ISO week 53 of 2026."""
    source, session = make_source(make_http_response(status_code=404))

    source.fetch_dishes(GARCHING, date(2027, 1, 1))

    session.get.assert_called_once_with(f"{BASE}/mensa-garching/2026/53.json", timeout=2.5, stream=True)


def test_week_number_is_zero_padded():
    source, session = make_source(make_http_response(status_code=404))

    source.fetch_dishes(GARCHING, date(2026, 1, 7))

    assert session.get.call_args.args[0] == f"{BASE}/mensa-garching/2026/02.json"


# =============================================================================
# PAYLOAD MAPPING
# =============================================================================


def test_maps_dishes_for_requested_day_in_order():
    """
    Verifies:
    - Only the requested day's dishes are returned
    - Order matches the payload
    - Extra fields (prices) are discarded
    """
    payload = make_week_payload(
        {MONDAY: RAW_DISHES, TUESDAY: [{"name": "Other", "dish_type": "X", "labels": []}]}
    )
    source, _ = make_source(make_http_response(payload=payload))

    dishes = source.fetch_dishes(GARCHING, MONDAY)

    assert dishes == [
        Dish(name="Pasta mit Tomatensauce", dish_type="Pasta", labels=("VEGETARIAN", "GLUTEN", "WHEAT")),
        Dish(name="Schweinebraten mit Knödel", dish_type="Hauptgericht", labels=("MEAT", "PORK")),
        Dish(name="Linsendal", dish_type="Studitopf", labels=("VEGAN",)),
    ]


def test_unknown_labels_preserved_verbatim():
    raw = [{"name": "Tofu Bowl", "dish_type": "Aktion", "labels": ["VEGAN", "brand_new_tag"]}]
    source, _ = make_source(make_http_response(payload=make_week_payload({MONDAY: raw})))

    dishes = source.fetch_dishes(GARCHING, MONDAY)

    assert dishes[0].labels == ("VEGAN", "brand_new_tag")


def test_day_without_dishes_is_empty():
    source, _ = make_source(make_http_response(payload=make_week_payload({MONDAY: []})))

    assert source.fetch_dishes(GARCHING, MONDAY) == []


def test_day_missing_from_week_is_empty():
    """Weekends and holidays have no entry in the week file."""
    source, _ = make_source(make_http_response(payload=make_week_payload()))

    assert source.fetch_dishes(GARCHING, date(2026, 10, 24)) == []


def test_missing_week_file_is_empty():
    """eat-api answers 404 for unpublished weeks and unknown canteens alike."""
    source, _ = make_source(make_http_response(status_code=404))

    assert source.fetch_dishes("no-such-canteen", MONDAY) == []


# =============================================================================
# MALFORMED PAYLOADS
# =============================================================================


@pytest.mark.parametrize(
    "raw_dish",
    [
        {"dish_type": "Pasta", "labels": []},
        {"name": "", "dish_type": "Pasta", "labels": []},
        {"name": "Pasta", "labels": []},
        {"name": "Pasta", "dish_type": "Pasta"},
        {"name": 12, "dish_type": "Pasta", "labels": []},
        {"name": "Pasta", "dish_type": "Pasta", "labels": "VEGAN"},
        {"name": "Pasta", "dish_type": "Pasta", "labels": [None]},
        "Pasta",
    ],
)
def test_malformed_dish_fails_closed(raw_dish):
    payload = make_week_payload({MONDAY: [RAW_DISHES[0], raw_dish]})
    source, _ = make_source(make_http_response(payload=payload))

    with pytest.raises(MalformedUpstreamDataError) as exc_info:
        source.fetch_dishes(GARCHING, MONDAY)

    assert exc_info.value.details["index"] == 1
    assert exc_info.value.code == "MALFORMED_UPSTREAM_DATA"


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"weeks": []},
        {"days": "monday"},
        {"days": [{"dishes": []}]},
        {"days": [{"date": "not-a-date", "dishes": []}]},
        {"days": [{"date": "2026-10-19", "dishes": None}]},
    ],
)
def test_malformed_week_fails_closed(payload):
    source, _ = make_source(make_http_response(payload=payload))

    with pytest.raises(MalformedUpstreamDataError):
        source.fetch_dishes(GARCHING, MONDAY)


def test_invalid_json_is_malformed():
    source, _ = make_source(make_http_response(invalid_json=True))

    with pytest.raises(MalformedUpstreamDataError):
        source.fetch_dishes(GARCHING, MONDAY)


# =============================================================================
# TRANSPORT FAILURES
# =============================================================================


def test_timeout_raises_upstream_unavailable():
    source, _ = make_source(requests.Timeout("read timed out"))

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        source.fetch_dishes(GARCHING, MONDAY)

    assert not isinstance(exc_info.value, MalformedUpstreamDataError)
    assert exc_info.value.details["timeout_sec"] == 2.5


def test_connection_error_raises_upstream_unavailable():
    source, _ = make_source(requests.ConnectionError("name resolution failed"))

    with pytest.raises(UpstreamUnavailableError):
        source.fetch_dishes(GARCHING, MONDAY)


@pytest.mark.parametrize("status_code", [403, 500, 502, 503])
def test_error_status_raises_upstream_unavailable(status_code):
    source, _ = make_source(make_http_response(status_code=status_code))

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        source.fetch_dishes(GARCHING, MONDAY)

    assert exc_info.value.details["status_code"] == status_code


def test_trickling_body_past_deadline_raises_upstream_unavailable():
    """
    The timeout bounds the whole call, not only each socket read.

    Verifies:
    - A body that stalls past the deadline raises UpstreamUnavailableError
    - It is not reported as malformed data
    - The call returns soon after the deadline
    - The response is closed
    """
    body = json.dumps(make_week_payload()).encode("utf-8")
    response = make_http_response(chunks=trickling_body(body[:1], 0.3, body[1:]))
    source, _ = make_source(response, timeout=0.05)

    started = time.monotonic()
    with pytest.raises(UpstreamUnavailableError) as exc_info:
        source.fetch_dishes(GARCHING, MONDAY)
    elapsed = time.monotonic() - started

    assert not isinstance(exc_info.value, MalformedUpstreamDataError)
    assert exc_info.value.details["timeout_sec"] == 0.05
    assert elapsed < 1.0
    response.close.assert_called_once()


def test_body_read_error_raises_upstream_unavailable():
    def broken_body():
        yield b'{"days": ['
        raise requests.exceptions.ChunkedEncodingError("connection reset")

    source, _ = make_source(make_http_response(chunks=broken_body()))

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        source.fetch_dishes(GARCHING, MONDAY)

    assert not isinstance(exc_info.value, MalformedUpstreamDataError)


def test_body_read_in_single_bytes():
    response = make_http_response(payload=make_week_payload())
    source, _ = make_source(response)

    source.fetch_dishes(GARCHING, MONDAY)

    response.iter_content.assert_called_once_with(chunk_size=1)
    response.close.assert_called_once()


# =============================================================================
# CANTEEN DIRECTORY
# =============================================================================


def test_list_canteens_maps_directory():
    payload = [
        {
            "canteen_id": "mensa-garching",
            "name": "Mensa Garching",
            "location": {"address": "Boltzmannstraße 19, Garching"},
        },
        {"canteen_id": "mensa-arcisstr", "name": "Mensa Arcisstraße"},
    ]
    source, session = make_source(make_http_response(payload=payload))

    canteens = source.list_canteens()

    session.get.assert_called_once_with(f"{BASE}/enums/canteens.json", timeout=2.5, stream=True)
    assert canteens == [
        Canteen(canteen_id="mensa-garching", name="Mensa Garching"),
        Canteen(canteen_id="mensa-arcisstr", name="Mensa Arcisstraße"),
    ]


def test_list_canteens_rejects_non_list():
    source, _ = make_source(make_http_response(payload={"canteens": []}))

    with pytest.raises(MalformedUpstreamDataError):
        source.list_canteens()


def test_list_canteens_missing_directory_is_unavailable():
    source, _ = make_source(make_http_response(status_code=404))

    with pytest.raises(UpstreamUnavailableError):
        source.list_canteens()
