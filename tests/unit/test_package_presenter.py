"""Package summary presentation."""

from __future__ import annotations

import io

from greenpath.infrastructure.logging import StructuredLogger
from greenpath.services.package_presenter import (
    format_currency,
    format_reduction,
    present_package,
    render_package,
)
from greenpath.services.trip_service import TripSession


def _session(**kwargs) -> TripSession:
    return TripSession(logger=StructuredLogger(output=io.StringIO(), enabled=False), **kwargs)


def test_format_currency():
    assert format_currency(340) == "$340 USD"
    assert format_currency(1234.5) == "$1,235 USD"
    assert format_currency(0) == "$0 USD"


def test_format_reduction():
    assert format_reduction(-56) == "-56% CO₂"
    assert format_reduction(12) == "12% CO₂"


def test_empty_package_payload():
    payload = present_package(_session())

    assert payload["credits_label"] == "0 carbon credits earned"
    assert payload["price_label"] == "$0 USD"
    assert payload["reduction_label"] == "0% CO₂"
    assert payload["reduction_tone"] == "good"
    assert payload["transport"]["title"] == "No flight selected"
    assert payload["lodging"]["title"] == "No hotel selected"
    assert payload["activities"] == []
    assert payload["xp"] == 950
    assert payload["progress_percent"] == 95.0
    assert payload["promotion_message"].startswith("50 XP left to get 10 carbon credits")


def test_selected_package_payload():
    session = _session()
    session.select_transport("t2")
    session.select_lodging("h1")
    session.toggle_activity("r1")

    payload = present_package(session)

    assert payload["credits_label"] == "168 carbon credits earned"
    assert payload["price_label"] == "$340 USD"
    assert payload["reduction_label"] == "-56% CO₂"
    assert payload["footprint_label"] == "172 kg"
    assert payload["transport"]["emission"] == "125 kg CO₂ / ride"
    assert payload["lodging"]["detail"] == "$150 USD / day"
    assert payload["lodging"]["emission"] == "40 kg CO₂ / day"
    assert payload["activities"] == ["Best Pho Viet Nam"]
    assert payload["totals"]["carbon_credits"] == 168


def test_above_baseline_payload_is_flagged():
    session = _session()
    session.select_transport("t3")
    session.select_lodging("h2")
    # lower baseline so the selection sits above it
    session.catalog = session.catalog.model_copy(update={"baseline_emission": 100.0})

    payload = present_package(session)

    assert payload["reduction_label"] == "88% CO₂"
    assert payload["reduction_tone"] == "bad"
    assert payload["credits_label"] == "0 carbon credits earned"


def test_render_package_text():
    session = _session(start_xp=1000)
    session.select_transport("t2")

    text = render_package(session)

    assert "Ho Chi Minh City, Vietnam" in text
    assert "Flight: Plane to Manila — Vietnam Airlines" in text
    assert "Hotel: No hotel selected" in text
    assert "XP: 1000 (100.0%)" in text
    assert "0 XP left" in text
