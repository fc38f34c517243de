"""Presentation helpers for the trip package summary."""

from __future__ import annotations

from typing import Any

from greenpath.domain.constants import PROMOTION_CREDIT_BONUS
from greenpath.planner.aggregator import round_half_up
from greenpath.services.trip_service import TripSession

_NO_TRANSPORT = "No flight selected"
_NO_LODGING = "No hotel selected"


def format_currency(amount: float) -> str:
    return f"${round_half_up(amount):,} USD"


def format_reduction(reduction_percent: int) -> str:
    return f"{reduction_percent}% CO₂"


def _transport_block(session: TripSession) -> dict[str, Any]:
    transport_id = session.selection.transport_id
    if transport_id is None:
        return {"title": _NO_TRANSPORT, "detail": "", "emission": ""}
    option = session.catalog.transport(transport_id)
    return {
        "title": option.title,
        "detail": option.time,
        "emission": f"{option.emission:g} kg CO₂ / ride",
    }


def _lodging_block(session: TripSession) -> dict[str, Any]:
    lodging_id = session.selection.lodging_id
    if lodging_id is None:
        return {"title": _NO_LODGING, "detail": "", "emission": ""}
    option = session.catalog.lodging(lodging_id)
    return {
        "title": option.name,
        "detail": f"{format_currency(option.price)} / day",
        "emission": f"{option.emission:g} kg CO₂ / day",
    }


def present_package(session: TripSession) -> dict[str, Any]:
    """Build the display payload for the package screen and progress card."""
    result = session.result
    progress = session.progress
    activities = [
        session.catalog.find_activity(activity_id)
        for activity_id in session.selection.selected_activity_ids()
    ]
    remaining = progress.xp_remaining_to_promotion()
    return {
        "destination": session.catalog.destination,
        "credits_label": f"{result.carbon_credits} carbon credits earned",
        "price_label": format_currency(result.total_price),
        "reduction_label": format_reduction(result.reduction_percent),
        "reduction_tone": "good" if result.reduction_percent <= 0 else "bad",
        "footprint_label": f"{result.total_emissions} kg",
        "transport": _transport_block(session),
        "lodging": _lodging_block(session),
        "activities": [option.name for option in activities if option is not None],
        "xp": progress.xp,
        "progress_percent": round(progress.progress_fraction() * 100, 1),
        "promotion_message": (
            f"{remaining} XP left to get {PROMOTION_CREDIT_BONUS} carbon credits "
            "& be promoted to Eco‑Warrior Rank"
        ),
        "totals": result.model_dump(),
    }


def render_package(session: TripSession) -> str:
    payload = present_package(session)
    lines: list[str] = []
    if payload["destination"]:
        lines.append(payload["destination"])
    lines.append("PACKAGE")
    lines.append("=" * 40)
    lines.append(
        f"{payload['credits_label']}  |  {payload['price_label']}  |  {payload['reduction_label']}"
    )
    lines.append("-" * 40)
    for heading, block in (("Flight", payload["transport"]), ("Hotel", payload["lodging"])):
        lines.append(f"{heading}: {block['title']}")
        detail = "  ".join(part for part in (block["detail"], block["emission"]) if part)
        if detail:
            lines.append(f"  {detail}")
    if payload["activities"]:
        lines.append("Activities: " + ", ".join(payload["activities"]))
    lines.append(f"Trip footprint: {payload['footprint_label']}")
    lines.append("-" * 40)
    lines.append(f"XP: {payload['xp']} ({payload['progress_percent']}%)")
    lines.append(payload["promotion_message"])
    return "\n".join(lines)


__all__ = ["format_currency", "format_reduction", "present_package", "render_package"]
