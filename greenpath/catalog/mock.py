"""Mock demo catalog for a Ho Chi Minh City trip."""

from __future__ import annotations

from functools import lru_cache

from greenpath.domain.constants import BASELINE_EMISSION_KG
from greenpath.domain.enums import ActivityCategory, TransportType
from greenpath.domain.models import (
    ActivityOption,
    Catalog,
    Challenge,
    LodgingOption,
    TransportOption,
)

DESTINATION = "Ho Chi Minh City, Vietnam"

TRANSPORTS = [
    TransportOption(
        id="t1",
        title="Plane to HCM — Cebu Pacific",
        time="6 AM – 8:30 AM (2.5 hrs)",
        price=219,
        emission=115,
        delta=-7.8,
        type=TransportType.PLANE,
    ),
    TransportOption(
        id="t2",
        title="Plane to Manila — Vietnam Airlines",
        time="8 AM – 10:30 AM (2.5 hrs)",
        price=178,
        emission=125,
        delta=-11.7,
        type=TransportType.PLANE,
    ),
    TransportOption(
        id="t3",
        title="E‑Van Rental — VINFAST",
        time="Daily rental",
        price=100,
        emission=132,
        delta=-5,
        type=TransportType.VAN,
    ),
]

LODGINGS = [
    LodgingOption(id="h1", name="New World Saigon Hotel", price=150, emission=40, delta=-25.92),
    LodgingOption(id="h2", name="Grand Hyatt Saigon", price=180, emission=56, delta=3.7),
]

# fee: fixed per-selection charge, independent of emission
ACTIVITIES = [
    ActivityOption(
        id="s1",
        category=ActivityCategory.SHOP,
        name="Vietnamese Coffee – Ben Thanh",
        hours="10 AM – 8 PM",
        fee=10,
        emission=8.0,
        delta=-20,
    ),
    ActivityOption(
        id="s2",
        category=ActivityCategory.SHOP,
        name="Walking Street – Vietnam Brands",
        hours="10 AM – 8 PM",
        fee=8,
        emission=7.0,
        delta=-30,
    ),
    ActivityOption(
        id="r1",
        category=ActivityCategory.RESTAURANT,
        name="Best Pho Viet Nam",
        hours="6 PM – 10 PM",
        fee=12,
        emission=7.2,
        delta=-10,
    ),
    ActivityOption(
        id="r2",
        category=ActivityCategory.RESTAURANT,
        name="Local Eatery",
        hours="11 AM – 9 PM",
        fee=15,
        emission=8.2,
        delta=2.5,
    ),
]

CHALLENGES = [
    Challenge(id="c1", title="No‑Waste Hike Challenge", dates=["MAR 8", "MAR 29"], reward=1000),
    Challenge(
        id="c2",
        title="River Clean‑Up Challenge",
        dates=["MAR 3", "MAR 10", "MAR 24", "MAR 17"],
        reward=500,
    ),
    Challenge(
        id="c3",
        title="Urban Cultural Tours",
        dates=["MAR 4", "MAR 25", "MAR 11", "MAR 18"],
        reward=50,
    ),
]


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    return Catalog(
        destination=DESTINATION,
        baseline_emission=BASELINE_EMISSION_KG,
        transports=TRANSPORTS,
        lodgings=LODGINGS,
        activities=ACTIVITIES,
        challenges=CHALLENGES,
    )


__all__ = ["DESTINATION", "default_catalog"]
