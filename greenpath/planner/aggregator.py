"""Trip footprint aggregation.

Every function here is a pure view over a ``SelectionState`` and a
``Catalog``: nothing is cached, so callers recompute after each selection
action and display whatever comes back.
"""

from __future__ import annotations

import math

from greenpath.domain.constants import CREDITS_PER_REDUCTION_POINT, MAX_REDUCTION_PERCENT
from greenpath.domain.models import AggregateResult, Catalog, SelectionState
from greenpath.planner.selection import has_any_selection


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +infinity."""
    whole = math.floor(value)
    return int(whole) + 1 if value - whole >= 0.5 else int(whole)


def _selected_activities(selection: SelectionState, catalog: Catalog):
    # Unknown ids in the toggle map are ignored.
    for activity_id in selection.selected_activity_ids():
        option = catalog.find_activity(activity_id)
        if option is not None:
            yield option


def compute_total_emissions(selection: SelectionState, catalog: Catalog) -> int:
    total = 0.0
    if selection.transport_id is not None:
        total += catalog.transport(selection.transport_id).emission
    if selection.lodging_id is not None:
        total += catalog.lodging(selection.lodging_id).emission
    for option in _selected_activities(selection, catalog):
        total += option.emission
    return round_half_up(total)


def compute_total_price(selection: SelectionState, catalog: Catalog) -> int:
    total = 0.0
    if selection.transport_id is not None:
        total += catalog.transport(selection.transport_id).price
    if selection.lodging_id is not None:
        total += catalog.lodging(selection.lodging_id).price
    for option in _selected_activities(selection, catalog):
        total += option.fee
    return round_half_up(total)


def compute_reduction_percent(selection: SelectionState, catalog: Catalog) -> int:
    """Signed percent difference of the selection's emissions from the baseline.

    An empty selection reports 0. The result never drops below -100 and has
    no upper bound.
    """
    if not has_any_selection(selection, catalog):
        return 0
    baseline = catalog.baseline_emission
    total = compute_total_emissions(selection, catalog)
    return max(MAX_REDUCTION_PERCENT, round_half_up(((total - baseline) / baseline) * 100))


def compute_carbon_credits(reduction_percent: int) -> int:
    """Only reductions below the baseline earn credits."""
    earned = max(0, -reduction_percent) * CREDITS_PER_REDUCTION_POINT
    return max(0, round_half_up(earned))


def aggregate(selection: SelectionState, catalog: Catalog) -> AggregateResult:
    reduction = compute_reduction_percent(selection, catalog)
    return AggregateResult(
        total_emissions=compute_total_emissions(selection, catalog),
        total_price=compute_total_price(selection, catalog),
        reduction_percent=reduction,
        carbon_credits=compute_carbon_credits(reduction),
    )


__all__ = [
    "aggregate",
    "compute_carbon_credits",
    "compute_reduction_percent",
    "compute_total_emissions",
    "compute_total_price",
    "round_half_up",
]
