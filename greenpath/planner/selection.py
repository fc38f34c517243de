"""Explicit selection actions over an immutable SelectionState."""

from __future__ import annotations

from typing import Optional

from greenpath.domain.models import Catalog, SelectionState


def empty_selection(catalog: Optional[Catalog] = None) -> SelectionState:
    if catalog is None:
        return SelectionState()
    return SelectionState(activities={option.id: False for option in catalog.activities})


def _toggle_single(current: Optional[str], option_id: str) -> Optional[str]:
    return None if current == option_id else option_id


def toggle_transport(selection: SelectionState, option_id: str) -> SelectionState:
    """Select ``option_id``, or clear the transport if it is already selected."""
    return selection.model_copy(
        update={"transport_id": _toggle_single(selection.transport_id, option_id)}
    )


def toggle_lodging(selection: SelectionState, option_id: str) -> SelectionState:
    """Select ``option_id``, or clear the lodging if it is already selected."""
    return selection.model_copy(
        update={"lodging_id": _toggle_single(selection.lodging_id, option_id)}
    )


def toggle_activity(selection: SelectionState, activity_id: str) -> SelectionState:
    activities = dict(selection.activities)
    activities[activity_id] = not activities.get(activity_id, False)
    return selection.model_copy(update={"activities": activities})


def has_any_selection(selection: SelectionState, catalog: Optional[Catalog] = None) -> bool:
    """True when anything is selected; with a catalog, unknown activity ids do not count."""
    if selection.transport_id is not None or selection.lodging_id is not None:
        return True
    return any(
        catalog is None or catalog.find_activity(activity_id) is not None
        for activity_id in selection.selected_activity_ids()
    )


__all__ = [
    "empty_selection",
    "has_any_selection",
    "toggle_activity",
    "toggle_lodging",
    "toggle_transport",
]
