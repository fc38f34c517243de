"""Application service holding one user's trip session."""

from __future__ import annotations

from typing import Optional

from greenpath.catalog import default_catalog, load_catalog
from greenpath.config.settings import Settings, log_events_enabled
from greenpath.domain.models import AggregateResult, Catalog, SelectionState
from greenpath.infrastructure.logging import StructuredLogger, get_logger
from greenpath.planner import selection as actions
from greenpath.planner.aggregator import aggregate
from greenpath.planner.progress import ProgressTracker


class TripSession:
    """Owns a SelectionState and a ProgressTracker for a presentation layer.

    Every selection action replaces the state and returns the recomputed
    totals, so the caller always renders fresh numbers.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        *,
        start_xp: Optional[int] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.catalog = catalog or default_catalog()
        self.selection: SelectionState = actions.empty_selection(self.catalog)
        self.progress = ProgressTracker() if start_xp is None else ProgressTracker(start_xp)
        self._logger = logger or get_logger(enabled=log_events_enabled())

    @classmethod
    def from_settings(cls, settings: Settings, *, logger: Optional[StructuredLogger] = None) -> "TripSession":
        catalog = load_catalog(settings.catalog_path) if settings.catalog_path else default_catalog()
        if logger is None:
            logger = get_logger(enabled=settings.log_events)
        return cls(catalog, start_xp=settings.start_xp, logger=logger)

    @property
    def result(self) -> AggregateResult:
        return aggregate(self.selection, self.catalog)

    def _apply(self, name: str, option_id: str, selection: SelectionState) -> AggregateResult:
        self.selection = selection
        result = self.result
        self._logger.action(name, option_id=option_id, **result.model_dump())
        return result

    def select_transport(self, option_id: str) -> AggregateResult:
        self.catalog.transport(option_id)
        return self._apply("toggle_transport", option_id, actions.toggle_transport(self.selection, option_id))

    def select_lodging(self, option_id: str) -> AggregateResult:
        self.catalog.lodging(option_id)
        return self._apply("toggle_lodging", option_id, actions.toggle_lodging(self.selection, option_id))

    def toggle_activity(self, activity_id: str) -> AggregateResult:
        self.catalog.activity(activity_id)
        return self._apply("toggle_activity", activity_id, actions.toggle_activity(self.selection, activity_id))

    def clear(self) -> AggregateResult:
        self.selection = actions.empty_selection(self.catalog)
        result = self.result
        self._logger.action("clear_selection", **result.model_dump())
        return result

    def join_challenge(self, challenge_id: str) -> int:
        challenge = self.catalog.challenge(challenge_id)
        before = self.progress.xp
        xp = self.progress.join_challenge(challenge)
        self._logger.action(
            "join_challenge",
            challenge_id=challenge_id,
            reward=challenge.reward,
            xp=xp,
            capped=before + challenge.reward > xp,
        )
        return xp


__all__ = ["TripSession"]
