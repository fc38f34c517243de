"""Challenge XP progression."""

from __future__ import annotations

from greenpath.domain.constants import DEFAULT_START_XP, MAX_XP, PROMOTION_THRESHOLD
from greenpath.domain.exceptions import InvalidArgument
from greenpath.domain.models import Challenge, ProgressState


class ProgressTracker:
    """Accumulates XP from completed challenges, capped at ``max_xp``."""

    def __init__(
        self,
        start_xp: int = DEFAULT_START_XP,
        *,
        max_xp: int = MAX_XP,
        promotion_threshold: int = PROMOTION_THRESHOLD,
    ):
        if promotion_threshold <= 0:
            raise InvalidArgument(f"promotion threshold must be positive, got {promotion_threshold}")
        if not 0 <= start_xp <= max_xp:
            raise InvalidArgument(f"start xp must be within [0, {max_xp}], got {start_xp}")
        self._xp = int(start_xp)
        self.max_xp = max_xp
        self.promotion_threshold = promotion_threshold

    @property
    def xp(self) -> int:
        return self._xp

    @property
    def state(self) -> ProgressState:
        return ProgressState(xp=self._xp)

    def add_xp(self, amount: int) -> int:
        if amount < 0:
            raise InvalidArgument(f"xp reward must be non-negative, got {amount}")
        self._xp = min(self.max_xp, self._xp + int(amount))
        return self._xp

    def join_challenge(self, challenge: Challenge) -> int:
        return self.add_xp(challenge.reward)

    def progress_fraction(self) -> float:
        return min(1.0, self._xp / self.promotion_threshold)

    def xp_remaining_to_promotion(self) -> int:
        return max(0, self.promotion_threshold - self._xp)

    def is_promoted(self) -> bool:
        return self._xp >= self.promotion_threshold


__all__ = ["ProgressTracker"]
