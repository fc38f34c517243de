"""Domain package exports."""

from greenpath.domain.constants import (
    BASELINE_EMISSION_KG,
    CREDITS_PER_REDUCTION_POINT,
    DEFAULT_START_XP,
    MAX_REDUCTION_PERCENT,
    MAX_XP,
    PROMOTION_CREDIT_BONUS,
    PROMOTION_THRESHOLD,
)
from greenpath.domain.enums import ActivityCategory, TransportType
from greenpath.domain.exceptions import CatalogError, DomainError, InvalidArgument, UnknownOptionError
from greenpath.domain.models import (
    ActivityOption,
    AggregateResult,
    Catalog,
    Challenge,
    LodgingOption,
    ProgressState,
    SelectionState,
    TransportOption,
)

__all__ = [
    "ActivityCategory",
    "ActivityOption",
    "AggregateResult",
    "Catalog",
    "CatalogError",
    "Challenge",
    "DomainError",
    "InvalidArgument",
    "LodgingOption",
    "ProgressState",
    "SelectionState",
    "TransportOption",
    "TransportType",
    "UnknownOptionError",
    "BASELINE_EMISSION_KG",
    "CREDITS_PER_REDUCTION_POINT",
    "DEFAULT_START_XP",
    "MAX_REDUCTION_PERCENT",
    "MAX_XP",
    "PROMOTION_CREDIT_BONUS",
    "PROMOTION_THRESHOLD",
]
