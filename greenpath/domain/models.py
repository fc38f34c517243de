"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from greenpath.domain.constants import BASELINE_EMISSION_KG, DEFAULT_START_XP, MAX_XP
from greenpath.domain.enums import ActivityCategory, TransportType
from greenpath.domain.exceptions import UnknownOptionError


class TransportOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    price: float = Field(ge=0)
    emission: float = Field(ge=0)
    time: str = ""
    delta: float = 0.0
    type: TransportType = TransportType.PLANE


class LodgingOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float = Field(ge=0)
    emission: float = Field(ge=0)
    delta: float = 0.0


class ActivityOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: ActivityCategory
    name: str
    fee: float = Field(ge=0)
    emission: float = Field(ge=0)
    hours: str = ""
    delta: float = 0.0


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    dates: list[str] = Field(default_factory=list)
    reward: int = Field(gt=0)


def _duplicate_ids(items: list) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for item in items:
        if item.id in seen and item.id not in dupes:
            dupes.append(item.id)
        seen.add(item.id)
    return dupes


class Catalog(BaseModel):
    """Static, read-only option data for one destination."""

    model_config = ConfigDict(frozen=True)

    destination: str = ""
    baseline_emission: float = Field(default=BASELINE_EMISSION_KG, gt=0)
    transports: list[TransportOption] = Field(default_factory=list)
    lodgings: list[LodgingOption] = Field(default_factory=list)
    activities: list[ActivityOption] = Field(default_factory=list)
    challenges: list[Challenge] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "Catalog":
        for label, items in (
            ("transport", self.transports),
            ("lodging", self.lodgings),
            ("activity", self.activities),
            ("challenge", self.challenges),
        ):
            dupes = _duplicate_ids(items)
            if dupes:
                raise ValueError(f"duplicate {label} ids: {', '.join(dupes)}")
        return self

    def transport(self, option_id: str) -> TransportOption:
        for option in self.transports:
            if option.id == option_id:
                return option
        raise UnknownOptionError("transport", option_id)

    def lodging(self, option_id: str) -> LodgingOption:
        for option in self.lodgings:
            if option.id == option_id:
                return option
        raise UnknownOptionError("lodging", option_id)

    def activity(self, activity_id: str) -> ActivityOption:
        option = self.find_activity(activity_id)
        if option is None:
            raise UnknownOptionError("activity", activity_id)
        return option

    def find_activity(self, activity_id: str) -> Optional[ActivityOption]:
        for option in self.activities:
            if option.id == activity_id:
                return option
        return None

    def challenge(self, challenge_id: str) -> Challenge:
        for challenge in self.challenges:
            if challenge.id == challenge_id:
                return challenge
        raise UnknownOptionError("challenge", challenge_id)

    def activities_in(self, category: ActivityCategory) -> list[ActivityOption]:
        return [option for option in self.activities if option.category == category]


class SelectionState(BaseModel):
    """The user's in-progress trip choices.

    Single selects are tri-state: ``None`` or the id of the chosen option.
    Instances are immutable; selection actions return new states.
    """

    model_config = ConfigDict(frozen=True)

    transport_id: Optional[str] = None
    lodging_id: Optional[str] = None
    activities: dict[str, bool] = Field(default_factory=dict)

    def selected_activity_ids(self) -> list[str]:
        return [activity_id for activity_id, on in self.activities.items() if on]


class AggregateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_emissions: int = 0
    total_price: int = 0
    reduction_percent: int = 0
    carbon_credits: int = 0


class ProgressState(BaseModel):
    model_config = ConfigDict(frozen=True)

    xp: int = Field(default=DEFAULT_START_XP, ge=0, le=MAX_XP)
