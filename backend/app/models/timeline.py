"""Timeline models - day-by-day plan for a generated route."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.common import TransitMode

ACTIVITIES_PER_DAY = 3
LEGS_PER_DAY = 2


class Activity(BaseModel):
    """Single scheduled stop within a day."""

    model_config = ConfigDict(frozen=True)

    name: str
    time_slot: str
    description: str


class TransportLeg(BaseModel):
    """Transportation between stops."""

    model_config = ConfigDict(frozen=True)

    type: TransitMode
    duration_minutes: Annotated[int, Field(gt=0)]
    distance: str


class TimelineDay(BaseModel):
    """One synthesized day: fixed three stops and two legs."""

    model_config = ConfigDict(frozen=True)

    title: str
    sites: Annotated[
        tuple[Activity, ...], Field(min_length=ACTIVITIES_PER_DAY, max_length=ACTIVITIES_PER_DAY)
    ]
    transportation: Annotated[
        tuple[TransportLeg, ...], Field(min_length=LEGS_PER_DAY, max_length=LEGS_PER_DAY)
    ]

    @property
    def activities(self) -> tuple[Activity, ...]:
        return self.sites

    @property
    def transportation_legs(self) -> tuple[TransportLeg, ...]:
        return self.transportation
