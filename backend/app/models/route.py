"""Route models - the synthesized, user-facing travel plan record."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.app.models.intent import MAX_TRIP_DAYS, MIN_TRIP_DAYS
from backend.app.models.timeline import TimelineDay


class RouteUser(BaseModel):
    """Placeholder author profile attached to generated routes."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    avatar: str


class Route(BaseModel):
    """Generated route in its wire shape."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    location: str
    days: Annotated[int, Field(ge=MIN_TRIP_DAYS, le=MAX_TRIP_DAYS)]
    sites: Annotated[int, Field(ge=0)]
    cost: Annotated[int, Field(gt=0)]
    upvotes: int = 0
    views: int = 0
    created_date: datetime
    user: RouteUser
    interests: str
    query: str


class GeneratedRoute(BaseModel):
    """Route together with its day-by-day timeline."""

    model_config = ConfigDict(frozen=True)

    route: Route
    timeline: list[TimelineDay]

    @model_validator(mode="after")
    def validate_timeline_matches_days(self) -> "GeneratedRoute":
        """Ensure there is exactly one timeline day per route day."""
        if len(self.timeline) != self.route.days:
            raise ValueError(
                f"timeline has {len(self.timeline)} days, route has {self.route.days}"
            )
        return self
