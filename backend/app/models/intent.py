"""Intent models - structured interpretation of a free-text travel query."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_TRIP_DAYS = 1
MAX_TRIP_DAYS = 14


class TravelIntent(BaseModel):
    """Destination, trip length and interest tags derived from a query."""

    model_config = ConfigDict(frozen=True)

    destination: Annotated[str, Field(min_length=1)]
    days: Annotated[int, Field(ge=MIN_TRIP_DAYS, le=MAX_TRIP_DAYS)]
    interests: Annotated[tuple[str, ...], Field(min_length=1)]
    raw_query: str

    @field_validator("destination")
    @classmethod
    def validate_destination_not_blank(cls, v: str) -> str:
        """Ensure destination carries more than whitespace."""
        if not v.strip():
            raise ValueError("destination must not be blank")
        return v

    @property
    def city(self) -> str:
        """City portion of the destination (before the comma)."""
        return city_of(self.destination)


def city_of(destination: str) -> str:
    """Return the city part of a "City, Country" destination."""
    return destination.split(",")[0].strip()
