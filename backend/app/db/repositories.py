"""Repository protocol interfaces for generated route data."""

from typing import Protocol

from backend.app.models.route import Route
from backend.app.models.timeline import TimelineDay


class RouteRepository(Protocol):
    """Append-only collection of generated routes.

    Implementations must tolerate concurrent appends without corrupting the
    collection. No ordering guarantee is made across concurrent submissions.
    """

    def append(self, route: Route) -> None:
        """Append a route.

        Args:
            route: Route to store
        """
        ...

    def all(self) -> list[Route]:
        """Snapshot of all stored routes.

        Returns:
            New list; mutating it does not affect the repository
        """
        ...

    def get(self, route_id: str) -> Route | None:
        """Get the most recently appended route with this id.

        Args:
            route_id: Route ID

        Returns:
            Route or None if not found
        """
        ...


class TimelineRepository(Protocol):
    """Timelines keyed by route id."""

    def save(self, route_id: str, timeline: list[TimelineDay]) -> None:
        """Store (or replace) the timeline for a route.

        Args:
            route_id: Route ID
            timeline: Day-by-day plan
        """
        ...

    def get(self, route_id: str) -> list[TimelineDay] | None:
        """Get timeline for a route.

        Args:
            route_id: Route ID

        Returns:
            Timeline or None if not found
        """
        ...
