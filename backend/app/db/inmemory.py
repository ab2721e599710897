"""In-memory implementations of repository interfaces."""

import threading

from backend.app.models.route import Route
from backend.app.models.timeline import TimelineDay


class InMemoryRouteRepository:
    """In-memory implementation of RouteRepository."""

    def __init__(self, routes: list[Route] | None = None) -> None:
        self._routes: list[Route] = list(routes) if routes else []
        self._lock = threading.Lock()

    def append(self, route: Route) -> None:
        """Append a route."""
        with self._lock:
            self._routes.append(route)

    def all(self) -> list[Route]:
        """Snapshot of all stored routes."""
        with self._lock:
            return list(self._routes)

    def get(self, route_id: str) -> Route | None:
        """Get the most recently appended route with this id."""
        with self._lock:
            # Ids can collide; the latest append wins
            for route in reversed(self._routes):
                if route.id == route_id:
                    return route
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)


class InMemoryTimelineRepository:
    """In-memory implementation of TimelineRepository."""

    def __init__(self) -> None:
        self._timelines: dict[str, list[TimelineDay]] = {}
        self._lock = threading.Lock()

    def save(self, route_id: str, timeline: list[TimelineDay]) -> None:
        """Store (or replace) the timeline for a route."""
        with self._lock:
            self._timelines[route_id] = list(timeline)

    def get(self, route_id: str) -> list[TimelineDay] | None:
        """Get timeline for a route."""
        with self._lock:
            timeline = self._timelines.get(route_id)
        return list(timeline) if timeline is not None else None
