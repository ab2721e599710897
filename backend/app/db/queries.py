"""Route ranking helpers."""

from typing import Literal

from backend.app.models.route import Route

SortField = Literal["created_date", "upvotes", "views", "sites", "cost"]
SortOrder = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = ("created_date", "upvotes", "views", "sites", "cost")
SORT_ORDERS: tuple[str, ...] = ("asc", "desc")


def rank_routes(
    routes: list[Route], sort_by: str = "upvotes", order: str = "desc"
) -> list[Route]:
    """Return a sorted copy of routes.

    Args:
        routes: Routes to rank (not modified)
        sort_by: One of created_date, upvotes, views, sites, cost
        order: "asc" or "desc"

    Returns:
        New list sorted by the requested field; ties keep input order

    Raises:
        ValueError: If sort_by or order is not supported
    """
    if sort_by not in SORT_FIELDS:
        raise ValueError(f"unsupported sort field: {sort_by}")
    if order not in SORT_ORDERS:
        raise ValueError(f"unsupported sort order: {order}")

    return sorted(routes, key=lambda r: getattr(r, sort_by), reverse=order == "desc")
