"""CSV loaders and report writers for airport/route datasets."""

from .loaders import AIRPORT_COLUMNS, ROUTE_COLUMNS, load_airports, load_routes
from .reports import DEFAULT_RANKING_FILENAME, rank_airports, write_degree_ranking

__all__ = [
    "AIRPORT_COLUMNS",
    "DEFAULT_RANKING_FILENAME",
    "ROUTE_COLUMNS",
    "load_airports",
    "load_routes",
    "rank_airports",
    "write_degree_ranking",
]
