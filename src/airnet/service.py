"""High-level API that runs the full connectivity analysis.

:class:`ConnectivityService` takes a caller-owned airport table and the route
list, fills in both degree counters, summarises the two degree distributions
and builds the directed graph used for hop-count queries.

.. code-block:: python

    from airnet.config import AnalysisConfig
    from airnet.service import ConnectivityService

    config = AnalysisConfig.from_yaml("config/analysis.yaml")
    result = ConnectivityService.from_config(config).run()
    print(result.degree_stats.mean, result.degree2_stats.median)
    print(result.shortest_hops("3682", "3830").describe())

The airport mapping passed in is updated in place. Each ``run()`` starts from
zeroed counters, so nothing carries over between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, MutableMapping, Sequence

from airnet.config import AnalysisConfig
from airnet.data.loaders import load_airports, load_routes
from airnet.network.adjacency import RouteGraph, build_mirrored_adjacency
from airnet.network.degrees import (
    HUB_DEGREE_THRESHOLD,
    calculate_degree2,
    degree_map,
    reset_degrees,
    update_degrees,
)
from airnet.network.domain_types import Airport, Route
from airnet.network.shortest_path import HopQuery
from airnet.stats.degree_statistics import (
    PERCENTILE_THRESHOLDS,
    DegreeStatistics,
    calculate_statistics,
)

logger = logging.getLogger(__name__)


@dataclass
class ConnectivityResult:
    """Bundle returned by :meth:`ConnectivityService.run`."""

    airports: MutableMapping[str, Airport]
    hubs: Dict[str, Airport]
    degree_stats: DegreeStatistics
    degree2_stats: DegreeStatistics
    graph: RouteGraph = field(default_factory=RouteGraph)

    def shortest_hops(self, source_id: str, destination_id: str) -> HopQuery:
        return self.graph.query(source_id, destination_id)


class ConnectivityService:
    def __init__(
        self,
        airports: MutableMapping[str, Airport],
        routes: Sequence[Route],
        *,
        hub_threshold: int = HUB_DEGREE_THRESHOLD,
        thresholds: Sequence[int] = PERCENTILE_THRESHOLDS,
    ) -> None:
        self.airports = airports
        self.routes: List[Route] = list(routes)
        self.hub_threshold = int(hub_threshold)
        self.thresholds = list(thresholds)

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "ConnectivityService":
        if not config.airports_csv or not config.routes_csv:
            raise ValueError("Both airports_csv and routes_csv must be configured")
        return cls(
            load_airports(config.airports_csv),
            load_routes(config.routes_csv),
            hub_threshold=config.hub_threshold,
            thresholds=config.percentile_thresholds,
        )

    def run(self) -> ConnectivityResult:
        logger.info(
            "Analysing %d airports connected by %d routes", len(self.airports), len(self.routes)
        )
        reset_degrees(self.airports)
        hubs = update_degrees(self.airports, self.routes, hub_threshold=self.hub_threshold)
        degree_stats = calculate_statistics(degree_map(self.airports, "degree"), self.thresholds)

        mirrored = build_mirrored_adjacency(self.routes)
        calculate_degree2(self.airports, mirrored)
        degree2_stats = calculate_statistics(degree_map(self.airports, "degree2"), self.thresholds)

        graph = RouteGraph.from_routes(self.routes)
        logger.info("Route graph has %d nodes and %d edges", graph.num_nodes, graph.num_edges)
        return ConnectivityResult(
            airports=self.airports,
            hubs=hubs,
            degree_stats=degree_stats,
            degree2_stats=degree2_stats,
            graph=graph,
        )
