from __future__ import annotations

from airnet.network.adjacency import RouteGraph, build_directed_adjacency, build_mirrored_adjacency
from airnet.network.domain_types import Route


def _routes(*pairs: tuple[str, str]) -> list[Route]:
    return [Route(departure_id=u, destination_id=v) for u, v in pairs]


def test_empty_routes_give_empty_adjacency():
    assert build_directed_adjacency([]) == {}
    assert build_mirrored_adjacency([]) == {}


def test_directed_adjacency_keeps_order_and_duplicates():
    routes = _routes(("A", "C"), ("A", "B"), ("B", "A"), ("A", "C"))

    adjacency = build_directed_adjacency(routes)

    assert adjacency == {"A": ["C", "B", "C"], "B": ["A"]}
    assert "C" not in adjacency  # destination-only airports get no entry


def test_mirrored_adjacency_adds_reverse_edges():
    routes = _routes(("A", "B"), ("B", "C"), ("A", "B"))

    adjacency = build_mirrored_adjacency(routes)

    assert adjacency == {"A": ["B", "B"], "B": ["A", "C", "A"], "C": ["B"]}


def test_self_loop_in_mirrored_adjacency_appears_twice():
    adjacency = build_mirrored_adjacency(_routes(("A", "A")))
    assert adjacency == {"A": ["A", "A"]}


def test_route_graph_counts_and_queries():
    graph = RouteGraph.from_routes(_routes(("A1", "A2"), ("A2", "A3"), ("A3", "A4"), ("A1", "A4")))

    assert graph.num_nodes == 4
    assert graph.num_edges == 4
    assert graph.neighbors("A1") == ["A2", "A4"]
    assert graph.neighbors("missing") == []
    assert graph.hops_between("A1", "A3") == 2
    assert graph.hops_between("A4", "A1") is None
