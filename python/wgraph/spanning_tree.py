"""Minimum spanning trees for undirected graphs.

Both algorithms treat a mirrored pair (P, Q, w) / (Q, P, w) as a single
edge of weight w. Prim is rooted and spans the start vertex's component
only; Kruskal spans every component and so builds a minimum spanning
forest.
"""
import heapq
import logging
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from .constants import Constants
from .disjoint_set import DisjointSet
from .model import EdgeVisitor

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


class DirectedGraphError(Exception):
    """Exception raised when a spanning tree is requested on a directed graph."""
    pass


def mst_prim(graph: 'Graph', start: str, visit: Optional[EdgeVisitor] = None) -> int:
    """
    Prim's algorithm rooted at start.

    visit(tree_vertex, new_vertex, weight) is called for each tree edge in
    the order it joins the tree. Frontier ties are broken by target label,
    then source label. Returns the total tree weight, or
    Constants.MST_FAILURE if start is unknown.
    """
    _require_undirected(graph)

    if not graph.contains(start):
        logger.debug("Prim start %s not in graph", start)
        return Constants.MST_FAILURE

    root = graph.index[start]
    in_tree: Set[int] = {root}
    frontier: List[Tuple[int, str, str, int]] = []

    def extend(u: int):
        source = graph.vertices[u].label
        for v, weight in graph.vertices[u].adjacency:
            if v not in in_tree:
                heapq.heappush(frontier, (weight, graph.vertices[v].label, source, v))

    extend(root)
    total = 0
    while frontier:
        weight, target, source, v = heapq.heappop(frontier)
        if v in in_tree:
            continue
        in_tree.add(v)
        total += weight
        if visit is not None:
            visit(source, target, weight)
        extend(v)

    return total


def mst_kruskal(graph: 'Graph', visit: Optional[EdgeVisitor] = None) -> int:
    """
    Kruskal's algorithm over the whole graph.

    Edges are taken in ascending weight, ties in insertion order, and kept
    unless both endpoints are already connected. visit is called for each
    kept edge in that order. Returns the total forest weight, or
    Constants.MST_FAILURE for a graph without vertices.
    """
    _require_undirected(graph)

    if graph.vertex_count() == 0:
        logger.debug("Kruskal on an empty graph")
        return Constants.MST_FAILURE

    # sorted() is stable, so equal weights keep insertion order
    candidates = sorted(graph.logical_edges(), key=lambda e: e.weight)
    forest = DisjointSet(graph.index)

    total = 0
    for e in candidates:
        if not forest.union(e.source, e.target):
            continue
        total += e.weight
        if visit is not None:
            visit(e.source, e.target, e.weight)
        if len(forest) == 1:
            break

    return total


def _require_undirected(graph: 'Graph'):
    if graph.is_directed:
        raise DirectedGraphError("Minimum spanning trees require an undirected graph")
