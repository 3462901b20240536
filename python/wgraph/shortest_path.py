import heapq
import logging
import math
from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def dijkstra(graph: 'Graph', start: str) -> Tuple[Dict[str, int], Dict[str, str]]:
    """
    Single-source shortest paths.

    Returns (distances, previous): the minimum total weight to every vertex
    reachable from start, and the vertex preceding it on a shortest path.
    The start vertex itself is in neither mapping. Both are empty when start
    is unknown.

    The frontier is a binary heap keyed by (distance, label), so ties are
    settled in label order. Stale heap entries are skipped when popped
    instead of being removed on update. Weights must be non-negative.
    """
    distances: Dict[str, int] = {}
    previous: Dict[str, str] = {}

    if not graph.contains(start):
        logger.debug("Dijkstra start %s not in graph", start)
        return distances, previous

    source = graph.index[start]
    best: List[float] = [math.inf] * graph.vertex_count()
    best[source] = 0
    settled = [False] * graph.vertex_count()

    frontier: List[Tuple[int, str, int]] = [(0, start, source)]
    while frontier:
        dist, label, u = heapq.heappop(frontier)
        if settled[u] or dist > best[u]:
            continue
        settled[u] = True

        for v, weight in graph.vertices[u].adjacency:
            candidate = dist + weight
            if candidate < best[v]:
                best[v] = candidate
                previous[graph.vertices[v].label] = label
                heapq.heappush(frontier, (candidate, graph.vertices[v].label, v))

    for v, dist in enumerate(best):
        if v != source and dist != math.inf:
            distances[graph.vertices[v].label] = dist

    return dict(sorted(distances.items())), dict(sorted(previous.items()))
