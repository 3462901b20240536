"""Depth-first and breadth-first traversal.

Visited state is local to each call, so traversals from different start
vertices never see each other's markers.
"""
import logging
from collections import deque
from typing import TYPE_CHECKING, List, Optional, Set

from .model import VertexVisitor

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def dfs(graph: 'Graph', start: str, visit: Optional[VertexVisitor] = None) -> List[str]:
    """
    Depth-first traversal from start.

    Neighbors are explored in adjacency insertion order. visit is called once
    per newly discovered vertex; the labels are also returned in that order.
    An unknown start yields an empty list and no notifications.
    """
    if not graph.contains(start):
        logger.debug("DFS start %s not in graph", start)
        return []

    order: List[str] = []
    root = graph.index[start]
    visited: Set[int] = {root}
    _discover(graph, root, order, visit)

    # An iterator per open vertex replays the recursive descent without recursion
    stack = [iter(graph.vertices[root].adjacency)]
    while stack:
        for entry in stack[-1]:
            if entry.target not in visited:
                visited.add(entry.target)
                _discover(graph, entry.target, order, visit)
                stack.append(iter(graph.vertices[entry.target].adjacency))
                break
        else:
            stack.pop()

    return order


def bfs(graph: 'Graph', start: str, visit: Optional[VertexVisitor] = None) -> List[str]:
    """
    Breadth-first traversal from start.

    Each dequeued vertex enqueues its own unvisited neighbors in adjacency
    insertion order. Same notification contract as dfs().
    """
    if not graph.contains(start):
        logger.debug("BFS start %s not in graph", start)
        return []

    order: List[str] = []
    root = graph.index[start]
    visited: Set[int] = {root}
    _discover(graph, root, order, visit)

    queue = deque([root])
    while queue:
        current = queue.popleft()
        for entry in graph.vertices[current].adjacency:
            if entry.target not in visited:
                visited.add(entry.target)
                _discover(graph, entry.target, order, visit)
                queue.append(entry.target)

    return order


def _discover(graph: 'Graph', vertex_id: int, order: List[str], visit: Optional[VertexVisitor]):
    label = graph.vertices[vertex_id].label
    order.append(label)
    if visit is not None:
        visit(label)
