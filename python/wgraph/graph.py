import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import Constants
from .loader import load_edge_list
from .model import Adjacency, Edge, EdgeVisitor, Vertex, VertexVisitor
from . import shortest_path, spanning_tree, traversal

logger = logging.getLogger(__name__)


class Graph():
    """
    Weighted graph with vertices stored in an arena.

    Vertices live in `vertices` and are addressed by their position in it;
    `index` maps a label to that position. Adjacency entries refer to
    neighbors by position, edge records by label. In undirected mode every
    edge is stored twice, once per direction, with the same weight.
    """

    def __init__(
        self,
        directed: bool = True,
        edges: Optional[Iterable[Edge]] = None,
        vertices: Optional[Iterable[str]] = None
    ):
        self._directed = directed

        self.vertices: List[Vertex] = []
        self.index: Dict[str, int] = {}
        self.edges: Dict[Tuple[str, str], Edge] = {}

        if vertices:
            for label in vertices:
                self.add(label)

        if edges:
            for e in edges:
                self.connect(e.source, e.target, e.weight)

    @property
    def is_directed(self) -> bool:
        return self._directed

    def __contains__(self, label: str) -> bool:
        return self.contains(label)

    def __str__(self) -> str:
        arrow = "->" if self._directed else "-"
        lines = ""
        for e in sorted(self.logical_edges(), key=lambda e: (e.source, e.target)):
            lines += f"{e.source} -[{e.weight}]{arrow} {e.target}\n"
        return lines

    def latex(
        self,
        radius: float = 1.5
    ) -> str:

        """Generate LaTeX representation of the graph using TikZ.

        Args:
            radius: Radius of the circle on which vertices are arranged (default: 1.5)
        """
        options = "->,>=Stealth," if self._directed else ""
        latex_str = f"\\begin{{tikzpicture}}[{options}shorten >=1pt,auto,node distance=3cm, thick,main node/.style={{circle,draw,font=\\sffamily\\Large\\bfseries}}]\n"

        # Vertices on a circle, in label order
        labels = self.labels()
        for i, label in enumerate(labels):
            angle = 360 * i / len(labels)
            x = radius * math.cos(math.radians(angle))
            y = radius * math.sin(math.radians(angle))
            latex_str += f"\\node[main node] ({self.index[label]}) at ({x:.2f},{y:.2f}) {{$ {label} $}};\n"

        for e in self.logical_edges():
            latex_str += f"\\path ({self.index[e.source]}) edge node {{{e.weight}}} ({self.index[e.target]});\n"

        latex_str += "\\end{tikzpicture}\n"
        return latex_str

    def add(self, label: str) -> bool:
        """Add a vertex without edges. Returns False if the label is taken."""
        if label in self.index:
            logger.debug("Vertex %s already exists", label)
            return False

        self.index[label] = len(self.vertices)
        self.vertices.append(Vertex(id=len(self.vertices), label=label))
        return True

    def contains(self, label: str) -> bool:
        return label in self.index

    def has_edge(self, source: str, target: str) -> bool:
        """Check if an edge exists from source to target, whatever its weight."""
        return (source, target) in self.edges

    def weight(self, source: str, target: str) -> Optional[int]:
        e = self.edges.get((source, target))
        return e.weight if e is not None else None

    def connect(self, source: str, target: str, weight: int = 0) -> bool:
        """
        Add an edge, creating missing endpoint vertices.

        In undirected mode the mirrored edge is added as well. Returns False
        and leaves the graph unchanged for self-loops, duplicate edges and
        negative weights.
        """
        if source == target:
            logger.debug("Rejected self-loop on %s", source)
            return False

        if weight < 0:
            logger.debug("Rejected negative weight %d on %s -> %s", weight, source, target)
            return False

        if self.has_edge(source, target):
            logger.debug("Edge from %s to %s already exists", source, target)
            return False

        self._link(source, target, weight)
        if not self._directed:
            self._link(target, source, weight)
        return True

    def disconnect(self, source: str, target: str) -> bool:
        """Remove an edge (and its mirror in undirected mode)."""
        if source == target or not self.has_edge(source, target):
            logger.debug("No edge from %s to %s to remove", source, target)
            return False

        self._unlink(source, target)
        if not self._directed:
            self._unlink(target, source)
        return True

    def clear(self):
        """Release all vertices and edges."""
        self.edges.clear()
        self.index.clear()
        for v in self.vertices:
            v.adjacency.clear()
        self.vertices.clear()

    def vertex_count(self) -> int:
        """Return number of vertices."""
        return len(self.vertices)

    def edge_count(self) -> int:
        """Return number of directed edge records (mirrors count twice)."""
        return len(self.edges)

    def vertex_degree(self, label: str) -> int:
        """Return the out-degree of a vertex, or Constants.NOT_FOUND."""
        vertex = self.vertex(label)
        if vertex is None:
            return Constants.NOT_FOUND
        return vertex.degree()

    def vertex(self, label: str) -> Optional[Vertex]:
        i = self.index.get(label)
        return self.vertices[i] if i is not None else None

    def labels(self) -> List[str]:
        return sorted(self.index)

    def neighbors(self, label: str) -> List[Tuple[str, int]]:
        """Return (neighbor, weight) pairs in insertion order."""
        vertex = self.vertex(label)
        if vertex is None:
            return []
        return [(self.vertices[a.target].label, a.weight) for a in vertex.adjacency]

    def edges_as_text(self, label: str) -> Optional[str]:
        """
        Render the outgoing edges of a vertex as "b(10),c(20),d(40)".

        Neighbors are ordered by label. Returns None for an unknown label
        and an empty string for a vertex without outgoing edges.
        """
        if not self.contains(label):
            return None
        entries = sorted(self.neighbors(label))
        return Constants.EDGE_SEPARATOR.join(f"{n}({w})" for n, w in entries)

    def read_file(self, path) -> bool:
        return load_edge_list(self, path)

    def dfs(self, start: str, visit: Optional[VertexVisitor] = None) -> List[str]:
        return traversal.dfs(self, start, visit)

    def bfs(self, start: str, visit: Optional[VertexVisitor] = None) -> List[str]:
        return traversal.bfs(self, start, visit)

    def dijkstra(self, start: str) -> Tuple[Dict[str, int], Dict[str, str]]:
        return shortest_path.dijkstra(self, start)

    def mst_prim(self, start: str, visit: Optional[EdgeVisitor] = None) -> int:
        return spanning_tree.mst_prim(self, start, visit)

    def mst_kruskal(self, visit: Optional[EdgeVisitor] = None) -> int:
        return spanning_tree.mst_kruskal(self, visit)

    def logical_edges(self) -> List[Edge]:
        """
        Return the edges once each, in insertion order.

        In undirected mode only the first stored direction of each mirrored
        pair is kept.
        """
        if self._directed:
            return list(self.edges.values())
        seen = set()
        result = []
        for (source, target), e in self.edges.items():
            if (target, source) in seen:
                continue
            seen.add((source, target))
            result.append(e)
        return result

    def _link(self, source: str, target: str, weight: int):
        for label in (source, target):
            if label not in self.index:
                self.add(label)
        self.edges[(source, target)] = Edge(source, target, weight)
        self.vertices[self.index[source]].adjacency.append(
            Adjacency(self.index[target], weight)
        )

    def _unlink(self, source: str, target: str):
        del self.edges[(source, target)]
        vertex = self.vertices[self.index[source]]
        target_id = self.index[target]
        vertex.adjacency = [a for a in vertex.adjacency if a.target != target_id]
