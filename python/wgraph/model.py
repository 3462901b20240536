from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple

# visit(label)
VertexVisitor = Callable[[str], None]

# visit(source, target, weight)
EdgeVisitor = Callable[[str, str, int], None]


class Adjacency(NamedTuple):
    """Outgoing edge as seen from its source vertex."""
    target: int
    weight: int


@dataclass
class Vertex:
    id: int
    label: str
    adjacency: List[Adjacency] = field(default_factory=list)

    def degree(self) -> int:
        return len(self.adjacency)


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: int = field(default=0)

    def __str__(self) -> str:
        return f"{self.source} --[{self.weight}]--> {self.target}"
