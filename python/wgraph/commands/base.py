from typing import Optional

from ..graph import Graph


class GraphCommand:
    """Common arguments and edge-list loading for the subcommands."""

    name: str = None
    help: str = None

    def __init__(self):
        self.file = None
        self.undirected = False

    @classmethod
    def create_parser(cls, subparsers):
        parser = subparsers.add_parser(cls.name, help=cls.help)
        parser.add_argument(
            "file",
            help="Edge-list file: an edge count, then one 'from to weight' line per edge"
        )
        parser.add_argument(
            "--undirected",
            action="store_true",
            dest="undirected",
            help="Treat every edge as undirected"
        )
        return parser

    def parse_args(self, args):
        self.file = args.file
        if hasattr(args, "undirected") and args.undirected is not None:
            self.undirected = args.undirected

    def load(self) -> Optional[Graph]:
        graph = Graph(directed=not self.undirected)
        if not graph.read_file(self.file):
            print(f"Could not load {self.file}")
            return None
        return graph

    def require_vertex(self, graph: Graph, label: str) -> bool:
        if not graph.contains(label):
            print(f"Vertex {label} not in graph")
            return False
        return True
