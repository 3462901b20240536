from ..constants import Constants
from ..spanning_tree import DirectedGraphError
from .base import GraphCommand


class MstCommand(GraphCommand):
    name = "mst"
    help = "Print a minimum spanning tree of an undirected graph"

    def __init__(self):
        super().__init__()
        self.method = "prim"
        self.start = None

    @classmethod
    def create_parser(cls, subparsers):
        parser = super().create_parser(subparsers)
        parser.add_argument(
            "--method",
            choices=["prim", "kruskal"],
            help="Prim (default, rooted at --start) or Kruskal (spanning forest)"
        )
        parser.add_argument(
            "--start",
            help="Start vertex for Prim (default: first label in order)"
        )
        return parser

    def parse_args(self, args):
        super().parse_args(args)
        if args.method is not None:
            self.method = args.method
        if args.start is not None:
            self.start = args.start

    def run(self) -> int:
        graph = self.load()
        if graph is None:
            return 1

        if graph.vertex_count() == 0:
            print("Graph is empty")
            return 1

        def print_edge(source: str, target: str, weight: int):
            print(f"{source} -[{weight}]- {target}")

        try:
            if self.method == "kruskal":
                total = graph.mst_kruskal(print_edge)
            else:
                start = self.start
                if start is None:
                    start = graph.labels()[0]
                if not self.require_vertex(graph, start):
                    return 1
                total = graph.mst_prim(start, print_edge)
        except DirectedGraphError as e:
            print(f"{e} (use --undirected)")
            return 1

        if total == Constants.MST_FAILURE:
            print("No spanning tree")
            return 1

        print(f"Total weight: {total}")
        return 0
