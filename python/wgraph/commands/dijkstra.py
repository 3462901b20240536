from .base import GraphCommand


class DijkstraCommand(GraphCommand):
    name = "dijkstra"
    help = "Print shortest distances and predecessors from a start vertex"

    def __init__(self):
        super().__init__()
        self.start = None

    @classmethod
    def create_parser(cls, subparsers):
        parser = super().create_parser(subparsers)
        parser.add_argument(
            "start",
            help="Label of the source vertex"
        )
        return parser

    def parse_args(self, args):
        super().parse_args(args)
        self.start = args.start

    def run(self) -> int:
        graph = self.load()
        if graph is None or not self.require_vertex(graph, self.start):
            return 1

        distances, previous = graph.dijkstra(self.start)
        for label, distance in distances.items():
            print(f"{label}: {distance} (via {previous[label]})")
        return 0
