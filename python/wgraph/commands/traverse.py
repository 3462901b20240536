from .base import GraphCommand


class TraverseCommand(GraphCommand):
    name = "traverse"
    help = "Print the vertices reachable from a start vertex in discovery order"

    def __init__(self):
        super().__init__()
        self.start = None
        self.method = "dfs"

    @classmethod
    def create_parser(cls, subparsers):
        parser = super().create_parser(subparsers)
        parser.add_argument(
            "start",
            help="Label of the start vertex"
        )
        parser.add_argument(
            "--method",
            choices=["dfs", "bfs"],
            help="Depth-first (default) or breadth-first traversal"
        )
        return parser

    def parse_args(self, args):
        super().parse_args(args)
        self.start = args.start
        if args.method is not None:
            self.method = args.method

    def run(self) -> int:
        graph = self.load()
        if graph is None or not self.require_vertex(graph, self.start):
            return 1

        traverse = graph.dfs if self.method == "dfs" else graph.bfs
        print(" ".join(traverse(self.start)))
        return 0
