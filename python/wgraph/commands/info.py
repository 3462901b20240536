from .base import GraphCommand


class InfoCommand(GraphCommand):
    name = "info"
    help = "Print vertex and edge counts and the edges of every vertex"

    def __init__(self):
        super().__init__()
        self.latex = False

    @classmethod
    def create_parser(cls, subparsers):
        parser = super().create_parser(subparsers)
        parser.add_argument(
            "--latex",
            action="store_true",
            dest="latex",
            help="Output the graph in LaTeX (TikZ) format"
        )
        return parser

    def parse_args(self, args):
        super().parse_args(args)
        if hasattr(args, "latex") and args.latex is not None:
            self.latex = args.latex

    def run(self) -> int:
        graph = self.load()
        if graph is None:
            return 1

        if self.latex:
            print(graph.latex())
            return 0

        mode = "directed" if graph.is_directed else "undirected"
        print(f"Graph ({mode}): {graph.vertex_count()} vertices, {graph.edge_count()} edges")
        for label in graph.labels():
            print(f"{label} [{graph.vertex_degree(label)}]: {graph.edges_as_text(label)}")
        return 0
