from .model import Vertex, Edge, Adjacency
from .graph import Graph
from .disjoint_set import DisjointSet
from .loader import EdgeListFormatError, load_edge_list, read_edge_list
from .spanning_tree import DirectedGraphError
