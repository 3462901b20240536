from .info import InfoCommand
from .traverse import TraverseCommand
from .dijkstra import DijkstraCommand
from .mst import MstCommand

COMMANDS = [InfoCommand, TraverseCommand, DijkstraCommand, MstCommand]
