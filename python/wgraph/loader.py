import logging
import re
from typing import TYPE_CHECKING, List

from .model import Edge

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)

# ASCII digits only; weights may carry a minus sign
COUNT = re.compile(r"[0-9]+")
WEIGHT = re.compile(r"-?[0-9]+")


class EdgeListFormatError(Exception):
    """Exception raised when an edge-list file does not follow the expected format."""
    pass


def parse_edge_list(text: str) -> List[Edge]:
    """Parse the contents of an edge-list file.

    The first line holds the number of edges N, each of the next N lines
    holds "from to weight". Blank lines are ignored.

    Example:
        3
        A B 1
        A C 8
        B C 3
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise EdgeListFormatError("Missing edge count")

    if not COUNT.fullmatch(lines[0]):
        raise EdgeListFormatError(f"Invalid edge count: {lines[0]}")
    count = int(lines[0])

    body = lines[1:]
    if len(body) < count:
        raise EdgeListFormatError(f"Expected {count} edges, found {len(body)}")
    if len(body) > count:
        logger.warning("Ignoring %d lines after the %d announced edges", len(body) - count, count)

    edges = []
    for number, line in enumerate(body[:count], start=2):
        tokens = line.split()
        if len(tokens) != 3:
            raise EdgeListFormatError(f"Line {number}: expected 'from to weight', got '{line}'")
        source, target, weight = tokens
        if not WEIGHT.fullmatch(weight):
            raise EdgeListFormatError(f"Line {number}: invalid weight '{weight}'")
        edges.append(Edge(source, target, int(weight)))

    return edges


def read_edge_list(path) -> List[Edge]:
    with open(path, encoding="utf-8") as f:
        return parse_edge_list(f.read())


def load_edge_list(graph: 'Graph', path) -> bool:
    """
    Load an edge-list file into graph through connect().

    The file is parsed completely before the graph is touched, so a failed
    load leaves it unchanged. Edges rejected by connect() are skipped.
    """
    try:
        edges = read_edge_list(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to open %s: %s", path, e)
        return False
    except EdgeListFormatError as e:
        logger.error("Failed to parse %s: %s", path, e)
        return False

    added = sum(1 for e in edges if graph.connect(e.source, e.target, e.weight))
    if added < len(edges):
        logger.debug("Skipped %d rejected edges from %s", len(edges) - added, path)
    logger.info("Loaded %d edges from %s", added, path)
    return True
