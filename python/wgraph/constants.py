import os


class Constants:
    # Returned by vertex_degree() for an unknown label
    NOT_FOUND = -1

    # Returned by the spanning tree algorithms when there is nothing to span
    MST_FAILURE = -1

    # Separator between neighbor entries in edges_as_text()
    EDGE_SEPARATOR = ","

    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
    LOG_LEVEL = os.environ.get("WGRAPH_LOG_LEVEL", "WARNING").upper()
