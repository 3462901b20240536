import importlib
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from wgraph import constants
from wgraph.constants import Constants
from wgraph.script import Script

DATA = Path(__file__).parent / "data"
GRAPH0 = str(DATA / "graph0.txt")
GRAPH1 = str(DATA / "graph1.txt")

class ScriptTest(unittest.TestCase):
    def run_script(self, *argv: str):
        out = io.StringIO()
        with redirect_stdout(out):
            status = Script().run(list(argv))
        return status, out.getvalue()

    def test_info(self):
        status, out = self.run_script("info", GRAPH0)
        self.assertEqual(status, 0)
        self.assertIn("Graph (directed): 3 vertices, 3 edges", out)
        self.assertIn("A [2]: B(1),C(8)", out)
        self.assertIn("C [0]: \n", out)

    def test_info_latex(self):
        status, out = self.run_script("info", GRAPH0, "--undirected", "--latex")
        self.assertEqual(status, 0)
        self.assertIn("\\begin{tikzpicture}", out)

    def test_traverse(self):
        status, out = self.run_script("traverse", GRAPH1, "A")
        self.assertEqual(status, 0)
        self.assertEqual(out, "A B C D E F G H\n")

        status, out = self.run_script("traverse", GRAPH1, "A", "--method", "bfs")
        self.assertEqual(status, 0)
        self.assertEqual(out, "A B H C G D E F\n")

    def test_traverse_unknown_start(self):
        status, out = self.run_script("traverse", GRAPH1, "X")
        self.assertEqual(status, 1)
        self.assertIn("Vertex X not in graph", out)

    def test_dijkstra(self):
        status, out = self.run_script("dijkstra", GRAPH0, "A")
        self.assertEqual(status, 0)
        self.assertEqual(out, "B: 1 (via A)\nC: 4 (via B)\n")

    def test_mst_prim(self):
        status, out = self.run_script("mst", GRAPH0, "--undirected", "--start", "C")
        self.assertEqual(status, 0)
        self.assertEqual(out, "C -[3]- B\nB -[1]- A\nTotal weight: 4\n")

    def test_mst_kruskal(self):
        status, out = self.run_script("mst", GRAPH0, "--undirected", "--method", "kruskal")
        self.assertEqual(status, 0)
        self.assertEqual(out, "A -[1]- B\nB -[3]- C\nTotal weight: 4\n")

    def test_mst_directed_fails(self):
        status, out = self.run_script("mst", GRAPH0)
        self.assertEqual(status, 1)
        self.assertIn("undirected", out)

    def test_missing_file(self):
        status, out = self.run_script("--log-level", "ERROR", "info", str(DATA / "missing.txt"))
        self.assertEqual(status, 1)
        self.assertIn("Could not load", out)

    def test_no_command(self):
        status, _ = self.run_script()
        self.assertEqual(status, 2)

    def test_mst_empty_graph(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.txt"
            path.write_text("0\n", encoding="utf-8")
            for method in ("prim", "kruskal"):
                with self.subTest(method=method):
                    status, out = self.run_script("mst", str(path), "--undirected", "--method", method)
                    self.assertEqual(status, 1)
                    self.assertEqual(out, "Graph is empty\n")

    def test_log_level_flag_is_case_insensitive(self):
        status, _ = self.run_script("--log-level", "error", "dijkstra", GRAPH0, "A")
        self.assertEqual(status, 0)

    def test_log_level_default_from_environment(self):
        for level in ("debug", "Info", "ERROR"):
            with self.subTest(level=level):
                with mock.patch.object(Constants, "LOG_LEVEL", level):
                    status, out = self.run_script("traverse", GRAPH0, "A")
                self.assertEqual(status, 0)
                self.assertEqual(out, "A B C\n")

    def test_environment_level_is_uppercased(self):
        with mock.patch.dict(os.environ, {"WGRAPH_LOG_LEVEL": "debug"}):
            reloaded = importlib.reload(constants)
        self.addCleanup(importlib.reload, constants)
        self.assertEqual(reloaded.Constants.LOG_LEVEL, "DEBUG")

    def test_invalid_log_level_from_environment(self):
        with mock.patch.object(Constants, "LOG_LEVEL", "verbose"):
            with redirect_stderr(io.StringIO()) as err:
                with self.assertRaises(SystemExit) as cm:
                    self.run_script("info", GRAPH0)
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("invalid log level", err.getvalue())

    def test_invalid_log_level_flag(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                self.run_script("--log-level", "loud", "info", GRAPH0)
        self.assertEqual(cm.exception.code, 2)

if __name__ == "__main__":
    unittest.main()
