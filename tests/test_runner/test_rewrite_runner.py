# tests/test_runner/test_rewrite_runner.py
import io
import unittest
from contextlib import redirect_stdout
from fractions import Fraction

from zxrewrite.graph.graph_s import GraphS
from zxrewrite.rewrite_runner import (RULE_REGISTRY, Stats, list_available_rules,
                                      run_rewrite, run_rewrites)
from zxrewrite.utils import EdgeType, VertexType


def make_chain():
    """
    B -- Z(1/4) -- Z(1/2) -- Z -- B, with a Hadamard edge into the last spider
    """
    g = GraphS()
    b0 = g.add_vertex(VertexType.BOUNDARY)
    z0 = g.add_vertex(VertexType.Z, phase=Fraction(1, 4))
    z1 = g.add_vertex(VertexType.Z, phase=Fraction(1, 2))
    z2 = g.add_vertex(VertexType.Z)
    b1 = g.add_vertex(VertexType.BOUNDARY)
    g.add_edge((b0, z0))
    g.add_edge((z0, z1))
    g.add_edge((z1, z2), EdgeType.HADAMARD)
    g.add_edge((z2, b1), EdgeType.HADAMARD)
    g.set_inputs([b0])
    g.set_outputs([b1])
    return g, (b0, z0, z1, z2, b1)


class TestRunRewrite(unittest.TestCase):
    def setUp(self):
        self.g, self.vs = make_chain()

    def test_unknown_rule(self):
        with self.assertRaises(ValueError) as ctx:
            run_rewrite(self.g, "bialgebra", 1, 2)
        self.assertIn("Unknown rewrite rule: 'bialgebra'", str(ctx.exception))

    def test_wrong_arity(self):
        with self.assertRaises(TypeError):
            run_rewrite(self.g, "spider_fusion", self.vs[1])
        with self.assertRaises(TypeError):
            run_rewrite(self.g, "remove_id", self.vs[1], self.vs[2])

    def test_applied(self):
        _, z0, z1, _, _ = self.vs
        applied, elapsed = run_rewrite(self.g, "spider_fusion", z0, z1)
        self.assertTrue(applied)
        self.assertIsInstance(elapsed, float)
        self.assertFalse(self.g.contains_vertex(z1))
        self.assertEqual(self.g.phase(z0), Fraction(3, 4))

    def test_not_applicable(self):
        before = self.g.snapshot()
        applied, elapsed = run_rewrite(self.g, "local_comp", self.vs[3], measure_time=False)
        self.assertFalse(applied)
        self.assertIsNone(elapsed)
        self.assertEqual(self.g.snapshot(), before)

    def test_stats(self):
        stats = Stats()
        _, z0, z1, z2, _ = self.vs
        run_rewrite(self.g, "spider_fusion", z0, z1, stats=stats)
        run_rewrite(self.g, "spider_fusion", z0, z1, stats=stats)
        run_rewrite(self.g, "color_change", z2, stats=stats)
        self.assertEqual(stats.num_rewrites, {"spider_fusion": 1, "color_change": 1})

        s = str(stats)
        self.assertTrue(s.startswith("REWRITES\n"))
        self.assertIn("     1 spider_fusion", s)
        self.assertTrue(s.endswith("     2 TOTAL"))

    def test_prints_when_not_quiet(self):
        _, z0, z1, _, _ = self.vs
        out = io.StringIO()
        with redirect_stdout(out):
            run_rewrite(self.g, "spider_fusion", z0, z1, quiet=False, measure_time=False)
        self.assertEqual(out.getvalue(), f"Rule 'spider_fusion' at [{z0}, {z1}]: applied\n")

    def test_quiet_by_default(self):
        out = io.StringIO()
        with redirect_stdout(out):
            run_rewrite(self.g, "remove_id", self.vs[3])
        self.assertEqual(out.getvalue(), "")


class TestRunRewrites(unittest.TestCase):
    def setUp(self):
        self.g, self.vs = make_chain()

    def test_sequence(self):
        _, z0, z1, z2, _ = self.vs
        stats = Stats()
        results = run_rewrites(
            self.g,
            [("spider_fusion", [z0, z1]), ("spider_fusion", (z0, z1)), ("remove_id", (z2,))],
            quiet=True,
            stats=stats,
        )
        self.assertEqual([r["applied"] for r in results], [True, False, True])
        self.assertTrue(all(r["success"] for r in results))
        self.assertEqual(results[0]["vertices"], (z0, z1))
        self.assertEqual(results[1]["rule"], "spider_fusion")
        self.assertEqual(stats.num_rewrites, {"spider_fusion": 1, "remove_id": 1})
        self.assertEqual(self.g.num_vertices(), 3)

    def test_errors_are_collected(self):
        _, z0, z1, _, _ = self.vs
        results = run_rewrites(
            self.g,
            [("nonexistent", (z0,)), ("spider_fusion", (z0, z1))],
            quiet=True,
            measure_time=False,
        )
        self.assertFalse(results[0]["success"])
        self.assertFalse(results[0]["applied"])
        self.assertIn("nonexistent", results[0]["error"])
        self.assertTrue(results[1]["success"])
        self.assertTrue(results[1]["applied"])
        self.assertIsNone(results[1]["elapsed_sec"])
        self.assertNotIn("error", results[1])

    def test_progress_output(self):
        _, z0, z1, _, _ = self.vs
        out = io.StringIO()
        with redirect_stdout(out):
            run_rewrites(self.g, [("spider_fusion", (z0, z1))])
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "Running 1 rewrite steps on Graph(5 vertices, 4 edges)...")
        self.assertEqual(lines[-1], "Completed: 1/1 steps, 1 rewrites applied")


class TestListRules(unittest.TestCase):
    def test_list_available_rules(self):
        rules = list_available_rules()
        self.assertEqual(rules, list(RULE_REGISTRY))
        self.assertIn("gen_pivot_reduce", rules)
        self.assertEqual(len(rules), 15)
        for name in rules:
            self.assertIn(RULE_REGISTRY[name].arity, (1, 2))
