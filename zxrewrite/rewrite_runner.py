"""
Rewrite Runner for ZX-diagram rewrite rules

Apply the rules of :mod:`zxrewrite.basic_rules` by name to a diagram held in
any backend (in-memory or Neo4j), with:
- Run individual rewrites or a sequence of (rule, vertices) steps
- Performance timing for each rewrite
- Result collection and statistics

The runner never decides where a rule should be applied; every step names
the vertices explicitly.

Example usage:
    from zxrewrite.graph.graph_s import GraphS
    from zxrewrite.rewrite_runner import run_rewrite, run_rewrites

    g = GraphS()
    ...

    # Run a single rule
    applied, elapsed = run_rewrite(g, "spider_fusion", v0, v1)

    # Run multiple steps
    results = run_rewrites(
        g,
        [("remove_id", (v2,)), ("local_comp", (v3,))],
    )
"""

__all__ = [
    'RuleEntry',
    'RULE_REGISTRY',
    'Stats',
    'list_available_rules',
    'run_rewrite',
    'run_rewrites',
]

import time
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from . import basic_rules as rules
from .graph.base import RewriteGraph


class RuleEntry(NamedTuple):
    check: Callable[..., bool]
    unchecked: Callable[..., None]
    arity: int


RULE_REGISTRY: Dict[str, RuleEntry] = {
    'spider_fusion': RuleEntry(rules.check_spider_fusion, rules.spider_fusion_unchecked, 2),
    'pi_copy': RuleEntry(rules.check_pi_copy, rules.pi_copy_unchecked, 1),
    'remove_id': RuleEntry(rules.check_remove_id, rules.remove_id_unchecked, 1),
    'color_change': RuleEntry(rules.check_color_change, rules.color_change_unchecked, 1),
    'local_comp': RuleEntry(rules.check_local_comp, rules.local_comp_unchecked, 1),
    'pivot': RuleEntry(rules.check_pivot, rules.pivot_unchecked, 2),
    'gen_pivot': RuleEntry(rules.check_gen_pivot, rules.gen_pivot_unchecked, 2),
    'gen_pivot_reduce': RuleEntry(rules.check_gen_pivot_reduce, rules.gen_pivot_unchecked, 2),
    'boundary_pivot': RuleEntry(rules.check_boundary_pivot, rules.gen_pivot_unchecked, 2),
    'h_boundary_pivot': RuleEntry(rules.check_h_boundary_pivot, rules.gen_pivot_unchecked, 2),
    'boundary_local_comp': RuleEntry(rules.check_boundary_local_comp,
                                     rules.boundary_local_comp_unchecked, 2),
    'gadget_fusion': RuleEntry(rules.check_gadget_fusion, rules.gadget_fusion_unchecked, 2),
    'remove_single': RuleEntry(rules.check_remove_single, rules.remove_single_unchecked, 1),
    'remove_pair': RuleEntry(rules.check_remove_pair, rules.remove_pair_unchecked, 2),
    'remove_duplicate': RuleEntry(rules.check_remove_duplicate, rules.remove_duplicate_unchecked, 2),
}


class Stats:
    """Statistics tracker for rewrite operations."""

    def __init__(self) -> None:
        self.num_rewrites: Dict[str, int] = {}

    def count_rewrites(self, rule: str, n: int) -> None:
        """Record that n rewrites of the given rule were applied."""
        if rule in self.num_rewrites:
            self.num_rewrites[rule] += n
        else:
            self.num_rewrites[rule] = n

    def __str__(self) -> str:
        s = "REWRITES\n"
        nt = 0
        for r, n in self.num_rewrites.items():
            nt += n
            s += "%s %s\n" % (str(n).rjust(6), r)
        s += "%s TOTAL" % str(nt).rjust(6)
        return s


def list_available_rules() -> List[str]:
    """
    List all available rewrite rule names.

    Returns:
        List of rule names that can be used with run_rewrite()
    """
    return list(RULE_REGISTRY.keys())


def run_rewrite(
    g: RewriteGraph,
    rule_name: str,
    *vertices: Any,
    measure_time: bool = True,
    quiet: bool = True,
    stats: Optional[Stats] = None,
) -> Tuple[bool, Optional[float]]:
    """
    Apply a single named rewrite rule at the given vertices, if it applies.

    Args:
        g: The diagram to rewrite, in any backend
        rule_name: Name of the rewrite rule (e.g., 'spider_fusion')
        vertices: The vertex handles the rule acts on
        measure_time: If True, measure and return execution time
        quiet: If False, print execution details
        stats: If given, record the applied rewrite in it

    Returns:
        Tuple of (applied, elapsed_seconds) where:
        - applied: Whether the check held and the rewrite was performed
        - elapsed_seconds: Execution time (or None if measure_time=False)

    Raises:
        ValueError: If rule_name is not a known rule
        TypeError: If the number of vertices doesn't match the rule

    Example:
        applied, elapsed = run_rewrite(g, "pivot", v0, v1)
        print(f"Pivot applied: {applied} in {elapsed:.3f}s")
    """
    if rule_name not in RULE_REGISTRY:
        raise ValueError(
            f"Unknown rewrite rule: '{rule_name}'. "
            f"Available rules: {list_available_rules()}"
        )

    entry = RULE_REGISTRY[rule_name]
    if len(vertices) != entry.arity:
        raise TypeError(
            f"Rule '{rule_name}' takes {entry.arity} vertices, got {len(vertices)}"
        )

    start = time.perf_counter() if measure_time else 0.0

    applied = entry.check(g, *vertices)
    if applied:
        entry.unchecked(g, *vertices)

    elapsed = (time.perf_counter() - start) if measure_time else None

    if applied and stats is not None:
        stats.count_rewrites(rule_name, 1)

    if not quiet:
        status = "applied" if applied else "not applicable"
        print(f"Rule '{rule_name}' at {list(vertices)}: {status}", end="")
        if elapsed is not None:
            print(f" ({elapsed:.3f}s)")
        else:
            print()

    return (applied, elapsed)


def run_rewrites(
    g: RewriteGraph,
    steps: Sequence[Tuple[str, Sequence[Any]]],
    measure_time: bool = True,
    quiet: bool = False,
    stats: Optional[Stats] = None,
) -> List[Dict[str, Any]]:
    """
    Apply a sequence of (rule_name, vertices) steps to a diagram, in order.

    A step whose vertices were removed by an earlier step is simply
    reported as not applied.

    Args:
        g: The diagram to rewrite
        steps: List of (rule_name, vertices) pairs
        measure_time: If True, measure execution time for each step
        quiet: If False, print progress information
        stats: If given, record every applied rewrite in it

    Returns:
        List of dictionaries with keys:
        - 'rule': Rule name
        - 'vertices': The vertices the rule was asked to act on
        - 'applied': Whether the rewrite was performed
        - 'elapsed_sec': Execution time (or None if measure_time=False)
        - 'success': True if execution succeeded
        - 'error': The error message, only when success is False

    Example:
        results = run_rewrites(g, [("remove_id", (3,)), ("pi_copy", (5,))])

        for r in results:
            print(f"{r['rule']} {r['vertices']}: {r['applied']}")
    """
    if not quiet:
        print(f"Running {len(steps)} rewrite steps on {g}...")

    results = []
    for rule_name, vertices in steps:
        vs = tuple(vertices)
        try:
            applied, elapsed = run_rewrite(
                g,
                rule_name,
                *vs,
                measure_time=measure_time,
                quiet=quiet,
                stats=stats,
            )
            results.append({
                "rule": rule_name,
                "vertices": vs,
                "applied": applied,
                "elapsed_sec": elapsed,
                "success": True,
            })
        except Exception as e:
            if not quiet:
                print(f"Error running rule '{rule_name}': {e}")
            results.append({
                "rule": rule_name,
                "vertices": vs,
                "applied": False,
                "elapsed_sec": None,
                "success": False,
                "error": str(e),
            })

    if not quiet:
        successful = sum(1 for r in results if r.get("success") is True)
        applied_count = sum(1 for r in results if r["applied"])
        print(f"Completed: {successful}/{len(steps)} steps, {applied_count} rewrites applied")

    return results
