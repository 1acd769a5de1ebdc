from __future__ import annotations
from ._exceptions import GraphError

OBSERVED = "observed"
UNOBSERVED = "unobserved"


class _Node:
    """
    A node proxy returned by ``DAG.assume()``. Use ``.causes()`` to assert edges::

        dag.assume("ability").causes("occupation", "wage")
        dag.assume("discrim").causes("occupation", "wage")
    """

    def __init__(self, name: str, dag: DAG) -> None:
        self._name = name
        self._dag = dag

    def causes(self, *effects: str, style: str = OBSERVED) -> _Node:
        """
        Assert that this node causes one or more effects.

        ``style`` is a categorical tag carried on every edge asserted by this
        call. It has no causal meaning; diagram renderers map it to a line
        style (``"unobserved"`` edges are drawn dashed).
        Returns self so you can chain further ``.causes()`` calls.
        """
        for effect in effects:
            self._dag._assert_edge(self._name, effect, style)
        return self


class DAG:
    """
    A directed acyclic graph describing the causal structure behind one
    simulated example.

    Build the graph by calling ``assume().causes()`` for each causal
    relationship. Nodes with no edges (pure noise columns, for instance)
    are declared with ``assume()`` alone.

    Example::

        dag = DAG()
        dag.assume("female").causes("discrim")
        dag.assume("discrim").causes("occupation", "wage")
        dag.assume("ability").causes("occupation", "wage", style="unobserved")
    """

    def __init__(self) -> None:
        self._nodes: list[str] = []
        self._edges: list[tuple[str, str]] = []
        self._styles: dict[tuple[str, str], str] = {}

    # ── Building the graph ────────────────────────────────────────────────────

    def assume(self, node: str) -> _Node:
        """
        Name a node and return it so you can assert what it causes::

            dag.assume("d").causes("y", "x")
        """
        self._add_node(node)
        return _Node(node, self)

    def _add_node(self, node: str) -> None:
        if node not in self._nodes:
            self._nodes.append(node)

    def _assert_edge(self, cause: str, effect: str, style: str = OBSERVED) -> None:
        """Add a directed edge after validating it keeps the graph acyclic."""
        if cause == effect:
            raise GraphError(f"Self-loops are not allowed: '{cause}'")
        if (cause, effect) in self._edges:
            raise GraphError(f"'{cause}' → '{effect}' already asserted")
        self._edges.append((cause, effect))
        if self._has_cycle():
            self._edges.pop()
            raise GraphError(
                f"Asserting '{cause}' → '{effect}' would create a cycle. "
                f"Causal graphs must be acyclic (DAGs)."
            )
        self._add_node(cause)
        self._add_node(effect)
        self._styles[(cause, effect)] = style

    # ── Graph properties ──────────────────────────────────────────────────────

    @property
    def nodes(self) -> list[str]:
        """All nodes in the order they were first named."""
        return list(self._nodes)

    @property
    def edges(self) -> list[tuple[str, str]]:
        """All directed edges as (cause, effect) pairs."""
        return list(self._edges)

    def style(self, cause: str, effect: str) -> str:
        """The style tag of the edge ``cause → effect``."""
        try:
            return self._styles[(cause, effect)]
        except KeyError:
            raise GraphError(f"'{cause}' → '{effect}' is not an edge of this graph") from None

    def parents(self, node: str) -> set[str]:
        """Direct causes of node."""
        return {cause for cause, effect in self._edges if effect == node}

    def children(self, node: str) -> set[str]:
        """Direct effects of node."""
        return {effect for cause, effect in self._edges if cause == node}

    def colliders(self) -> set[str]:
        """Nodes with two or more direct causes."""
        return {n for n in self._nodes if len(self.parents(n)) >= 2}

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _has_cycle(self) -> bool:
        """Kahn's algorithm: returns True if the current edge list contains a cycle."""
        nodes = {n for edge in self._edges for n in edge}
        in_degree: dict[str, int] = {n: 0 for n in nodes}
        for _, effect in self._edges:
            in_degree[effect] += 1

        queue = [n for n, deg in in_degree.items() if deg == 0]
        visited = 0
        while queue:
            node = queue.pop()
            visited += 1
            for child in self.children(node):
                in_degree[child] -= 1
                if in_degree[child] == 0:
                    queue.append(child)

        return visited != len(nodes)

    # ── Display ───────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        if not self._edges:
            return "DAG (empty)"
        lines = ["DAG:"]
        for cause, effect in self._edges:
            tag = self._styles[(cause, effect)]
            suffix = "" if tag == OBSERVED else f"  [{tag}]"
            lines.append(f"  {cause} → {effect}{suffix}")
        return "\n".join(lines)
