from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx
import pandas as pd

from ..dag import DAG, UNOBSERVED

_LINE_STYLES = {UNOBSERVED: "dashed"}
_NODE_COLOR = "lightblue"
_COLLIDER_COLOR = "salmon"
_MARKERS = ["o", "^", "s", "D", "v", "P"]


def to_networkx(dag: DAG) -> nx.DiGraph:
    """Copy the DAG into a networkx graph, keeping edge styles as a ``style`` attribute."""
    graph = nx.DiGraph()
    graph.add_nodes_from(dag.nodes)
    for cause, effect in dag.edges:
        graph.add_edge(cause, effect, style=dag.style(cause, effect))
    return graph


def draw_dag(dag: DAG, ax=None, pos: dict | None = None, title: str | None = None):
    """
    Draw the causal graph. Colliders (nodes with two or more causes) are
    shaded apart from the other nodes. Edges tagged ``"unobserved"`` are
    dashed, all other tags solid. ``pos`` maps node names to (x, y); when
    omitted a seeded spring layout is used so repeated calls give the same
    picture.
    Returns the matplotlib axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))
    graph = to_networkx(dag)
    if pos is None:
        pos = nx.spring_layout(graph, seed=0)

    colliders = dag.colliders()
    colors = [_COLLIDER_COLOR if n in colliders else _NODE_COLOR for n in graph.nodes]
    nx.draw_networkx_nodes(graph, pos, ax=ax, node_color=colors, node_size=900)
    nx.draw_networkx_labels(graph, pos, ax=ax, font_size=10)
    for tag in sorted({s for _, _, s in graph.edges(data="style")}):
        edges = [(u, v) for u, v, s in graph.edges(data="style") if s == tag]
        nx.draw_networkx_edges(
            graph, pos, edgelist=edges, ax=ax,
            style=_LINE_STYLES.get(tag, "solid"),
            arrows=True, arrowsize=15, node_size=900,
        )
    if title:
        ax.set_title(title)
    ax.set_axis_off()
    return ax


def draw_scatter(
    points: pd.DataFrame,
    x: str,
    y: str,
    marker: str | None = None,
    line: tuple[float, float] | None = None,
    ax=None,
    title: str | None = None,
):
    """
    Scatter ``y`` against ``x`` with one marker shape per category of
    ``marker`` and an optional reference line given as ``(intercept, slope)``.
    Returns the matplotlib axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    if marker is None:
        ax.scatter(points[x], points[y], s=4)
    else:
        for i, (category, group) in enumerate(points.groupby(marker, sort=True)):
            ax.scatter(
                group[x], group[y], s=4,
                marker=_MARKERS[i % len(_MARKERS)],
                label=f"{marker} = {category}",
            )
        ax.legend(loc="upper right")

    if line is not None:
        intercept, slope = line
        ax.axline((0.0, intercept), slope=slope, color="black", linewidth=1)

    ax.set_xlabel(x)
    ax.set_ylabel(y)
    if title:
        ax.set_title(title)
    return ax
