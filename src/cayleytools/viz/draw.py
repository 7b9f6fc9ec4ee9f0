from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex

from cayleytools.graph.cayley import CayleyGraph


def cayley_layout(graph: CayleyGraph, seed: int = 7):
    """
    Circular layout for cyclic graphs (one generator), otherwise
    spring_layout on the underlying simple graph.
    """
    H = nx.Graph(graph.nx_graph)
    if graph.degree == 1:
        return nx.circular_layout(sorted(H.nodes))
    return nx.spring_layout(H, seed=seed, iterations=300)


def draw_cayley_graph(
    graph: CayleyGraph,
    *,
    seed: int = 7,
    ax=None,
    node_size: int = 300,
    with_labels: bool = True,
    save_path: str | None = None,
):
    """
    Draw a Cayley graph, one edge color per generator.

    If ax is None a new figure is created. If save_path is set the figure is
    saved as PNG and closed. Returns the Axes.
    """
    G = graph.nx_graph
    pos = cayley_layout(graph, seed=seed)

    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(f"Cayley graph  |G|={graph.order}  generators={graph.degree}")

    cmap = plt.get_cmap("tab10")
    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_size, node_color="white", edgecolors="black")
    if with_labels:
        nx.draw_networkx_labels(G, pos, ax=ax, font_size=8)
    for g in range(graph.degree):
        edges = [(u, v) for u, v, k in G.edges(keys=True) if k == g]
        nx.draw_networkx_edges(
            G,
            pos,
            edgelist=edges,
            ax=ax,
            edge_color=to_hex(cmap(g % 10)),
            arrows=True,
            connectionstyle=f"arc3,rad={0.1 * (g + 1)}",
            node_size=node_size,
        )

    if save_path:
        if fig is None:
            fig = ax.figure
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    return ax
