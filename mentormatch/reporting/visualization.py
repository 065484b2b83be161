"""
Visualization for the Mentor Matching System.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, TYPE_CHECKING

import networkx as nx
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from ..matching.allocator import AllocationDecision


def build_allocation_graph(decisions: Sequence["AllocationDecision"]) -> nx.Graph:
    """
    Bipartite graph of one batch:
    - every mentee is a node (bipartite=0), matched or not
    - every assigned mentor is a node (bipartite=1)
    - one edge per assignment, carrying the 0..100 score
    """
    G = nx.Graph()
    for d in decisions:
        G.add_node(d.mentee.id, bipartite=0, urgency=d.mentee.urgency)
        if d.match is None:
            continue
        mentor_id = d.match.mentor.id
        if mentor_id not in G:
            G.add_node(mentor_id, bipartite=1)
        G.add_edge(d.mentee.id, mentor_id, score=float(d.match.score))
    return G


def show_allocation_graph(decisions: Sequence["AllocationDecision"]) -> None:
    """Draw mentees (left) against their assigned mentors (right)."""
    G = build_allocation_graph(decisions)
    mentee_ids = [n for n, a in G.nodes(data=True) if a.get("bipartite") == 0]
    mentor_ids = [n for n, a in G.nodes(data=True) if a.get("bipartite") == 1]

    if not mentee_ids:
        print("\n(No mentees to display.)")
        return

    pos: Dict[str, Tuple[float, float]] = {}
    for i, nid in enumerate(mentee_ids):
        pos[nid] = (0.0, float(i))
    for j, nid in enumerate(sorted(mentor_ids)):
        pos[nid] = (1.0, float(j))

    edges: List[Tuple[str, str]] = list(G.edges())
    edge_labels = {(u, v): f"{G[u][v]['score']:.1f}" for u, v in edges}
    unmatched = [n for n in mentee_ids if G.degree(n) == 0]

    plt.figure(figsize=(9, 6))
    nx.draw_networkx_nodes(G, pos, nodelist=[n for n in mentee_ids if n not in unmatched],
                           node_color="lightblue", node_size=900)
    nx.draw_networkx_nodes(G, pos, nodelist=unmatched, node_color="lightgray", node_size=900)
    nx.draw_networkx_nodes(G, pos, nodelist=mentor_ids, node_color="lightgreen", node_size=900)
    nx.draw_networkx_labels(G, pos, font_size=8)
    nx.draw_networkx_edges(G, pos, edgelist=edges, edge_color="gray")
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)
    plt.title("Mentee allocation (gray nodes: unmatched)")
    plt.axis("off")
    plt.tight_layout()
    plt.show()
