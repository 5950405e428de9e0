"""Social network among households."""

import networkx as nx
import numpy as np

from .agents import Household
from .sampling import sample_without_replacement


def build_peer_network(households: list[Household], degree: int,
                       rng: np.random.Generator) -> nx.Graph:
    """Link each household to up to ``degree`` distinct random others.

    Households are visited in random order. Each one links to households
    that are not yet neighbours and still have spare degree, so the graph
    is undirected, free of self-loops and duplicate edges, and no node
    exceeds ``degree``. Late households may end up with fewer links when
    the remaining candidates are exhausted.

    Returns the graph (nodes are household ids) after writing each
    household's ``peers`` list.
    """
    graph = nx.Graph()
    graph.add_nodes_from(h.id for h in households)
    by_id = {h.id: h for h in households}

    for household in sample_without_replacement(households, len(households), rng):
        missing = degree - graph.degree[household.id]
        if missing <= 0:
            continue
        candidates = [
            other for other in households
            if other is not household
            and not graph.has_edge(household.id, other.id)
            and graph.degree[other.id] < degree
        ]
        for other in sample_without_replacement(candidates, missing, rng):
            graph.add_edge(household.id, other.id)

    for household in households:
        household.peers = [by_id[n] for n in graph.neighbors(household.id)]
    return graph
