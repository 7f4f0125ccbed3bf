# CRN/Hypergraph/conversion.py
from __future__ import annotations

from typing import Iterable, List, Mapping, Tuple, Union

import networkx as nx

from ..exceptions import InvalidReactionError
from .hypergraph import HyperGraph


ReactionSpec = Union[str, Tuple[str, float], Tuple[str, str, float]]


def rxns_to_hypergraph(
    reactions: Union[Iterable[ReactionSpec], Mapping[str, float]],
    *,
    default_weight: float = 0.0,
) -> HyperGraph:
    """
    Build a :class:`HyperGraph` from reaction equations.

    Accepted forms:

    * ``["A + B --> C", ...]`` (weight ``default_weight``, generated names),
    * ``[("A + B --> C", 5.0), ...]`` (equation, weight),
    * ``[("e1", "A + B --> C", 5.0), ...]`` (name, equation, weight),
    * ``{"A + B --> C": 5.0, ...}`` (equation -> weight).

    :param reactions: Reaction specifications.
    :param default_weight: Weight for bare equation strings.
    :type default_weight: float, keyword-only
    :returns: New hypergraph with edges in input order.
    :rtype: HyperGraph
    :raises InvalidReactionError: If an entry cannot be interpreted.

    **Examples**
    ----------
    >>> H = rxns_to_hypergraph([("e1", "A --> B", 5), ("e2", "B --> C", 5)])
    >>> [e.name for e in H.edges]
    ['e1', 'e2']
    """
    H = HyperGraph()
    items = reactions.items() if isinstance(reactions, Mapping) else reactions
    for rec in items:
        if isinstance(rec, str):
            H.add_rxn_from_str(rec, weight=default_weight)
        elif isinstance(rec, tuple) and len(rec) == 2:
            equation, weight = rec
            H.add_rxn_from_str(str(equation), weight=float(weight))
        elif isinstance(rec, tuple) and len(rec) == 3:
            name, equation, weight = rec
            H.add_rxn_from_str(str(equation), weight=float(weight), name=str(name))
        else:
            raise InvalidReactionError(f"Cannot interpret reaction entry: {rec!r}")
    return H


def hypergraph_to_rxn_strings(H: HyperGraph) -> List[str]:
    """
    Render every edge of ``H`` as ``name (weight) : equation``.

    :param H: Hypergraph to render.
    :returns: Display strings in edge-list order.
    :rtype: List[str]
    """
    return H.equations()


def hypergraph_to_bipartite(H: HyperGraph, **kwargs) -> nx.DiGraph:
    """
    Export ``H`` as a bipartite species -> reaction -> species DiGraph.

    Keyword arguments are forwarded to :meth:`HyperGraph.to_bipartite`.
    """
    return H.to_bipartite(**kwargs)


def hypergraph_to_species_graph(H: HyperGraph) -> nx.DiGraph:
    """Collapse ``H`` to a species -> species DiGraph."""
    return H.to_species_graph()
