"""Favored-path search over weighted reaction hypergraphs.

The search prefers edges of extreme weight. Edges are consumed in *tiers*
(maximal groups of equal weight) from the most favored weight onwards, and a
less favored tier is only taken in when the better ones cannot connect the
source to the target on their own.

Each outer round starts a trial graph from the committed baseline and layers
pending tiers onto it one at a time until the target becomes reachable. Tiers
that did not connect are deferred to the next round; the last tier tried is
banked into the baseline. Once the baseline connects, a single path is read
off it with a parent-pointer traversal.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Set, Tuple, Union

from ..exceptions import SearchError
from ..Hypergraph.hyperedge import HyperEdge
from ..Hypergraph.hypergraph import HyperGraph
from ..Hypergraph.node import Node, as_node

LOGGER = logging.getLogger(__name__)

FAVOR_HIGH = "high"
FAVOR_LOW = "low"

_ORDER_KEYS: Dict[str, Callable[[HyperEdge], float]] = {
    FAVOR_HIGH: lambda e: -e.weight,
    FAVOR_LOW: lambda e: e.weight,
}


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------


def reachable(graph: HyperGraph, root: Union[Node, str]) -> List[Node]:
    """
    Nodes reachable from ``root`` by a LIFO (depth-first) traversal.

    A node is marked visited when it is popped, so it may sit on the stack
    several times before that; later copies are skipped.

    :param graph: Graph to traverse.
    :type graph: HyperGraph
    :param root: Start node or name.
    :returns: Visited nodes in visiting order, ``root`` first.
    :rtype: List[Node]
    """
    visited: List[Node] = []
    seen: Set[Node] = set()
    stack: List[Node] = [as_node(root)]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        visited.append(node)
        for edge in graph.get_edges_with_source(node):
            for nxt in edge.targets:
                if nxt not in seen:
                    stack.append(nxt)
    return visited


def path_exists(
    graph: HyperGraph, source: Union[Node, str], target: Union[Node, str]
) -> bool:
    """
    Check whether ``target`` is reachable from ``source``.

    :param graph: Graph to search.
    :param source: Start node or name.
    :param target: Goal node or name.
    :returns: ``True`` if ``target`` is visited from ``source``.
    :rtype: bool
    """
    return as_node(target) in reachable(graph, source)


def _discover(
    graph: HyperGraph, root: Node
) -> Tuple[Set[Node], Dict[Node, HyperEdge], Dict[Node, Node]]:
    # Marks on push; the root is not pre-marked and may be rediscovered
    # through a cycle.
    visited: Set[Node] = set()
    parent_edge: Dict[Node, HyperEdge] = {}
    parent_node: Dict[Node, Node] = {}
    stack: List[Node] = [root]
    while stack:
        current = stack.pop()
        for edge in graph.get_edges_with_source(current):
            for nxt in edge.targets:
                if nxt not in visited:
                    stack.append(nxt)
                    visited.add(nxt)
                    parent_edge[nxt] = edge
                    parent_node[nxt] = current
    return visited, parent_edge, parent_node


def get_path(
    graph: HyperGraph, source: Union[Node, str], target: Union[Node, str]
) -> HyperGraph:
    """
    Extract a single path from ``source`` to ``target`` within ``graph``.

    Every node records the edge and predecessor that first discovered it.
    The path is read backwards from ``target`` and the collected edges are
    added to the result in the edge order of ``graph``.

    :param graph: Graph to search.
    :param source: Start node or name.
    :param target: Goal node or name.
    :returns: Path graph; empty when ``target`` is not reachable or equals
              ``source``.
    :rtype: HyperGraph
    """
    s = as_node(source)
    t = as_node(target)
    path = HyperGraph()
    visited, parent_edge, parent_node = _discover(graph, s)
    if t not in visited:
        return path

    used: Set[HyperEdge] = set()
    while t != s:
        used.add(parent_edge[t])
        t = parent_node[t]

    for edge in graph.edges:
        if edge in used:
            path.add_edge(edge)
    return path


# ---------------------------------------------------------------------------
# Favored path
# ---------------------------------------------------------------------------


def _pop_tier(pending: Deque[HyperEdge]) -> List[HyperEdge]:
    head = pending.popleft()
    tier = [head]
    while pending and pending[0].weight == head.weight:
        tier.append(pending.popleft())
    return tier


class FavoredPathFinder:
    """
    Tiered greedy search for a favored path in a :class:`HyperGraph`.

    The finder keeps no state between calls apart from the graph it searches,
    so one instance can answer any number of queries.

    :param graph: Graph to search. It is not modified, but adding its edges
                  to intermediate graphs re-interns their endpoints.
    :type graph: HyperGraph
    :param logger: Logger for debug tracing; defaults to the module logger.
    :type logger: Optional[logging.Logger]

    **Examples**
    ----------
    >>> from ppkit.CRN.Hypergraph.conversion import rxns_to_hypergraph
    >>> H = rxns_to_hypergraph([("e1", "A --> B", 5), ("e2", "B --> C", 5),
    ...                         ("e3", "A --> C", 1)])
    >>> [e.name for e in FavoredPathFinder(H).high_weights("A", "C").edges]
    ['e1', 'e2']
    """

    def __init__(
        self, graph: HyperGraph, logger: Optional[logging.Logger] = None
    ) -> None:
        self.graph = graph
        self.logger = logger or LOGGER

    def high_weights(
        self, source: Union[Node, str], target: Union[Node, str]
    ) -> HyperGraph:
        """Favored path preferring the highest weights."""
        return self.find(source, target, favor=FAVOR_HIGH)

    def low_weights(
        self, source: Union[Node, str], target: Union[Node, str]
    ) -> HyperGraph:
        """Favored path preferring the lowest weights."""
        return self.find(source, target, favor=FAVOR_LOW)

    def find(
        self,
        source: Union[Node, str],
        target: Union[Node, str],
        favor: str = FAVOR_HIGH,
    ) -> HyperGraph:
        """
        Find the favored path from ``source`` to ``target``.

        :param source: Start node or name.
        :param target: Goal node or name.
        :param favor: ``"high"`` to consume the largest weights first,
                      ``"low"`` for the smallest.
        :type favor: str
        :returns: Graph holding the selected path; empty if there is none.
        :rtype: HyperGraph
        :raises SearchError: If ``favor`` is not ``"high"`` or ``"low"``.
        """
        key = _ORDER_KEYS.get(favor)
        if key is None:
            raise SearchError(
                f"Unknown preference {favor!r}; expected {FAVOR_HIGH!r} or {FAVOR_LOW!r}"
            )
        s = as_node(source)
        t = as_node(target)

        committed = HyperGraph()
        # sorted() is stable: equal weights keep the graph's edge order
        pending: Deque[HyperEdge] = deque(sorted(self.graph.edges, key=key))
        found = False
        rounds = 0

        while pending:
            rounds += 1
            trial = HyperGraph(committed)
            deferred: List[HyperEdge] = []
            tier: List[HyperEdge] = []
            found = False
            self.logger.debug(
                "Round %d: %d committed, %d pending edges",
                rounds,
                committed.edge_count,
                len(pending),
            )
            while not found and pending:
                tier = _pop_tier(pending)
                for edge in tier:
                    trial.add_edge(edge)
                found = path_exists(trial, s, t)
                self.logger.debug(
                    "Tier weight=%s (%d edges): %s",
                    tier[0].weight,
                    len(tier),
                    "connected" if found else "not connected",
                )
                # the trailing tier of an exhausted round is banked below
                if not found and pending:
                    deferred.extend(tier)

            for edge in tier:
                committed.add_edge(edge)
            pending = deque(deferred)

        if not found:
            self.logger.debug("No path from %s to %s after %d rounds", s, t, rounds)
            return HyperGraph()
        return get_path(committed, s, t)


def favored_path(
    graph: HyperGraph,
    source: Union[Node, str],
    target: Union[Node, str],
    favor: str = FAVOR_HIGH,
) -> HyperGraph:
    """
    Functional wrapper around :meth:`FavoredPathFinder.find`.

    :param graph: Graph to search.
    :param source: Start node or name.
    :param target: Goal node or name.
    :param favor: ``"high"`` or ``"low"``.
    :returns: Path graph; empty if there is none.
    :rtype: HyperGraph
    """
    return FavoredPathFinder(graph).find(source, target, favor=favor)


def favored_path_high_weights(
    graph: HyperGraph, source: Union[Node, str], target: Union[Node, str]
) -> HyperGraph:
    """Favored path from ``source`` to ``target`` preferring high weights."""
    return favored_path(graph, source, target, favor=FAVOR_HIGH)


def favored_path_low_weights(
    graph: HyperGraph, source: Union[Node, str], target: Union[Node, str]
) -> HyperGraph:
    """Favored path from ``source`` to ``target`` preferring low weights."""
    return favored_path(graph, source, target, favor=FAVOR_LOW)
