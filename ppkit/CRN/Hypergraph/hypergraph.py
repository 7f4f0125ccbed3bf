from __future__ import annotations

from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

import networkx as nx
import numpy as np

from ..utils import parse_equation
from .hyperedge import HyperEdge
from .node import Node, node_name


class HyperGraph:
    """
    Directed hypergraph where edges map many source nodes -> many target nodes.

    The graph owns an insertion-ordered node list and edge list, both
    deduplicated by name. Nodes are *interned*: when an edge is added, each of
    its endpoints is replaced in place by the graph's canonical node with the
    same name, so all edges sharing a species share one :class:`Node`.

    Edges themselves are never cloned. The copy constructor
    ``HyperGraph(other)`` re-adds the edges of ``other`` and therefore shares
    the edge instances while keeping its own book-keeping.

    :param graph: Optional graph to copy.
    :type graph: Optional[HyperGraph]
    """

    def __init__(self, graph: Optional[HyperGraph] = None) -> None:
        self.nodes: List[Node] = []
        self.edges: List[HyperEdge] = []

        # interning tables: name -> canonical instance
        self._node_index: Dict[str, Node] = {}
        self._edge_index: Dict[str, HyperEdge] = {}

        # counter used to produce readable ids like "r_1"
        self._edge_counter = 0

        if graph is not None:
            for edge in graph.edges:
                self.add_edge(edge)

    @classmethod
    def from_edges(cls, edges: Iterable[HyperEdge]) -> HyperGraph:
        """
        Build a graph by adding ``edges`` in order.

        :param edges: Hyperedges to add.
        :type edges: Iterable[HyperEdge]
        :returns: New graph.
        :rtype: HyperGraph
        """
        graph = cls()
        for edge in edges:
            graph.add_edge(edge)
        return graph

    # ------------------------------------------------------------------
    # Adding
    # ------------------------------------------------------------------
    def _intern(self, endpoints: List[Node]) -> None:
        for i, node in enumerate(endpoints):
            canonical = self._node_index.get(node.name)
            if canonical is None:
                self._node_index[node.name] = node
                self.nodes.append(node)
            else:
                endpoints[i] = canonical

    def add_edge(self, edge: HyperEdge) -> HyperEdge:
        """
        Add ``edge`` to the graph and intern its endpoints.

        Adding an edge whose name is already present is a no-op.

        :param edge: Edge to add.
        :type edge: HyperEdge
        :returns: The edge stored under that name (the existing one on a
                  duplicate).
        :rtype: HyperEdge
        """
        existing = self._edge_index.get(edge.name)
        if existing is not None:
            return existing
        self._edge_index[edge.name] = edge
        self.edges.append(edge)
        self._intern(edge.sources)
        self._intern(edge.targets)
        return edge

    def new_edge_name(self) -> str:
        """First unused generated edge id (``r_1``, ``r_2``, ...)."""
        while True:
            self._edge_counter += 1
            name = f"r_{self._edge_counter}"
            if name not in self._edge_index:
                return name

    def add_rxn(
        self,
        sources: Iterable[Union[Node, str]],
        targets: Iterable[Union[Node, str]],
        weight: float = 0.0,
        name: Optional[str] = None,
    ) -> HyperEdge:
        """
        Create a hyperedge ``sources --> targets`` and add it.

        :param sources: Source nodes or names, in order.
        :type sources: Iterable[Union[Node, str]]
        :param targets: Target nodes or names, in order.
        :type targets: Iterable[Union[Node, str]]
        :param weight: Edge weight.
        :type weight: float
        :param name: Edge name; a fresh ``r_<n>`` id is generated if ``None``.
        :type name: Optional[str]
        :returns: The stored edge.
        :rtype: HyperEdge
        """
        if name is None:
            name = self.new_edge_name()
        edge = HyperEdge(name, weight, list(sources), list(targets))
        return self.add_edge(edge)

    def add_rxn_from_str(
        self,
        equation: str,
        weight: float = 0.0,
        name: Optional[str] = None,
    ) -> HyperEdge:
        """
        Parse an equation like ``"A + B --> C"`` and add it as a hyperedge.

        :param equation: Reaction equation (``-->``, ``->`` or ``>>``).
        :type equation: str
        :param weight: Edge weight.
        :type weight: float
        :param name: Edge name; generated if ``None``.
        :type name: Optional[str]
        :returns: The stored edge.
        :rtype: HyperEdge
        :raises InvalidReactionError: If the equation cannot be parsed.
        """
        sources, targets = parse_equation(equation)
        return self.add_rxn(sources, targets, weight=weight, name=name)

    # ------------------------------------------------------------------
    # Query / utility
    # ------------------------------------------------------------------
    def get_edges_with_source(self, node: Union[Node, str]) -> List[HyperEdge]:
        """
        Edges having ``node`` among their sources, in edge-list order.

        Endpoint lists are scanned at query time, so endpoints appended to an
        edge after it was added are seen.

        :param node: Node or species name.
        :returns: Matching edges (a new list).
        :rtype: List[HyperEdge]
        """
        name = node_name(node)
        return [e for e in self.edges if e.is_source(name)]

    def get_edges_with_target(self, node: Union[Node, str]) -> List[HyperEdge]:
        """
        Edges having ``node`` among their targets, in edge-list order.

        :param node: Node or species name.
        :returns: Matching edges (a new list).
        :rtype: List[HyperEdge]
        """
        name = node_name(node)
        return [e for e in self.edges if e.is_target(name)]

    def get_node(self, name: str) -> Optional[Node]:
        """Canonical node called ``name``, or ``None``."""
        return self._node_index.get(name)

    def get_edge(self, name: str) -> Optional[HyperEdge]:
        """Edge called ``name``, or ``None``."""
        return self._edge_index.get(name)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.edges and not self.nodes

    def neighbors(self, node: Union[Node, str]) -> List[Node]:
        """
        One-step target neighbors of a node.

        :param node: Node or species name serving as the source.
        :returns: Distinct target nodes in discovery order.
        :rtype: List[Node]
        """
        seen: Dict[str, Node] = {}
        for edge in self.get_edges_with_source(node):
            for t in edge.targets:
                seen.setdefault(t.name, t)
        return list(seen.values())

    def equations(self) -> List[str]:
        """Display strings of all edges, in edge-list order."""
        return [repr(e) for e in self.edges]

    def __len__(self) -> int:
        return len(self.edges)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, HyperEdge):
            return item.name in self._edge_index
        if isinstance(item, Node):
            return item.name in self._node_index
        if isinstance(item, str):
            return item in self._node_index or item in self._edge_index
        return False

    def __iter__(self) -> Iterator[HyperEdge]:
        return iter(list(self.edges))

    # ------------------------------------------------------------------
    # Graph exports
    # ------------------------------------------------------------------
    def to_bipartite(
        self,
        *,
        species_prefix: str = "S:",
        reaction_prefix: str = "R:",
        bipartite_values: Tuple[int, int] = (0, 1),
    ) -> nx.DiGraph:
        """
        Export as a bipartite NetworkX directed graph.

        Species nodes are ``f"{species_prefix}{name}"`` and reaction nodes are
        ``f"{reaction_prefix}{edge_name}"``. Arcs run species -> reaction for
        sources and reaction -> species for targets; repeated endpoints are
        recorded in the ``stoich`` arc attribute.

        :param species_prefix: Prefix for species node ids.
        :type species_prefix: str, keyword-only
        :param reaction_prefix: Prefix for reaction node ids.
        :type reaction_prefix: str, keyword-only
        :param bipartite_values: Bipartite attribute values for (species, reaction).
        :type bipartite_values: Tuple[int, int], keyword-only
        :returns: Bipartite directed graph.
        :rtype: nx.DiGraph
        """
        G = nx.DiGraph()
        species_val, reaction_val = bipartite_values

        for node in self.nodes:
            G.add_node(
                f"{species_prefix}{node.name}",
                bipartite=species_val,
                label=node.name,
                kind="species",
            )

        for edge in self.edges:
            rnode = f"{reaction_prefix}{edge.name}"
            G.add_node(
                rnode,
                bipartite=reaction_val,
                label=edge.name,
                kind="reaction",
                weight=edge.weight,
                equation=edge.equation(),
            )
            for s in edge.sources:
                u = f"{species_prefix}{s.name}"
                if G.has_edge(u, rnode):
                    G[u][rnode]["stoich"] += 1
                else:
                    G.add_edge(u, rnode, role="source", stoich=1)
            for t in edge.targets:
                v = f"{species_prefix}{t.name}"
                if G.has_edge(rnode, v):
                    G[rnode][v]["stoich"] += 1
                else:
                    G.add_edge(rnode, v, role="target", stoich=1)
        return G

    def to_species_graph(self) -> nx.DiGraph:
        """
        Collapse hyperedges to a directed species -> species graph.

        For each hyperedge, an arc is created from each source to each target.
        Arc attributes:

          * ``via``: set of edge names contributing to the arc
          * ``weight``: largest weight among the contributing edges

        :returns: Directed species-to-species graph.
        :rtype: nx.DiGraph
        """
        G = nx.DiGraph()
        for node in self.nodes:
            G.add_node(node.name, label=node.name, kind="species")
        for edge in self.edges:
            for s in edge.sources:
                for t in edge.targets:
                    if G.has_edge(s.name, t.name):
                        data = G[s.name][t.name]
                        data["via"].add(edge.name)
                        data["weight"] = max(data["weight"], edge.weight)
                    else:
                        G.add_edge(s.name, t.name, via={edge.name}, weight=edge.weight)
        return G

    def incidence_matrix(self) -> Tuple[List[str], List[str], np.ndarray]:
        """
        Signed node x edge incidence matrix.

        Entry ``(i, j)`` is the number of times node ``i`` appears among the
        targets of edge ``j`` minus the number of times it appears among its
        sources. Rows and columns follow node-list and edge-list order.

        :returns: ``(node_names, edge_names, matrix)``.
        :rtype: Tuple[List[str], List[str], np.ndarray]
        """
        node_order = [n.name for n in self.nodes]
        edge_order = [e.name for e in self.edges]
        n_idx = {name: i for i, name in enumerate(node_order)}
        mat = np.zeros((len(node_order), len(edge_order)), dtype=int)
        for j, edge in enumerate(self.edges):
            for s in edge.sources:
                mat[n_idx[s.name], j] -= 1
            for t in edge.targets:
                mat[n_idx[t.name], j] += 1
        return node_order, edge_order, mat

    def print_edges(self) -> None:
        """Pretty-print the edge list, one display line per edge."""
        if not self.edges:
            print("No edges.")
            return
        for line in self.equations():
            print(line)

    def __str__(self) -> str:
        return ", ".join(e.name for e in self.edges)

    def __repr__(self) -> str:
        """Human-readable multi-line summary of the hypergraph."""
        lines = ["HyperGraph:"]
        for e in self.edges:
            lines.append("  " + repr(e))
        lines.append("Nodes: " + ", ".join(n.name for n in self.nodes))
        return "\n".join(lines)
