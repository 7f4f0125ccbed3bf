from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Union

from ..utils import format_equation
from .node import Node, as_node, node_name


@dataclass(eq=False, repr=False)
class HyperEdge:
    """
    One weighted hyperedge representing a reaction:

        sources (ordered, may repeat)  -->  targets (ordered, may repeat)

    Identity is the name: two edges are equal iff their names are equal,
    independent of weight or endpoints. Endpoint lists belong to the edge but
    are rewritten in place when the edge is added to a
    :class:`~ppkit.CRN.Hypergraph.hypergraph.HyperGraph` (node interning).

    :param name: Unique edge identifier.
    :type name: str
    :param weight: Preference score used by the favored-path search.
    :type weight: float
    :param sources: Source nodes (or names) in order.
    :type sources: List[Union[Node, str]]
    :param targets: Target nodes (or names) in order.
    :type targets: List[Union[Node, str]]
    """

    name: str
    weight: float = 0.0
    sources: List[Node] = field(default_factory=list)
    targets: List[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.weight = float(self.weight)
        self.sources = [as_node(s) for s in self.sources]
        self.targets = [as_node(t) for t in self.targets]

    # ---- endpoints ----
    def add_source(self, source: Union[Node, str]) -> None:
        self.sources.append(as_node(source))

    def add_target(self, target: Union[Node, str]) -> None:
        self.targets.append(as_node(target))

    def is_source(self, node: Union[Node, str]) -> bool:
        """
        Check whether ``node`` is a source of this edge (compared by name).

        :param node: Node or species name.
        :returns: ``True`` if present among the sources.
        :rtype: bool
        """
        name = node_name(node)
        return any(s.name == name for s in self.sources)

    def is_target(self, node: Union[Node, str]) -> bool:
        """
        Check whether ``node`` is a target of this edge (compared by name).

        :param node: Node or species name.
        :returns: ``True`` if present among the targets.
        :rtype: bool
        """
        name = node_name(node)
        return any(t.name == name for t in self.targets)

    @property
    def source_count(self) -> int:
        return len(self.sources)

    @property
    def target_count(self) -> int:
        return len(self.targets)

    def species(self) -> Set[str]:
        """
        Names of all species participating in this edge.

        :returns: Distinct source and target names.
        :rtype: Set[str]
        """
        return {n.name for n in self.sources} | {n.name for n in self.targets}

    def equation(self) -> str:
        """
        Chemical equation of the edge, e.g. ``"A + B --> C"``.

        :returns: Equation string.
        :rtype: str
        """
        return format_equation(self.sources, self.targets)

    def _weight_label(self) -> str:
        return f"{self.weight}"

    # ---- identity ----
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HyperEdge):
            return NotImplemented
        return other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{self.name} ({self._weight_label()}) : {self.equation()}"


@dataclass(eq=False, repr=False)
class RangedHyperEdge(HyperEdge):
    """
    Hyperedge that also carries a weight range for display.

    Only :attr:`weight` takes part in path selection; ``min_weight`` and
    ``max_weight`` are metadata.

    :param min_weight: Lower bound of the weight range.
    :type min_weight: float
    :param max_weight: Upper bound of the weight range.
    :type max_weight: float
    """

    min_weight: float = 0.0
    max_weight: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.min_weight = float(self.min_weight)
        self.max_weight = float(self.max_weight)

    def _weight_label(self) -> str:
        return f"{self.min_weight},{self.max_weight}"
