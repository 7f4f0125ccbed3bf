from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Node:
    """
    A single species (vertex) of a reaction hypergraph.

    Two nodes are equal iff their names are equal, so nodes can be used as
    set members and mapping keys regardless of which instance is at hand.

    :param name: Species identifier (e.g. 'A', 'ATP').
    :type name: str
    :param metadata: Optional arbitrary metadata; never part of equality.
    :type metadata: Dict[str, Any]
    """

    name: str
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __str__(self) -> str:
        return self.name


def as_node(obj: Union[Node, str]) -> Node:
    """
    Coerce a node or a species name to a :class:`Node`.

    :param obj: Node instance or name.
    :type obj: Union[Node, str]
    :returns: ``obj`` itself if already a node, else a fresh node.
    :rtype: Node
    """
    if isinstance(obj, Node):
        return obj
    return Node(str(obj))


def node_name(obj: Union[Node, str]) -> str:
    """Name of a node, or the string itself."""
    if isinstance(obj, Node):
        return obj.name
    return str(obj)
