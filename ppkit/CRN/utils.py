from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .exceptions import InvalidReactionError


__all__ = [
    "EMPTY_SIDE_TOKENS",
    "ARROW_PATTERN",
    "split_side",
    "parse_equation",
    "format_equation",
]


# Tokens that denote the empty complex (no species)
EMPTY_SIDE_TOKENS = {"", "0", "Ø", "ø", "∅"}

# "-->" must be tried before "->"
ARROW_PATTERN = re.compile(r"\s*(?:-->|->|>>)\s*")


def split_side(side: str) -> List[str]:
    """
    Split one reaction side into an ordered list of species names.

    Terms are separated by ``+``. A term may carry an integer coefficient
    separated by whitespace or ``*`` (``"2 A"``, ``"2*A"``), in which case the
    species is repeated. ``"2A"`` is read as the species name ``2A``.

    :param side: Text like ``"A + 2 B"``.
    :type side: str
    :returns: Species names in order, e.g. ``["A", "B", "B"]``.
    :rtype: List[str]
    :raises InvalidReactionError: If a coefficient is not a positive integer.
    """
    side = side.strip()
    if side in EMPTY_SIDE_TOKENS:
        return []

    out: List[str] = []
    for term in side.split("+"):
        term = term.strip()
        if not term:
            raise InvalidReactionError(f"Empty term in reaction side: {side!r}")
        toks = term.replace("*", " ").split()
        if len(toks) > 1 and toks[0].isdigit():
            count = int(toks[0])
            if count <= 0:
                raise InvalidReactionError(
                    f"Coefficient must be positive in term {term!r}"
                )
            out.extend([" ".join(toks[1:])] * count)
        else:
            out.append(term)
    return out


def parse_equation(equation: str) -> Tuple[List[str], List[str]]:
    """
    Parse ``"A + B --> C"`` into source and target name lists.

    Accepted arrows are ``-->``, ``->`` and ``>>``; the first arrow splits
    the equation.

    :param equation: Reaction equation.
    :type equation: str
    :returns: ``(sources, targets)``.
    :rtype: Tuple[List[str], List[str]]
    :raises InvalidReactionError: If no arrow is present or a side is malformed.
    """
    parts = ARROW_PATTERN.split(str(equation), maxsplit=1)
    if len(parts) != 2:
        raise InvalidReactionError(
            f"Invalid reaction format (missing '-->'): {equation!r}"
        )
    left, right = parts
    return split_side(left), split_side(right)


def format_equation(sources: Iterable[object], targets: Iterable[object]) -> str:
    """
    Render a reaction as ``"A + B --> C"``.

    :param sources: Source nodes (or names).
    :param targets: Target nodes (or names).
    :returns: Equation string.
    :rtype: str
    """
    left = " + ".join(str(s) for s in sources)
    right = " + ".join(str(t) for t in targets)
    return f"{left} --> {right}"
