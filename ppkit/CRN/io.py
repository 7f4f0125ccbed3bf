from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from .exceptions import GraphImportError, InvalidReactionError
from .Hypergraph.hyperedge import HyperEdge, RangedHyperEdge
from .Hypergraph.hypergraph import HyperGraph
from .utils import parse_equation, split_side

LOGGER = logging.getLogger(__name__)

_CSV_SUFFIXES = {".csv"}
_TSV_SUFFIXES = {".tsv", ".txt"}
_EXCEL_SUFFIXES = {".xls", ".xlsx"}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return bool(pd.isna(value))


def _cell_float(value: Any, default: float, *, row: Any, column: str) -> float:
    if _is_blank(value):
        return default
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise GraphImportError(
            f"Row {row}: column {column!r} is not a number: {value!r}"
        ) from exc


def graph_from_rxn_table(
    df: pd.DataFrame,
    *,
    name_col: str = "name",
    equation_col: str = "equation",
    reactants_col: str = "reactants",
    products_col: str = "products",
    weight_col: str = "weight",
    min_weight_col: str = "min_weight",
    max_weight_col: str = "max_weight",
    default_weight: float = 0.0,
) -> HyperGraph:
    """
    Build a :class:`HyperGraph` from a pandas table of reactions.

    Expected columns (minimal), either

    * ``equation`` – string, e.g. ``"A + 2 B --> C"``, or
    * ``reactants`` and ``products`` – strings, e.g. ``"A + 2 B"`` and ``"C"``.

    Optional columns: ``name`` (generated ``r_<n>`` ids when missing or blank),
    ``weight`` (``default_weight`` when missing or blank), ``min_weight`` and
    ``max_weight`` (rows filling either become :class:`RangedHyperEdge`).
    Rows are added in table order; a repeated name keeps the first row.

    :param df: Reaction table.
    :type df: pandas.DataFrame
    :returns: Constructed hypergraph.
    :rtype: HyperGraph
    :raises ValueError: If neither an equation column nor a reactants/products
                        pair is present.
    :raises GraphImportError: If a row cannot be interpreted.
    """
    use_equation = equation_col in df.columns
    if not use_equation and not (
        reactants_col in df.columns and products_col in df.columns
    ):
        raise ValueError(
            f"DataFrame must contain an {equation_col!r} column or "
            f"{reactants_col!r} and {products_col!r} columns."
        )
    has_name = name_col in df.columns
    has_weight = weight_col in df.columns
    has_range = min_weight_col in df.columns and max_weight_col in df.columns

    H = HyperGraph()
    for idx, row in df.iterrows():
        try:
            if use_equation:
                sources, targets = parse_equation(str(row[equation_col]))
            else:
                r = row[reactants_col]
                p = row[products_col]
                sources = [] if _is_blank(r) else split_side(str(r))
                targets = [] if _is_blank(p) else split_side(str(p))
        except InvalidReactionError as exc:
            raise GraphImportError(f"Row {idx}: {exc}") from exc

        weight = (
            _cell_float(row[weight_col], default_weight, row=idx, column=weight_col)
            if has_weight
            else default_weight
        )
        name = None
        if has_name and not _is_blank(row[name_col]):
            name = str(row[name_col]).strip()
        if name is None:
            name = H.new_edge_name()
        elif H.get_edge(name) is not None:
            LOGGER.warning("Row %s: duplicate reaction name %r ignored", idx, name)
            continue

        if has_range and not (
            _is_blank(row[min_weight_col]) and _is_blank(row[max_weight_col])
        ):
            edge: HyperEdge = RangedHyperEdge(
                name,
                weight,
                sources,
                targets,
                min_weight=_cell_float(
                    row[min_weight_col], 0.0, row=idx, column=min_weight_col
                ),
                max_weight=_cell_float(
                    row[max_weight_col], 0.0, row=idx, column=max_weight_col
                ),
            )
        else:
            edge = HyperEdge(name, weight, sources, targets)
        H.add_edge(edge)

    LOGGER.debug(
        "Loaded %d reactions over %d species", H.edge_count, H.node_count
    )
    return H


def read_rxn_table(
    path: Union[str, Path], *, sheet_name: Optional[Union[str, int]] = 0
) -> pd.DataFrame:
    """
    Read a reaction table from CSV, TSV or an Excel workbook.

    :param path: File path; the suffix selects the reader.
    :type path: Union[str, pathlib.Path]
    :param sheet_name: Worksheet for Excel files (name or index).
    :type sheet_name: Optional[Union[str, int]], keyword-only
    :returns: Raw table.
    :rtype: pandas.DataFrame
    :raises GraphImportError: If the file cannot be read as a reaction table.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    try:
        if suffix in _CSV_SUFFIXES:
            return pd.read_csv(p)
        if suffix in _TSV_SUFFIXES:
            return pd.read_csv(p, sep="\t")
        if suffix in _EXCEL_SUFFIXES:
            return pd.read_excel(p, sheet_name=sheet_name)
    except ImportError as exc:
        raise GraphImportError(
            f"Missing reader for {p.name!r}; install ppkit[excel]: {exc}"
        ) from exc
    except (ValueError, zipfile.BadZipFile) as exc:
        raise GraphImportError(f"Cannot parse {p.name!r}: {exc}") from exc
    raise GraphImportError(f"Unsupported reaction table format: {p.name!r}")


def load_hypergraph(
    path: Union[str, Path],
    *,
    sheet_name: Optional[Union[str, int]] = 0,
    **kwargs: Any,
) -> HyperGraph:
    """
    Read a reaction table file and build its hypergraph.

    Extra keyword arguments go to :func:`graph_from_rxn_table`.

    :param path: Table file (``.csv``, ``.tsv``, ``.txt``, ``.xls``, ``.xlsx``).
    :returns: Constructed hypergraph.
    :rtype: HyperGraph
    """
    LOGGER.info("Reading reaction table %s", path)
    return graph_from_rxn_table(read_rxn_table(path, sheet_name=sheet_name), **kwargs)


def graph_to_rxn_table(H: HyperGraph) -> pd.DataFrame:
    """
    Tabulate the edges of ``H``.

    Columns are ``name``, ``equation`` and ``weight``; ``min_weight`` and
    ``max_weight`` are added when any edge is a :class:`RangedHyperEdge`
    (other rows hold NaN there).

    :param H: Hypergraph, typically a favored path.
    :returns: One row per edge, in edge-list order.
    :rtype: pandas.DataFrame
    """
    ranged = any(isinstance(e, RangedHyperEdge) for e in H.edges)
    rows = []
    for e in H.edges:
        row = {"name": e.name, "equation": e.equation(), "weight": e.weight}
        if ranged:
            row["min_weight"] = getattr(e, "min_weight", float("nan"))
            row["max_weight"] = getattr(e, "max_weight", float("nan"))
        rows.append(row)
    columns = ["name", "equation", "weight"]
    if ranged:
        columns += ["min_weight", "max_weight"]
    return pd.DataFrame(rows, columns=columns)


def write_rxn_table(H: HyperGraph, path: Union[str, Path]) -> Path:
    """
    Write :func:`graph_to_rxn_table` output to CSV/TSV or ``.xlsx``.

    :param H: Hypergraph to export.
    :param path: Destination; the suffix selects the writer.
    :returns: The written path.
    :rtype: pathlib.Path
    :raises ValueError: If the suffix is not supported.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    df = graph_to_rxn_table(H)
    if suffix in _CSV_SUFFIXES:
        df.to_csv(p, index=False)
    elif suffix in _TSV_SUFFIXES:
        df.to_csv(p, sep="\t", index=False)
    elif suffix == ".xlsx":
        df.to_excel(p, index=False)
    else:
        raise ValueError(f"Unsupported reaction table format: {p.name!r}")
    return p
