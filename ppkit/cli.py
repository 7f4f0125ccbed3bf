from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Union

from .CRN.exceptions import CRNError
from .CRN.io import load_hypergraph, write_rxn_table
from .CRN.Pathway.favored import FAVOR_HIGH, FAVOR_LOW, FavoredPathFinder
from .IO.debug import setup_logging

LOGGER = logging.getLogger(__name__)


def _sheet(value: str) -> Union[str, int]:
    """Digit-only sheet arguments select a worksheet by position."""
    return int(value) if value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppkit",
        description="Find a favored path between two species of a reaction table",
    )
    parser.add_argument("table", type=str, help="Reaction table (.csv, .tsv, .xls, .xlsx)")
    parser.add_argument("--source", "-s", required=True, help="Start species")
    parser.add_argument("--target", "-t", required=True, help="Goal species")
    parser.add_argument(
        "--favor",
        choices=[FAVOR_HIGH, FAVOR_LOW],
        default=FAVOR_HIGH,
        help="Consume high or low weights first (default: high)",
    )
    parser.add_argument(
        "--sheet", type=_sheet, default=None, help="Excel sheet name or index"
    )
    parser.add_argument(
        "--output", "-o", type=str, default=None, help="Write the path table here"
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)

    sheet = args.sheet if args.sheet is not None else 0
    try:
        graph = load_hypergraph(args.table, sheet_name=sheet)
    except (CRNError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    LOGGER.info(
        "Graph has %d reactions over %d species", graph.edge_count, graph.node_count
    )
    for name in (args.source, args.target):
        if graph.get_node(name) is None:
            print(f"error: unknown species {name!r}", file=sys.stderr)
            return 2

    path = FavoredPathFinder(graph).find(args.source, args.target, favor=args.favor)
    if not path.edges:
        print("No path found.")
        return 1

    for line in path.equations():
        print(line)
    if args.output:
        write_rxn_table(path, args.output)
        LOGGER.info("Saved path table to %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
