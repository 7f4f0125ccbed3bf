import os
import tempfile
import unittest

import pandas as pd

from ppkit.CRN.exceptions import GraphImportError
from ppkit.CRN.Hypergraph.hyperedge import RangedHyperEdge
from ppkit.CRN.io import (
    graph_from_rxn_table,
    graph_to_rxn_table,
    load_hypergraph,
    read_rxn_table,
    write_rxn_table,
)


class TestGraphFromRxnTable(unittest.TestCase):
    def test_equation_column(self):
        df = pd.DataFrame(
            {
                "name": ["R1", "R2"],
                "equation": ["A + 2 B --> C", "C >> D"],
                "weight": [1.5, 3],
            }
        )
        H = graph_from_rxn_table(df)
        self.assertEqual([e.name for e in H.edges], ["R1", "R2"])
        self.assertEqual([n.name for n in H.nodes], ["A", "B", "C", "D"])
        self.assertEqual(H.get_edge("R1").weight, 1.5)
        self.assertEqual([n.name for n in H.get_edge("R1").sources], ["A", "B", "B"])

    def test_reactant_product_columns(self):
        df = pd.DataFrame(
            {"reactants": ["A", None], "products": ["B + C", "A"]}
        )
        H = graph_from_rxn_table(df, default_weight=2.0)
        self.assertEqual([e.name for e in H.edges], ["r_1", "r_2"])
        self.assertEqual(H.get_edge("r_2").sources, [])
        self.assertEqual([e.weight for e in H.edges], [2.0, 2.0])

    def test_blank_names_and_weights_use_defaults(self):
        df = pd.DataFrame(
            {
                "name": ["r_1", None, ""],
                "equation": ["A --> B", "B --> C", "C --> D"],
                "weight": [1.0, None, 4.0],
            }
        )
        H = graph_from_rxn_table(df)
        self.assertEqual([e.name for e in H.edges], ["r_1", "r_2", "r_3"])
        self.assertEqual([e.weight for e in H.edges], [1.0, 0.0, 4.0])

    def test_duplicate_names_keep_first_row(self):
        df = pd.DataFrame(
            {"name": ["R1", "R1"], "equation": ["A --> B", "X --> Y"]}
        )
        with self.assertLogs("ppkit.CRN.io", level="WARNING") as cm:
            H = graph_from_rxn_table(df)
        self.assertEqual(H.edge_count, 1)
        self.assertIsNone(H.get_node("X"))
        self.assertIn("duplicate reaction name", cm.output[0])

    def test_ranged_rows(self):
        df = pd.DataFrame(
            {
                "name": ["R1", "R2"],
                "equation": ["A --> B", "B --> C"],
                "weight": [1.0, 2.0],
                "min_weight": [0.5, None],
                "max_weight": [1.5, None],
            }
        )
        H = graph_from_rxn_table(df)
        r1 = H.get_edge("R1")
        self.assertIsInstance(r1, RangedHyperEdge)
        self.assertEqual((r1.min_weight, r1.max_weight), (0.5, 1.5))
        self.assertEqual(r1.weight, 1.0)
        self.assertNotIsInstance(H.get_edge("R2"), RangedHyperEdge)

    def test_missing_columns(self):
        with self.assertRaises(ValueError):
            graph_from_rxn_table(pd.DataFrame({"reactants": ["A"]}))

    def test_bad_rows(self):
        with self.assertRaises(GraphImportError) as cm:
            graph_from_rxn_table(pd.DataFrame({"equation": ["A --> B", "A = B"]}))
        self.assertIn("Row 1", str(cm.exception))
        with self.assertRaises(GraphImportError):
            graph_from_rxn_table(
                pd.DataFrame({"equation": ["A --> B"], "weight": ["heavy"]})
            )


class TestRxnTableFiles(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, filename: str, text: str) -> str:
        path = os.path.join(self.tmp, filename)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
        return path

    def test_load_csv(self):
        path = self._write(
            "rxns.csv", "name,equation,weight\ne1,A --> B,5\ne2,B --> C,1\n"
        )
        H = load_hypergraph(path)
        self.assertEqual(H.equations(), ["e1 (5.0) : A --> B", "e2 (1.0) : B --> C"])

    def test_load_tsv(self):
        path = self._write(
            "rxns.tsv", "reactants\tproducts\tweight\nA + B\tC\t2\n"
        )
        H = load_hypergraph(path)
        self.assertEqual(H.get_edge("r_1").equation(), "A + B --> C")

    def test_unsupported_suffix(self):
        path = self._write("rxns.json", "{}")
        with self.assertRaises(GraphImportError):
            read_rxn_table(path)

    def test_unreadable_workbooks(self):
        for filename in ("rxns.xls", "rxns.xlsx"):
            path = self._write(filename, "name,equation\ne1,A --> B\n")
            with self.assertRaises(GraphImportError):
                read_rxn_table(path)

    def test_malformed_csv(self):
        path = self._write("rxns.csv", "")
        with self.assertRaises(GraphImportError):
            read_rxn_table(path)

    def test_write_and_reload(self):
        df = pd.DataFrame(
            {
                "name": ["R1", "R2"],
                "equation": ["A --> B", "B --> C"],
                "weight": [1.0, 2.0],
                "min_weight": [0.5, None],
                "max_weight": [1.5, None],
            }
        )
        H = graph_from_rxn_table(df)
        table = graph_to_rxn_table(H)
        self.assertEqual(
            list(table.columns),
            ["name", "equation", "weight", "min_weight", "max_weight"],
        )
        self.assertTrue(pd.isna(table.loc[1, "min_weight"]))

        out = write_rxn_table(H, os.path.join(self.tmp, "path.csv"))
        again = load_hypergraph(out)
        self.assertEqual(again.equations(), H.equations())
        self.assertIsInstance(again.get_edge("R1"), RangedHyperEdge)

    def test_write_rejects_unknown_suffix(self):
        H = graph_from_rxn_table(pd.DataFrame({"equation": ["A --> B"]}))
        with self.assertRaises(ValueError):
            write_rxn_table(H, os.path.join(self.tmp, "path.json"))

    def test_plain_table_has_three_columns(self):
        H = graph_from_rxn_table(pd.DataFrame({"equation": ["A --> B"]}))
        self.assertEqual(list(graph_to_rxn_table(H).columns), ["name", "equation", "weight"])


if __name__ == "__main__":
    unittest.main()
