import unittest

from ppkit.CRN.exceptions import CRNError, InvalidReactionError
from ppkit.CRN.utils import format_equation, parse_equation, split_side


class TestSplitSide(unittest.TestCase):
    def test_plain_terms(self):
        self.assertEqual(split_side("A + B"), ["A", "B"])
        self.assertEqual(split_side("  A+B  "), ["A", "B"])

    def test_coefficients_repeat_species(self):
        self.assertEqual(split_side("2 A + B"), ["A", "A", "B"])
        self.assertEqual(split_side("3*C"), ["C", "C", "C"])
        self.assertEqual(split_side("2 * D"), ["D", "D"])

    def test_glued_digits_are_part_of_the_name(self):
        self.assertEqual(split_side("2A"), ["2A"])

    def test_empty_side_tokens(self):
        for token in ("", "0", "∅", "Ø", "  "):
            self.assertEqual(split_side(token), [])

    def test_malformed_terms(self):
        with self.assertRaises(InvalidReactionError):
            split_side("A + + B")
        with self.assertRaises(InvalidReactionError):
            split_side("0 A")


class TestParseEquation(unittest.TestCase):
    def test_arrows(self):
        for eq in ("A + B --> C", "A + B -> C", "A + B >> C"):
            self.assertEqual(parse_equation(eq), (["A", "B"], ["C"]))

    def test_empty_sides(self):
        self.assertEqual(parse_equation("∅ --> A"), ([], ["A"]))
        self.assertEqual(parse_equation("A --> 0"), (["A"], []))

    def test_missing_arrow(self):
        with self.assertRaises(InvalidReactionError) as cm:
            parse_equation("A + B = C")
        self.assertIn("-->", str(cm.exception))
        self.assertIsInstance(cm.exception, CRNError)

    def test_format_equation(self):
        self.assertEqual(format_equation(["A", "A"], ["B"]), "A + A --> B")
        self.assertEqual(format_equation([], ["B"]), " --> B")


if __name__ == "__main__":
    unittest.main()
