import unittest

from ppkit.CRN.Hypergraph.node import Node, as_node, node_name


class TestNode(unittest.TestCase):
    def test_equality_and_hash_by_name(self):
        a1 = Node("A")
        a2 = Node("A", metadata={"formula": "CH4"})
        self.assertEqual(a1, a2)
        self.assertEqual(hash(a1), hash(a2))
        self.assertNotEqual(a1, Node("B"))
        # usable as set members / mapping keys
        self.assertEqual(len({a1, a2, Node("B")}), 2)
        self.assertEqual({a1: 1}[a2], 1)

    def test_str_is_name(self):
        self.assertEqual(str(Node("ATP")), "ATP")

    def test_name_is_immutable(self):
        n = Node("A")
        with self.assertRaises(AttributeError):
            n.name = "B"

    def test_as_node_and_node_name(self):
        n = Node("X")
        self.assertIs(as_node(n), n)
        self.assertEqual(as_node("X"), n)
        self.assertEqual(node_name(n), "X")
        self.assertEqual(node_name("Y"), "Y")


if __name__ == "__main__":
    unittest.main()
