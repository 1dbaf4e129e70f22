import unittest
from infosource.models import SymbolEntry

class TestSymbolEntry(unittest.TestCase):
    def test_equality_and_hash(self):
        e1 = SymbolEntry(0, "a", b'\x01', 0.5)
        e2 = SymbolEntry(0, "a", b'\x01', 0.5)
        e3 = SymbolEntry(1, "b", b'\x00', 0.5)
        self.assertEqual(e1, e2)
        self.assertNotEqual(e1, e3)
        self.assertNotEqual(e1, "a")
        self.assertEqual(hash(e1), hash(e2))

    def test_str_and_repr(self):
        e = SymbolEntry(2, "c", b'\x01\x00', 0.25)
        expected = "[2, c, [1, 0], 0.25]"
        self.assertEqual(str(e), expected)
        self.assertEqual(repr(e), expected)

if __name__ == '__main__':
    unittest.main()
