import unittest
from infosource.validators import validate_type, validate_non_negative_int, validate_length
from infosource.errors import LengthMismatchError

class TestValidators(unittest.TestCase):
    def test_validate_type(self):
        validate_type("a", "label", str)
        with self.assertRaises(ValueError):
            validate_type(1, "label", str)

    def test_validate_non_negative_int(self):
        validate_non_negative_int(0, "length")
        validate_non_negative_int(5, "length")
        with self.assertRaises(ValueError):
            validate_non_negative_int(-3, "length")
        with self.assertRaises(ValueError):
            validate_non_negative_int(False, "length")
        with self.assertRaises(ValueError):
            validate_non_negative_int("3", "length")

    def test_validate_length(self):
        validate_length([1, 2], "table", 2)
        with self.assertRaises(LengthMismatchError) as ctx:
            validate_length([1, 2], "table", 3)
        self.assertEqual(ctx.exception.name, "table")
        with self.assertRaises(ValueError):
            validate_length((x for x in [1, 2]), "table", 2)

if __name__ == '__main__':
    unittest.main()
