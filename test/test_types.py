from unittest import TestCase


class TestForceType(TestCase):
    def test_force_type(self):
        from dimequiv.types import force_type

        x = force_type(3.5, int, float)
        self.assertIsInstance(x, int)  # int(3.5) -> 3 (int)
        self.assertEqual(x, 3)

        x = force_type("2.5", int, float)
        self.assertIsInstance(x, float)  # int("2.5") fails.
        self.assertEqual(x, 2.5)

        with self.assertRaises(ValueError):
            force_type(3.5 + 4j, int, float)


class TestCoaxType(TestCase):
    def test_coax_type(self):
        from fractions import Fraction
        from dimequiv.types import coax_type

        x = coax_type(3.5, int, float)
        self.assertIsInstance(x, float)  # Because int(3.5) != 3.5
        self.assertEqual(x, 3.5)

        x = coax_type(3.0, int, str)
        self.assertIsInstance(x, int)
        self.assertEqual(x, 3)

        x = coax_type(Fraction(12, 4), int)
        self.assertIsInstance(x, int)
        self.assertEqual(x, 3)

        with self.assertRaises(ValueError):
            coax_type("3.0", int, float)  # Because '3.0' != 3.0

        with self.assertRaises(ValueError):
            coax_type(Fraction(1, 3), int)

        x = 3 + 2j
        y = coax_type(x, int, float, default=x)
        self.assertIsInstance(y, complex)
        self.assertEqual(y, 3 + 2j)

    def test_coax_type_overflow(self):
        from dimequiv.types import coax_type

        y = coax_type(float('inf'), int, default=-1)
        self.assertEqual(y, -1)
