import unittest

from errors import ZeroDenominatorError
from field import FieldElement, PrimeField, modinv


class FieldArithmeticTest(unittest.TestCase):
    def setUp(self):
        self.field = PrimeField(257)

    def test_operations_reduce_into_range(self):
        f = self.field
        self.assertEqual(f.add(250, 10), 3)
        self.assertEqual(f.sub(3, 10), 250)
        self.assertEqual(f.mul(256, 256), 1)
        self.assertEqual(f.neg(1), 256)
        self.assertEqual(f.neg(0), 0)
        self.assertEqual(f.reduce(-1), 256)

    def test_inverse(self):
        for v in range(1, 257):
            self.assertEqual(self.field.mul(v, self.field.inv(v)), 1)

    def test_inverse_of_zero_fails(self):
        with self.assertRaises(ZeroDenominatorError):
            self.field.inv(0)
        with self.assertRaises(ZeroDenominatorError):
            self.field.inv(257)
        # still an ArithmeticError for callers catching the builtin
        with self.assertRaises(ArithmeticError):
            modinv(514, 257)

    def test_large_prime_inverse(self):
        p = 2**256 - 2**32 - 977
        v = 2**200 + 12345
        self.assertEqual(v * modinv(v, p) % p, 1)

    def test_degenerate_modulus(self):
        for p in (1, 0, -7):
            with self.assertRaises(ZeroDenominatorError):
                PrimeField(p)


class FieldElementTest(unittest.TestCase):
    def test_operators(self):
        a = FieldElement(10, 257)
        b = FieldElement(7, 257)
        self.assertEqual(a + b, FieldElement(17, 257))
        self.assertEqual(FieldElement(250, 257) + a, FieldElement(3, 257))
        self.assertEqual(a * b, FieldElement(70, 257))
        self.assertEqual(b ** 3, FieldElement(343 % 257, 257))
        self.assertTrue(FieldElement(0, 257).is_zero())

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            FieldElement(257, 257)
        with self.assertRaises(ValueError):
            FieldElement(-1, 257)

    def test_different_fields(self):
        with self.assertRaises(TypeError):
            FieldElement(1, 257) + FieldElement(1, 263)

    def test_hashable(self):
        values = {FieldElement(3, 257), FieldElement(3, 257), FieldElement(3, 263)}
        self.assertEqual(len(values), 2)


if __name__ == '__main__':
    unittest.main()
