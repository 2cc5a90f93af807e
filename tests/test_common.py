import random
import unittest

import gmpy2
import numpy as np
import sympy

from modmath.common import (xgcd, bin_gcd, extended_gcd, valid_solution, mod_inverse, co_prime, lcm, ith_bit,
                            is_power_of_two)
from modmath.errors import NonPositiveOperandError
from modmath.utils import random_list, generate_large_primes


class TestExtendedGcd(unittest.TestCase):
    def setUp(self):
        random.seed(0x14_61)
        self.num_count = 200
        self.rands = [random.getrandbits(random.randint(1, 1024)) + 1 for _ in range(self.num_count)]

    def test_reference_vector(self):
        x, y = 693, 609
        res = extended_gcd(x, y)

        self.assertEqual(res.gcd, 21)
        self.assertEqual(res.g, 1)
        self.assertTrue(valid_solution(x, y, res.coef_x, res.coef_y, res.gcd))
        # known pair from the literature, one of many valid ones
        self.assertTrue(valid_solution(x, y, -181, 206, 21))

    def test_random_bezout(self):
        for i in range(0, self.num_count, 2):
            x, y = self.rands[i], self.rands[i + 1]
            res = extended_gcd(x, y)

            self.assertEqual(res.gcd, int(sympy.gcd(x, y)), f'Failed for pair ({x}, {y})')
            self.assertEqual(res.coef_x * x + res.coef_y * y, res.gcd, f'Failed for pair ({x}, {y})')

    def test_coefficients_not_unique(self):
        for i in range(0, self.num_count, 2):
            x, y = self.rands[i], self.rands[i + 1]
            res = extended_gcd(x, y)

            # independently derived pairs solve the same equation
            a, b, d = xgcd(x, y)
            self.assertEqual(d, res.gcd)
            self.assertTrue(valid_solution(x, y, a, b, res.gcd))

            s, t, h = sympy.gcdex(x, y)
            self.assertEqual(h, res.gcd)
            self.assertTrue(valid_solution(x, y, int(s), int(t), res.gcd))

            # shifting along the solution line gives yet another valid pair
            k = random.randint(-10, 10)
            self.assertTrue(valid_solution(x, y, res.coef_x + k * y // res.gcd, res.coef_y - k * x // res.gcd,
                                           res.gcd))

    def test_power_of_two_factor(self):
        res = extended_gcd(12, 18)
        self.assertEqual(res.g, 2)
        self.assertEqual(res.gcd, 6)
        self.assertTrue(valid_solution(12, 18, res.coef_x, res.coef_y, 6))

        res = extended_gcd(1 << 100, 3 << 98)
        self.assertEqual(res.g, 1 << 98)
        self.assertEqual(res.gcd, 1 << 98)
        self.assertTrue(valid_solution(1 << 100, 3 << 98, res.coef_x, res.coef_y, res.gcd))

    def test_equal_operands(self):
        for x in (1, 2, 7, 64, 693, 2 ** 127 - 1):
            res = extended_gcd(x, x)
            self.assertEqual(res.gcd, x)
            self.assertTrue(valid_solution(x, x, res.coef_x, res.coef_y, x))

    def test_one_operand(self):
        res = extended_gcd(1, 97)
        self.assertEqual(res.gcd, 1)
        self.assertTrue(valid_solution(1, 97, res.coef_x, res.coef_y, 1))

    def test_non_positive(self):
        for x, y in [(0, 5), (5, 0), (0, 0), (-3, 5), (5, -3), (-4, -6)]:
            with self.assertRaises(NonPositiveOperandError):
                extended_gcd(x, y)

    def test_mpz(self):
        for i in range(0, 40, 2):
            x, y = gmpy2.mpz(self.rands[i]), gmpy2.mpz(self.rands[i + 1])
            res = extended_gcd(x, y)

            self.assertIsInstance(res.coef_x, type(x))
            self.assertEqual(res.gcd, gmpy2.gcd(x, y))
            self.assertTrue(valid_solution(x, y, res.coef_x, res.coef_y, res.gcd))

    def test_fixed_width(self):
        for kind in (np.int16, np.int32, np.int64):
            res = extended_gcd(kind(693), kind(609))
            self.assertIsInstance(res.gcd, kind)
            self.assertEqual(res.gcd, 21)
            self.assertTrue(valid_solution(693, 609, int(res.coef_x), int(res.coef_y), 21))

        # python ints are pulled into the fixed-width kind
        res = extended_gcd(np.int64(240), 46)
        self.assertIsInstance(res.coef_y, np.int64)
        self.assertEqual(res.gcd, 2)

    def test_fixed_width_random(self):
        rands = random_list(1, 2 ** 30, 100)
        for i in range(0, 100, 2):
            x, y = rands[i], rands[i + 1]
            res = extended_gcd(np.int64(x), np.int64(y))
            self.assertEqual(int(res.gcd), int(sympy.gcd(x, y)))
            self.assertTrue(valid_solution(x, y, int(res.coef_x), int(res.coef_y), int(res.gcd)))

    def test_fixed_width_small_kinds(self):
        # intermediates run past the kind's range even though the result fits
        res = extended_gcd(np.int16(7), np.int16(61))
        self.assertIsInstance(res.coef_x, np.int16)
        self.assertEqual(res.gcd, 1)
        self.assertTrue(valid_solution(7, 61, int(res.coef_x), int(res.coef_y), 1))

        for m in range(2, 128):
            for x in range(1, m):
                res = extended_gcd(np.int16(x), np.int16(m))
                self.assertEqual(int(res.gcd), xgcd(x, m)[2], f'Failed for pair ({x}, {m})')
                self.assertTrue(valid_solution(x, m, int(res.coef_x), int(res.coef_y), int(res.gcd)),
                                f'Failed for pair ({x}, {m})')

        self.assertIsInstance(co_prime(np.int8(7), np.int8(61)), bool)
        self.assertTrue(co_prime(np.int8(7), np.int8(61)))
        self.assertEqual(lcm(np.int8(6), np.int8(20)), 60)

    def test_unsigned_rejected(self):
        with self.assertRaises(TypeError):
            extended_gcd(np.uint32(693), np.uint32(609))

    def test_unsupported_type(self):
        with self.assertRaises(TypeError):
            extended_gcd(6.0, 4)


class TestGcdFamily(unittest.TestCase):

    def test_xgcd(self):
        x, y, d = xgcd(240, 46)
        self.assertEqual(d, 2)
        self.assertEqual(240 * x + 46 * y, 2)

    def test_bin_gcd(self):
        rands = random_list(1, 2 ** 512, 100)
        for i in range(0, 100, 2):
            a, b = rands[i], rands[i + 1]
            self.assertEqual(bin_gcd(a, b), int(sympy.gcd(a, b)))

        self.assertEqual(bin_gcd(np.int32(48), np.int32(18)), 6)
        with self.assertRaises(NonPositiveOperandError):
            bin_gcd(0, 3)

    def test_co_prime(self):
        self.assertTrue(co_prime(35, 64))
        self.assertFalse(co_prime(35, 49))

    def test_lcm(self):
        rands = random_list(1, 2 ** 256, 100)
        for i in range(0, 100, 2):
            a, b = rands[i], rands[i + 1]
            self.assertEqual(lcm(a, b), int(sympy.lcm(a, b)), f'Failed for pair ({a}, {b})')

    def test_bit_lambdas(self):
        self.assertEqual(ith_bit(0b1010, 1), 1)
        self.assertEqual(ith_bit(0b1010, 2), 0)
        self.assertTrue(is_power_of_two(1 << 64))
        self.assertFalse(is_power_of_two(96))
        self.assertFalse(is_power_of_two(0))


class TestModInverse(unittest.TestCase):
    def setUp(self):
        random.seed(2801)
        self.primes = generate_large_primes(3, 256)
        self.num_count = 100

    def test_reference_vectors(self):
        cases = [
            (633, 2801, 177),
            (271, 383, 106),
            (2983498573497, 903455098240, 515317423113),
            (60192921923322822, 427414198414469, 368992488398249),
        ]
        for a, modulus, a_inv in cases:
            act = mod_inverse(a, modulus)
            self.assertEqual(act, a_inv)
            self.assertEqual(a * act % modulus, 1)

    def test_not_invertible(self):
        self.assertIsNone(mod_inverse(61, 17324))
        self.assertIsNone(mod_inverse(6, 9))
        self.assertIsNone(mod_inverse(14, 14))

    def test_invalid_inputs(self):
        self.assertIsNone(mod_inverse(0, 7))
        self.assertIsNone(mod_inverse(-3, 7))
        self.assertIsNone(mod_inverse(3, 0))
        self.assertIsNone(mod_inverse(3, -7))

    def test_modulus_one(self):
        for x in (0, 1, 5, -3, 2 ** 100):
            self.assertEqual(mod_inverse(x, 1), 0)

    def test_prime_moduli(self):
        for p in self.primes:
            for a in random_list(1, p - 1, self.num_count):
                r = mod_inverse(a, p)
                self.assertTrue(0 <= r < p)
                self.assertEqual(a * r % p, 1)
                self.assertEqual(r, int(sympy.mod_inverse(a, p)))

    def test_operand_above_modulus(self):
        for p in self.primes:
            for a in random_list(p + 1, p ** 2, self.num_count):
                r = mod_inverse(a, p)
                if a % p == 0:
                    self.assertIsNone(r)
                    continue
                self.assertTrue(0 <= r < p)
                self.assertEqual(a * r % p, 1)

    def test_composite_moduli(self):
        rands = random_list(2, 2 ** 128, 2 * self.num_count)
        for i in range(0, 2 * self.num_count, 2):
            x, m = rands[i], rands[i + 1]
            r = mod_inverse(x, m)
            if sympy.gcd(x, m) != 1:
                self.assertIsNone(r, f'{x} should have no inverse mod {m}')
            else:
                self.assertTrue(0 <= r < m)
                self.assertEqual(x * r % m, 1, f'Failed for pair ({x}, {m})')

    def test_coefficient_outside_modulus(self):
        # the raw Bezout coefficient lands above the modulus or below its negative for these
        for a, modulus, a_inv in [(27, 47, 7), (55, 24, 7), (45, 38, 11)]:
            self.assertEqual(mod_inverse(a, modulus), a_inv)

    def test_small_moduli_sweep(self):
        for m in range(2, 300):
            for x in range(1, 3 * m):
                r = mod_inverse(x, m)
                if xgcd(x, m)[2] != 1:
                    self.assertIsNone(r, f'{x} should have no inverse mod {m}')
                    continue
                self.assertTrue(0 <= r < m, f'Failed for pair ({x}, {m})')
                self.assertEqual(x * r % m, 1, f'Failed for pair ({x}, {m})')

    def test_int8_sweep(self):
        for m in range(2, 128):
            for x in range(1, m):
                r = mod_inverse(np.int8(x), np.int8(m))
                if xgcd(x, m)[2] != 1:
                    self.assertIsNone(r, f'{x} should have no inverse mod {m}')
                    continue
                self.assertIsInstance(r, np.int8)
                self.assertTrue(0 <= r < m, f'Failed for pair ({x}, {m})')
                self.assertEqual(x * int(r) % m, 1, f'Failed for pair ({x}, {m})')

        self.assertEqual(mod_inverse(np.int8(7), np.int8(61)), 35)
        self.assertEqual(mod_inverse(np.uint8(7), np.uint8(61)), 35)

    def test_mpz_and_fixed_width(self):
        r = mod_inverse(gmpy2.mpz(633), gmpy2.mpz(2801))
        self.assertIsInstance(r, type(gmpy2.mpz(0)))
        self.assertEqual(r, 177)

        r = mod_inverse(np.int32(633), np.int32(2801))
        self.assertIsInstance(r, np.int32)
        self.assertEqual(r, 177)
        self.assertIsNone(mod_inverse(np.int64(61), np.int64(17324)))


if __name__ == '__main__':
    unittest.main()
