"""
Testing digitlist combine.py
"""

import unittest

from digitlist.combine import combine
from digitlist.radix import decode
from digitlist.radix import encode
from digitlist.sequence import DigitSequence


class CombineTests(unittest.TestCase):

    def test_five_or_three(self):
        seven = combine(encode(5, 3), encode(3, 3))
        self.assertEqual([2, 1], seven)   # 7 == 2*3 + 1
        self.assertEqual(3, seven.radix)
        self.assertEqual(7, decode(seven))

    def test_mixed_radix(self):
        result = combine(encode(10, 3), encode(5, 8))
        self.assertEqual(10 | 5, decode(result))
        self.assertEqual(3, result.radix)

    def test_result_in_first_radix(self):
        result = combine(encode(5, 8), encode(10, 3))
        self.assertEqual(8, result.radix)
        self.assertEqual([1, 7], result)   # 15 == 1*8 + 7

    def test_zero(self):
        self.assertEqual([0], combine(encode(0, 3), encode(0, 8)))
        self.assertEqual(encode(42, 3), combine(encode(42, 3), encode(0, 8)))

    def test_empty_operands_are_zero(self):
        self.assertEqual([0], combine(DigitSequence(3), DigitSequence(8)))
        self.assertEqual([1, 0, 1], combine(DigitSequence(3), encode(10, 8)))

    def test_big(self):
        a = 2**200
        b = 2**100 + 1
        self.assertEqual(a | b, decode(combine(encode(a, 3), encode(b, 8))))

    def test_operands_untouched(self):
        a = encode(5, 3)
        b = encode(3, 8)
        combine(a, b)
        self.assertEqual([1, 2], a)
        self.assertEqual([3], b)

    def test_new_sequence(self):
        a = encode(5, 3)
        result = combine(a, encode(0, 3))
        self.assertEqual(a, result)
        self.assertIsNot(a, result)

    def test_plain_digits_use_first_radix(self):
        self.assertEqual([2, 1], combine(encode(5, 3), [1, 0]))   # [1, 0] in radix 3 is 3
        self.assertEqual([2, 1], combine(encode(5, 3), (1, 0)))

    def test_none(self):
        with self.assertRaises(combine.InvalidArgument):
            combine(None, encode(1, 3))
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(1, 3), None)

    def test_first_not_a_sequence(self):
        with self.assertRaises(combine.InvalidArgument):
            combine([1, 0], encode(1, 3))

    def test_missing_digit(self):
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(5, 3), [1, None])

    def test_digit_out_of_range(self):
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(5, 3), [1, 3])
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(5, 3), [-1])

    def test_digit_not_an_integer(self):
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(5, 3), [1.0])
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(5, 3), '10')

    def test_not_digits(self):
        with self.assertRaises(combine.InvalidArgument):
            combine(encode(5, 3), 10)

    def test_invalid_argument_is_value_error(self):
        self.assertTrue(issubclass(combine.InvalidArgument, ValueError))
        self.assertIs(DigitSequence.InvalidArgument, combine.InvalidArgument)


if __name__ == '__main__':
    unittest.main()
