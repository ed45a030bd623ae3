"""
Combine two DigitSequences by the bitwise OR of the numbers they represent.
"""

import numbers

from .radix import decode
from .radix import encode
from .radix import integer_from_digits
from .sequence import DigitSequence
from .sequence import type_name


InvalidArgument = DigitSequence.InvalidArgument


def combine(a, b):
    """
    The number a | b, as a new DigitSequence in a's radix.

        combine(encode(5, 3), encode(3, 3)) == [2, 1]   # 5 | 3 == 7 == 2*3 + 1

    Each operand is read in its own radix.  When b is a plain list or tuple of digits,
    it has no radix of its own, so it is read in a's radix.

    Raises combine.InvalidArgument if either operand is missing,
    or if any digit of b is missing or outside its radix.
    """
    if a is None or b is None:
        raise InvalidArgument("Cannot combine with None")
    if not isinstance(a, DigitSequence):
        raise InvalidArgument("First operand must be a DigitSequence, not a {}".format(type_name(a)))

    if isinstance(b, DigitSequence):
        radix_b = b.radix
    else:
        radix_b = a.radix
        # NOTE:  Ambiguous.  Digits with no declared radix might have been meant in another.
    value = decode(a) | integer_from_digits(_checked_digits(b, radix_b), radix_b)
    return encode(value, a.radix)


combine.InvalidArgument = InvalidArgument


def _checked_digits(digits, radix):
    try:
        digits = list(digits)
    except TypeError:
        raise InvalidArgument("Second operand must be digits, not a {}".format(type_name(digits)))
    for index, digit in enumerate(digits):
        if digit is None:
            raise InvalidArgument("Digit {} is missing".format(index))
        if isinstance(digit, bool) or not isinstance(digit, numbers.Integral):
            raise InvalidArgument("Digit {index} is a {type}, not an integer".format(
                index=index,
                type=type_name(digit),
            ))
        if not 0 <= digit < radix:
            raise InvalidArgument("Digit {index} is {digit}, out of range for radix {radix}".format(
                index=index,
                digit=digit,
                radix=radix,
            ))
    return digits
