"""
Radix codec:  arbitrary-precision integers to and from DigitSequences, and their text renderings.

    encode(10, 3)        -->  DigitSequence(radix=3, digits=[1, 0, 1])
    decode(that)         -->  10
    render_radix_text    -->  '101'
    render_decimal_text  -->  '10'
"""

import numbers
import re

from .sequence import character_from_digit
from .sequence import DigitSequence
from .sequence import type_name


DECIMAL_RADIX = 10
DECIMAL_PATTERN = re.compile(r'^[+-]?[0-9]+$')


def encode(value, radix):
    """
    Make a DigitSequence from a non-negative integer.

    Divide by radix repeatedly.  The remainders are the digits, least significant first.
    The sequence holds them most significant first.  Zero is [0], never empty.
    """
    radix = DigitSequence.valid_radix(radix)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError("Cannot encode a {}".format(type_name(value)))
    if value < 0:
        raise ValueError("Cannot encode a negative integer:  {}".format(value))
    sequence = DigitSequence(radix)
    if value == 0:
        sequence.append(0)
        return sequence
    remainders = []
    while value > 0:
        value, remainder = divmod(value, radix)
        remainders.append(remainder)
    sequence.extend(reversed(remainders))
    return sequence
assert [1, 0, 1] == encode(10, 3)
assert [0] == encode(0, 3)


def integer_from_digits(digits, radix):
    """Horner evaluation of any iterable of digits, most significant first."""
    result = 0
    for digit in digits:
        result = result * radix + digit
    return result
assert 10 == integer_from_digits([1, 0, 1], 3)


def decode(sequence):
    """Horner evaluation, most significant digit first.  Empty is 0."""
    return integer_from_digits(sequence, sequence.radix)
assert 10 == decode(encode(10, 3))


def change_radix(sequence, radix):
    """A new sequence for the same number in another radix.  The original is untouched."""
    return encode(decode(sequence), radix)
assert [1, 2] == change_radix(encode(10, 3), 8)


def parse_decimal_text(text, radix=DECIMAL_RADIX):
    """
    Make a DigitSequence from the decimal digits of a non-negative integer.

    Surrounding whitespace is ignored.
        ''       --> [0]
        '+42'    --> same as '42'
        '-5'     --> empty sequence
        'hello'  --> empty sequence

    Negative or malformed text is not an error.  It silently becomes an empty sequence.

    radix - of the sequence produced.  The text is always decimal.
    """
    if text is None:
        raise DigitSequence.InvalidArgument("Decimal text cannot be None")
    text = text.strip()
    if text == '':
        return encode(0, radix)
    if text.startswith('+'):
        text = text[1:]
    elif text.startswith('-'):
        return DigitSequence(radix)

    if not DECIMAL_PATTERN.match(text):
        return DigitSequence(radix)
    value = int(text, DECIMAL_RADIX)
    if value < 0:
        return DigitSequence(radix)
        # NOTE:  Only reachable by way of '+-' text, e.g. '+-5'.  (Whereas '+-0' is zero.)
    return encode(value, radix)
assert [4, 2] == parse_decimal_text(' 42 ')
assert [] == parse_decimal_text('-5')


def render_decimal_text(sequence):
    """Decimal digits of the number.  Zero and empty are both '0'."""
    return str(decode(sequence))


def render_radix_text(sequence):
    """
    The digits themselves as characters, 0-9 then A-Z, no separators.

        render_radix_text(encode(10, 3)) == '101'
        render_radix_text(encode(255, 16)) == 'FF'

    An empty sequence renders as ''.
    """
    return ''.join(character_from_digit(digit) for digit in sequence)
assert 'FF' == render_radix_text(encode(255, 16))
